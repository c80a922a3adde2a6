"""Subprocess execution for srcfetch."""

from srcfetch.adapters.process.runner import ProcessHandle, ProcessRunner, format_trace

__all__ = ["ProcessHandle", "ProcessRunner", "format_trace"]

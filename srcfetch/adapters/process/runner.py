"""Subprocess runner shared by all VCS backends.

Commands are always passed to the OS as argument vectors (never through a
shell) and always run in an explicit, fully resolved working directory.
A ProcessHandle starts its process exactly once: either attached to the
caller's console (wait_for_exit/expect_exit) or with one output stream piped
back as a list of lines (capture_stdout/capture_stderr).
"""

import logging
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any, TextIO

from srcfetch.domain.config import ExecConfig
from srcfetch.domain.entities import Command
from srcfetch.domain.exceptions import (
    CommandFailedError,
    ExecutionError,
    HandleConsumedError,
    PathResolutionError,
)

logger = logging.getLogger(__name__)


def resolve_working_dir(path: Path) -> Path:
    """Resolve a working directory to its canonical, symlink-free form.

    Args:
        path: Directory to resolve (relative paths are taken from the cwd).

    Returns:
        Absolute real path of the directory.

    Raises:
        PathResolutionError: If the path is missing, is not a directory, or
                             cannot be canonicalized (permissions, symlink loop).
    """
    try:
        real = Path(path).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise PathResolutionError(f"Cannot resolve working directory '{path}': {e}") from e
    if not real.is_dir():
        raise PathResolutionError(f"Working directory '{path}' is not a directory")
    return real


def format_trace(cwd: Path, command: Sequence[str]) -> str:
    """Render a command and its working directory for the debug trace.

    The program sits on its own line; each remaining argument gets a line,
    except that a flag and the argument right after it share one.

    Example:
        Exec in /home/me/work
          git
             clone
             -q https://example.com/r.git
             proj
    """
    lines = [f"Exec in {cwd}", f"  {command[0]}"]
    pending: str | None = None
    for arg in command[1:]:
        if pending is not None:
            lines.append(f"{pending} {arg}")
            pending = None
        elif arg.startswith("-"):
            pending = f"     {arg}"
        else:
            lines.append(f"     {arg}")
    if pending is not None:
        lines.append(pending)
    return "\n".join(lines) + "\n"


class ProcessHandle:
    """A prepared, not yet started, external process.

    Each handle may be consumed once. Calling a second consuming method
    raises HandleConsumedError instead of launching the process again.
    """

    def __init__(self, command: Command, cwd: Path) -> None:
        self.command = command
        self.cwd = cwd
        self._consumed = False

    @property
    def program(self) -> str:
        return self.command[0]

    @property
    def consumed(self) -> bool:
        return self._consumed

    def wait_for_exit(self) -> int:
        """Run attached to the caller's console and wait for it to exit.

        Stdin, stdout and stderr are inherited so that credential prompts
        and progress output reach the user unmodified.

        Returns:
            The process exit code.

        Raises:
            ExecutionError: If the process cannot be started or the wait is
                            interrupted.
        """
        with self._start() as proc:
            return self._wait(proc)

    def expect_exit(self, expected_code: int, on_error: str) -> None:
        """Run like wait_for_exit and require a specific exit code.

        Args:
            expected_code: Exit code that counts as success.
            on_error: Message for the error raised on any other code.

        Raises:
            CommandFailedError: If the exit code differs from expected_code.
            ExecutionError: If the process cannot be started or is interrupted.
        """
        code = self.wait_for_exit()
        if code != expected_code:
            raise CommandFailedError(on_error, exit_code=code, command=self.command)

    def capture_stdout(self) -> list[str]:
        """Run with stdout piped and return its lines in order.

        Stdin and stderr are attached to the null device. The exit code is
        not checked.
        """
        return self._capture("stdout")

    def capture_stderr(self) -> list[str]:
        """Run with stderr piped and return its lines in order.

        Stdin and stdout are attached to the null device. The exit code is
        not checked.
        """
        return self._capture("stderr")

    def _capture(self, stream_name: str) -> list[str]:
        streams = {
            "stdin": subprocess.DEVNULL,
            "stdout": subprocess.DEVNULL,
            "stderr": subprocess.DEVNULL,
        }
        streams[stream_name] = subprocess.PIPE
        with self._start(encoding="utf-8", errors="replace", **streams) as proc:
            pipe = getattr(proc, stream_name)
            try:
                lines = [line.rstrip("\n") for line in pipe]
            except KeyboardInterrupt as e:
                proc.kill()
                raise ExecutionError(f"Interrupted while reading output of '{self.program}'") from e
            self._wait(proc)
        return lines

    def _start(self, **kwargs: Any) -> subprocess.Popen:
        if self._consumed:
            raise HandleConsumedError(
                f"Process handle for '{self.program}' was already used",
                hint="Prepare a fresh handle for every run",
            )
        self._consumed = True
        logger.debug("Starting %s in %s", list(self.command), self.cwd)
        try:
            return subprocess.Popen(list(self.command), cwd=self.cwd, **kwargs)
        except OSError as e:
            raise ExecutionError(f"Failed to start '{self.program}': {e}") from e

    def _wait(self, proc: subprocess.Popen) -> int:
        try:
            code = proc.wait()
        except KeyboardInterrupt as e:
            proc.kill()
            proc.wait()
            raise ExecutionError(f"Interrupted while waiting for '{self.program}'") from e
        logger.debug("%s exited with code %d", self.program, code)
        return code


class ProcessRunner:
    """Prepares process handles in resolved working directories.

    Args:
        config: Execution settings; debug enables the command trace.
        trace: Stream the trace is written to (default: sys.stderr).
    """

    def __init__(self, config: ExecConfig | None = None, trace: TextIO | None = None) -> None:
        self._config = config or ExecConfig()
        self._trace = trace

    @property
    def config(self) -> ExecConfig:
        return self._config

    def prepare(self, working_dir: Path | str, *command: str) -> ProcessHandle:
        """Bind a command to a working directory without starting it.

        Args:
            working_dir: Directory to run in; resolved to its real path.
            *command: Program name followed by its arguments.

        Returns:
            A single-use ProcessHandle.

        Raises:
            ValueError: If no program is given.
            PathResolutionError: If working_dir cannot be resolved.
        """
        if not command:
            raise ValueError("command must include a program name")
        real_cwd = resolve_working_dir(Path(working_dir))
        if self._config.debug:
            stream = self._trace if self._trace is not None else sys.stderr
            stream.write(format_trace(real_cwd, command))
            stream.flush()
        return ProcessHandle(tuple(command), real_cwd)

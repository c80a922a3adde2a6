"""Factory for wiring configuration, the process runner and VCS backends.

Keeps the CLI layer free from direct adapter construction.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from srcfetch.domain.config import SrcfetchConfig
    from srcfetch.domain.entities import VcsKind
    from srcfetch.ports.config import ConfigProvider
    from srcfetch.ports.vcs import VcsBackend


class ConfigFactory:
    """Factory for creating configuration providers."""

    def create_config_provider(self) -> ConfigProvider:
        from srcfetch.adapters.config.toml_config_provider import TomlConfigProvider

        return TomlConfigProvider()

    def load(self, project_dir: Path) -> SrcfetchConfig:
        return self.create_config_provider().load(project_dir)


class BackendFactory:
    """Factory for VCS backends driven by one configured ProcessRunner.

    Args:
        config: Loaded configuration; exec.debug controls the command trace.
        force_debug: Enable the trace regardless of config.
    """

    def __init__(self, config: SrcfetchConfig, force_debug: bool = False) -> None:
        from srcfetch.adapters.process.runner import ProcessRunner
        from srcfetch.adapters.vcs.registry import VcsBackends

        exec_config = config.exec
        if force_debug:
            exec_config = replace(exec_config, debug=True)
        self._config = config
        self._backends = VcsBackends(ProcessRunner(exec_config))

    def create_backend(self, kind: VcsKind | None = None) -> VcsBackend:
        """Return the backend for kind, or for the configured default kind.

        Raises:
            UnsupportedVcsError: If kind has no backend.
        """
        return self._backends.get(kind if kind is not None else self._config.vcs.default_kind)

"""Config domain models for srcfetch.

Configuration is stored in .srcfetch/config.toml (with a global fallback) and
represents user preferences for process execution and VCS selection. This
module defines the domain models that represent validated configuration state.
"""

from dataclasses import dataclass, field, replace
from typing import Any

from srcfetch.domain.entities import VcsKind
from srcfetch.domain.exceptions import UnsupportedVcsError


@dataclass(frozen=True)
class ExecConfig:
    """Configuration for external process execution.

    Attributes:
        debug: Write a trace of each command and its working directory to
               the diagnostic stream before it is started.
    """

    debug: bool = False

    def __post_init__(self) -> None:
        """Validate exec config after initialization."""
        if not isinstance(self.debug, bool):
            raise ValueError(f"debug must be a boolean, got {self.debug!r}")


@dataclass(frozen=True)
class VcsConfig:
    """Configuration for VCS selection.

    Attributes:
        default: VCS used when a command does not name one (git, hg or svn).

    Raises:
        ValueError: If default does not name a known VCS.
    """

    default: str = "git"

    def __post_init__(self) -> None:
        """Validate vcs config after initialization."""
        if not isinstance(self.default, str):
            raise ValueError(f"default must be a string, got {self.default!r}")
        try:
            VcsKind.parse(self.default)
        except UnsupportedVcsError as e:
            raise ValueError(e.message) from e

    @property
    def default_kind(self) -> VcsKind:
        return VcsKind.parse(self.default)


@dataclass(frozen=True)
class SrcfetchConfig:
    """Complete srcfetch configuration.

    Attributes:
        exec: Process execution configuration
        vcs: VCS selection configuration
    """

    exec: ExecConfig = field(default_factory=ExecConfig)
    vcs: VcsConfig = field(default_factory=VcsConfig)

    @staticmethod
    def default() -> "SrcfetchConfig":
        """Create a config with all default values."""
        return SrcfetchConfig(exec=ExecConfig(), vcs=VcsConfig())

    @staticmethod
    def from_partial(base: "SrcfetchConfig", data: dict[str, Any]) -> "SrcfetchConfig":
        """Overlay raw TOML data on top of an existing config.

        Only keys present in data are replaced; each section is rebuilt so its
        validation runs again on the merged values.

        Args:
            base: Config to start from.
            data: Parsed TOML data, keyed by section name.

        Returns:
            New SrcfetchConfig with the overrides applied.

        Raises:
            ValueError: If a section is not a table, has unknown keys, or
                        fails validation.
        """
        sections = {"exec": base.exec, "vcs": base.vcs}
        merged: dict[str, Any] = {}
        for name, current in sections.items():
            overrides = data.get(name, {})
            if not isinstance(overrides, dict):
                raise ValueError(f"[{name}] must be a table, got {overrides!r}")
            try:
                merged[name] = replace(current, **overrides)
            except TypeError as e:
                raise ValueError(f"Invalid key in [{name}]: {e}") from e
        return SrcfetchConfig(**merged)

"""TOML-based configuration provider.

Loads configuration from .srcfetch/config.toml with global config fallback.

Config loading priority (highest to lowest):
1. Local: <project>/.srcfetch/config.toml
2. Global: ~/.config/srcfetch/config.toml (user defaults)
3. Built-in defaults
"""

import logging
from pathlib import Path

from srcfetch.domain.config import SrcfetchConfig
from srcfetch.shared.config_io import (
    get_global_config_path,
    get_local_config_path,
    load_config_data,
)

logger = logging.getLogger(__name__)


class TomlConfigProvider:
    """Configuration provider that loads from TOML files.

    Local values override global values key by key; anything missing falls
    back to built-in defaults. Missing or invalid files are skipped with a
    warning.
    """

    def load(self, project_dir: Path) -> SrcfetchConfig:
        """Load configuration with global fallback.

        Args:
            project_dir: Directory containing the .srcfetch directory

        Returns:
            SrcfetchConfig instance with merged global/local values or defaults
        """
        config = SrcfetchConfig.default()

        for scope, path in (
            ("global", get_global_config_path()),
            ("local", get_local_config_path(project_dir)),
        ):
            if not path.exists():
                continue
            try:
                data = load_config_data(path)
                config = SrcfetchConfig.from_partial(config, data)
                logger.debug("Loaded %s config from %s", scope, path)
            except (FileNotFoundError, ValueError) as e:
                logger.warning(
                    "Failed to parse %s config at %s: %s. Ignoring it.",
                    scope,
                    path,
                    e,
                )

        return config

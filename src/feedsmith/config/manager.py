"""Configuration manager for loading and saving Feedsmith config."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from feedsmith.config.schema import GlobalConfig
from feedsmith.utils import paths
from feedsmith.utils.errors import InvalidConfigError


def get_default_config_content() -> str:
    """Render the default config.yaml content."""
    data = GlobalConfig().model_dump(mode="json")
    header = "# Feedsmith configuration\n# Selectors under ivoox.selectors follow the site's markup.\n\n"
    return header + yaml.safe_dump(data, default_flow_style=False, sort_keys=False)


class ConfigManager:
    """Manages Feedsmith configuration files."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Optional custom config directory. Defaults to XDG config dir.
        """
        if config_dir is None:
            self.config_dir = paths.get_config_dir()
        else:
            self.config_dir = config_dir
        self.config_file = self.config_dir / "config.yaml"

    def load_config(self) -> GlobalConfig:
        """Load and validate global configuration.

        Returns:
            Validated GlobalConfig instance

        Raises:
            InvalidConfigError: If config is invalid
        """
        if not self.config_file.exists():
            self._create_default_config()
            return GlobalConfig()

        try:
            with open(self.config_file) as f:
                data = yaml.safe_load(f) or {}
            return GlobalConfig(**data)
        except (yaml.YAMLError, ValidationError, TypeError) as e:
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_file}: {e}"
            ) from e

    def save_config(self, config: GlobalConfig) -> None:
        """Save global configuration.

        Args:
            config: GlobalConfig instance to save
        """
        data = config.model_dump(mode="json")

        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    def _create_default_config(self) -> None:
        """Create default config.yaml file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(get_default_config_content())

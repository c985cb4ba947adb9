"""Configuration manager for loading and saving careerlog config."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from careerlog.config.schema import GlobalConfig
from careerlog.utils.errors import InvalidConfigError
from careerlog.utils.paths import get_config_dir

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages the careerlog configuration file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Optional custom config directory. Defaults to the
                platform config dir (or ``CAREERLOG_CONFIG_DIR``).
        """
        self.config_dir = config_dir if config_dir is not None else get_config_dir()
        self.config_file = self.config_dir / "config.yaml"

    def load_config(self) -> GlobalConfig:
        """Load and validate global configuration.

        Returns:
            Validated GlobalConfig instance

        Raises:
            InvalidConfigError: If config is invalid
        """
        if not self.config_file.exists():
            config = GlobalConfig()
            self.save_config(config)
            return config

        try:
            with open(self.config_file, encoding="utf-8") as f:
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

        with open(self.config_file, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    def set_value(self, key: str, value: str) -> GlobalConfig:
        """Set a single configuration value by dotted key.

        Args:
            key: Dotted path such as ``log_level`` or ``amazon.region``
            value: Raw string value; the schema coerces it

        Returns:
            The updated configuration

        Raises:
            InvalidConfigError: If the key is unknown or the value invalid
        """
        config = self.load_config()
        data: dict[str, Any] = config.model_dump(mode="json")

        parts = key.split(".")
        target = data
        for part in parts[:-1]:
            if not isinstance(target.get(part), dict):
                raise InvalidConfigError(f"Unknown config key: {key}")
            target = target[part]

        if parts[-1] not in target or isinstance(target[parts[-1]], dict):
            raise InvalidConfigError(f"Unknown config key: {key}")

        target[parts[-1]] = value

        try:
            updated = GlobalConfig(**data)
        except ValidationError as e:
            raise InvalidConfigError(f"Invalid value for {key}: {e}") from e

        self.save_config(updated)
        logger.debug(f"Set {key} = {value}")
        return updated

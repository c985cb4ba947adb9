"""Configuration, credentials and logging for careerlog."""

from careerlog.config.credentials import (
    Credentials,
    XCredentials,
    apply_environment_overrides,
    load_environment,
    resolve_credentials,
)
from careerlog.config.manager import ConfigManager
from careerlog.config.schema import GlobalConfig

__all__ = [
    "ConfigManager",
    "GlobalConfig",
    "Credentials",
    "XCredentials",
    "resolve_credentials",
    "apply_environment_overrides",
    "load_environment",
]

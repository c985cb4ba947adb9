"""Filesystem locations for careerlog's own configuration."""

import os
from pathlib import Path

from platformdirs import user_config_dir

CONFIG_DIR_ENV = "CAREERLOG_CONFIG_DIR"


def get_config_dir() -> Path:
    """Return the configuration directory.

    ``CAREERLOG_CONFIG_DIR`` wins over the platform default so CI jobs can
    keep config next to the repository.
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path(user_config_dir("careerlog"))

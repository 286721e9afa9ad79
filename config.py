"""Centralized configuration for environment variables."""

import logging
import os

from data.run_expectancy import RE288_DEFAULT, RunExpectancyTable, load_run_expectancy_table

LOG_LEVEL_ENV = "PITCH_RECON_LOG_LEVEL"
RE288_PATH_ENV = "PITCH_RECON_RE288_PATH"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"

# Home-plate reference point on the spray chart (pixels), used when a venue
# has no coordinates of its own.
DEFAULT_HOME_PLATE_X = 125.42
DEFAULT_HOME_PLATE_Y = 198.27


class ConfigError(Exception):
    """Raised when a configured value cannot be used."""

    def __init__(self, message: str, env_var: str | None = None):
        self.env_var = env_var
        super().__init__(message)


def get_log_level() -> int:
    """Return the configured logging level, defaulting to WARNING."""
    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log level {name!r}", env_var=LOG_LEVEL_ENV)
    return level


def configure_logging() -> None:
    """Install the standard log format at the configured level."""
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)


def get_re288_path() -> str:
    """Return the RE288 override path, or empty string if not set."""
    return os.environ.get(RE288_PATH_ENV, "")


def load_run_expectancy() -> RunExpectancyTable:
    """Return the RE288 table from the configured file, else the default table."""
    path = get_re288_path()
    if not path:
        return dict(RE288_DEFAULT)
    try:
        return load_run_expectancy_table(path)
    except (OSError, ValueError) as exc:
        raise ConfigError(
            f"Cannot load run expectancy table from {path}: {exc}",
            env_var=RE288_PATH_ENV,
        ) from exc

"""
Application configuration loaded from per-environment TOML files.
"""
import logging
import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from emissions_tracker.utils.constants import ConfigFile

CONFIG_DIR = Path(__file__).parent / "configs"

logger = logging.getLogger(__name__)


class Config:
    """Parsed configuration file. Sections are exposed through ``data``."""

    def __init__(self, config_file: str, data: dict[str, Any]):
        self.config_file = config_file
        self.data = data

    def section(self, name: str) -> dict[str, Any]:
        return self.data.get(name, {})

    def __repr__(self):
        return f"<Config: {self.config_file}>"


@lru_cache
def get_config(config_file: str = ConfigFile.DEVELOPMENT) -> Config:
    """
    Load a configuration file from the configs directory.

    Args:
        config_file: Configuration file name (e.g., "test.toml")

    Returns:
        Config instance

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = CONFIG_DIR / config_file
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "rb") as f:
        data = tomllib.load(f)

    logger.debug(f"Loaded config from {path}")
    return Config(config_file, data)


def get_environment_config() -> Config:
    """Load the config for the environment named by ``ENVIRONMENT``."""
    env = os.getenv("ENVIRONMENT", "development")
    return get_config(f"{env}.toml")

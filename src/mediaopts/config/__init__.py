"""Configuration file loading and path policy."""

from .config import Config
from .paths import default_config_path

__all__ = ["Config", "default_config_path"]

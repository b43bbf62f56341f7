"""Configuration management for mediaopts."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from mediaopts.config.paths import default_config_path
from mediaopts.features.values import IllegalValueError
from mediaopts.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects converted from TOML strings."""

    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Settings read from the optional TOML config file.

    Command line options always win; these values only fill in what the
    command line leaves unset.
    """

    # Log file used when --log-file is not given
    log_file: Path | None = _path_field()

    # Level name for the log file handler
    file_log_level: str = "fine"

    def __post_init__(self) -> None:
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)
            elif value is not None and not isinstance(value, Path):
                raise IllegalValueError(f.name, value)
        if not isinstance(self.file_log_level, str):
            raise IllegalValueError("file_log_level", self.file_log_level)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from ``config_file`` or the default location.

        A missing file yields the defaults. Unknown keys are ignored with a
        warning.

        Raises:
            tomllib.TOMLDecodeError: If the file is not valid TOML.
            IllegalValueError: If a known key holds a value of the wrong type.
        """
        path = config_file or default_config_path()
        if not path.exists():
            logger.debug("No configuration file at %s", path)
            return cls()

        try:
            with open(path, "rb") as f:
                config_dict = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.error("Failed to load configuration from %s: %s", path, e)
            raise

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys in %s: %s", path, ", ".join(unknown))

        logger.debug("Configuration loaded from %s", path)
        return cls(**{key: value for key, value in config_dict.items() if key in known})


__all__ = ["Config"]

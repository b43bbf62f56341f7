"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Configure the shared application logger and its handlers.
Why: The CLI reconfigures logging once ``--log`` and ``--log-file`` are bound.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import EventRichHandler

LOGGER_NAME: Final[str] = "mediaopts"
LOG_FILE_MAX_BYTES: Final[int] = 10 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 5


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """Set up and configure the application logger.

    Args:
        log_file: Path to the log file. If None, only console logging is enabled.
        console_level: Logging level for console output.
        file_level: Logging level for file output.
        console: Console to log to. Defaults to standard error.

    Returns:
        logging.Logger: Configured logger instance.
    """
    configured = logging.getLogger(LOGGER_NAME)
    configured.setLevel(min(console_level, file_level) if log_file else console_level)

    for handler in list(configured.handlers):
        handler.close()
    configured.handlers.clear()

    console_handler = EventRichHandler(console=console or Console(stderr=True, soft_wrap=True))
    console_handler.setLevel(console_level)
    configured.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        os.makedirs(resolved_log_file.parent, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        configured.addHandler(file_handler)

    return configured


# Handlers are attached by setup_logger(); until then records propagate to root.
logger: Final[logging.Logger] = logging.getLogger(LOGGER_NAME)


__all__ = ["LOGGER_NAME", "logger", "setup_logger"]

from __future__ import annotations

import logging
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

from .config import get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
        level: Union[int, str, None] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure the root logger.

    Modes:
    - JSON (default)
    - plain text (local development)

    Selection order for the format:
        1) force_format argument ("json" or "plain") if provided
        2) LOG_FORMAT setting
    Level falls back to the LOG_LEVEL setting.
    """
    settings = get_settings()
    format_mode = (force_format or settings.log_format).lower()
    if level is None:
        level = settings.log_level

    logger = logging.getLogger()
    logger.setLevel(level)

    handler = logging.StreamHandler()

    if format_mode == "plain":
        formatter = logging.Formatter(LOG_FORMAT)
    else:
        formatter = jsonlogger.JsonFormatter(LOG_FORMAT)

    handler.setFormatter(formatter)

    # Replace any existing handlers to avoid duplicate logs
    logger.handlers.clear()
    logger.addHandler(handler)

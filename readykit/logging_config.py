"""Logging setup for applications embedding the engine."""

import logging
from typing import Optional, Union

from readykit.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """
    Configure root logging.

    The engine itself only creates module loggers; call this from the
    embedding application (or a script) to see its output. The level
    defaults to READYKIT_LOG_LEVEL.
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("readykit").setLevel(level)

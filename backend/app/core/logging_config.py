"""Application logging configuration helpers."""

import logging
import sys

from .config import settings

_STREAM_HANDLER_NAME = "course_platform.stdout"
_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging() -> logging.Logger:
    """Configure stdout logging at ``LOG_LEVEL``. Safe to call more than once."""

    log_level_name = settings.LOG_LEVEL.upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    already_has_stream_handler = any(
        getattr(handler, "name", "") == _STREAM_HANDLER_NAME for handler in root_logger.handlers
    )
    if not already_has_stream_handler:
        stream_handler = logging.StreamHandler(stream=sys.stdout)
        stream_handler.name = _STREAM_HANDLER_NAME
        stream_handler.setLevel(log_level)
        stream_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root_logger.addHandler(stream_handler)

    return logging.getLogger("course_platform")


__all__ = ["setup_logging"]

from __future__ import annotations

import logging
import sys
from logging.config import dictConfig

LOG_FORMAT = "%(levelprefix)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO", *, use_colors: bool | None = None) -> None:
    """Send log records to stderr so ``nail-calc`` keeps stdout for the result.

    Colors follow whether stderr is a terminal unless ``use_colors`` is given.
    """

    normalized_level = getattr(logging, level.upper(), logging.INFO)
    if use_colors is None:
        use_colors = sys.stderr.isatty()

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "cli": {
                    "()": "uvicorn.logging.DefaultFormatter",
                    "fmt": LOG_FORMAT,
                    "use_colors": use_colors,
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "formatter": "cli",
                    "stream": "ext://sys.stderr",
                }
            },
            "root": {
                "handlers": ["stderr"],
                "level": normalized_level,
            },
        }
    )

"""
Org Chart — Logging Setup

Console logging for the org_chart package via dictConfig.
"""

import logging
from logging.config import dictConfig

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": LOG_FORMAT,
            }
        },
        "handlers": {
            "console": {
                "level": level,
                "class": "logging.StreamHandler",
                "formatter": "standard",
            },
        },
        "loggers": {
            "org_chart": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
    })
    logging.getLogger(__name__).debug("Logging configured at %s", level)

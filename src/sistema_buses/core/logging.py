from __future__ import annotations

import logging
import logging.config

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str) -> None:
    log_level = level.upper()
    # httpx logs every request at INFO; keep it one notch quieter than ours
    http_level = "DEBUG" if log_level == "DEBUG" else "WARNING"

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": DEFAULT_LOG_FORMAT},
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
            }
        },
        "root": {"handlers": ["default"], "level": log_level},
        "loggers": {
            "httpx": {"handlers": ["default"], "level": http_level, "propagate": False},
            "httpcore": {"handlers": ["default"], "level": http_level, "propagate": False},
        },
    }

    logging.config.dictConfig(logging_config)

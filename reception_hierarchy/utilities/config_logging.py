# reception_hierarchy/utilities/config_logging.py
from __future__ import annotations

import copy
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional

LOGGING: Dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "WARNING",
            "formatter": "simple",
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "verbose",
            "filename": "logs/reception_hierarchy.log",
            "maxBytes": 5_000_000,
            "backupCount": 5,
            "encoding": "utf-8",
        },
    },
    "loggers": {
        # root logger
        "": {
            "level": "DEBUG",
            "handlers": ["console", "file"],
        },
        # openpyxl complains about every styled header cell
        "openpyxl": {"level": "ERROR", "propagate": True},
    },
}


def configure_logging(
    log_file: Optional[Path] = None, console_level: str = "WARNING"
) -> Dict[str, Any]:
    """Apply a copy of ``LOGGING``.

    The rotating file handler is only installed when ``log_file`` is given;
    its parent directory is created on demand. Returns the applied mapping.
    """
    config = copy.deepcopy(LOGGING)
    config["handlers"]["console"]["level"] = console_level.upper()
    if log_file is None:
        del config["handlers"]["file"]
        config["loggers"][""]["handlers"] = ["console"]
    else:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        config["handlers"]["file"]["filename"] = str(log_file)
    logging.config.dictConfig(config)
    return config

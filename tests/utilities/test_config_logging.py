from __future__ import annotations

import logging

from reception_hierarchy.utilities.config_logging import LOGGING, configure_logging


def test_configure_logging_console_only_by_default():
    config = configure_logging()

    assert "file" not in config["handlers"]
    assert config["loggers"][""]["handlers"] == ["console"]
    # module-level mapping stays untouched
    assert "file" in LOGGING["handlers"]


def test_configure_logging_with_file(tmp_path):
    log_file = tmp_path / "logs" / "run.log"

    config = configure_logging(log_file, "info")
    logging.getLogger("reception_hierarchy.test").debug("hello file")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert config["handlers"]["console"]["level"] == "INFO"
    assert log_file.exists()
    assert "hello file" in log_file.read_text(encoding="utf-8")

    # release the file handler for the remaining tests
    configure_logging()

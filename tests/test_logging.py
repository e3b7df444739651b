from __future__ import annotations

import logging

from cssdice.utils.logging import ROOT_LOGGER_NAME, configure_logging, get_logger


def test_get_logger_namespacing() -> None:
    assert get_logger("cssdice.content").name == "cssdice.content"
    assert get_logger("cssdice").name == "cssdice"
    assert get_logger("plugin").name == "cssdice.plugin"


def test_configure_logging_idempotent() -> None:
    logger = configure_logging("DEBUG")
    count = len(logger.handlers)
    configure_logging("INFO")
    assert len(logger.handlers) == count
    assert logger.level == logging.INFO
    assert logger.name == ROOT_LOGGER_NAME

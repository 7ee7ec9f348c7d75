import logging

import pytest

from weather_now.logging_config import LOG_FORMAT, configure_logging, logger_levels


@pytest.fixture(autouse=True)
def restore_logging():
    names = ["", "uvicorn", "uvicorn.access", "uvicorn.error", "fastapi", "httpx", "httpcore"]
    saved = {
        name: (logging.getLogger(name).level, logging.getLogger(name).handlers[:],
               logging.getLogger(name).propagate)
        for name in names
    }
    yield
    for name, (level, handlers, propagate) in saved.items():
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers[:] = handlers
        logger.propagate = propagate


def test_httpx_quiet_at_info():
    levels = logger_levels(logging.INFO)
    assert levels["httpx"] == logging.WARNING
    assert levels["uvicorn.access"] == logging.INFO


def test_httpx_follows_debug():
    assert logger_levels(logging.DEBUG)["httpx"] == logging.DEBUG


def test_configure_installs_single_handler():
    configure_logging("debug")
    configure_logging("info")

    root = logging.getLogger()
    assert root.level == logging.INFO
    assert len(root.handlers) == 1
    assert root.handlers[0].formatter._fmt == LOG_FORMAT

    uvicorn_logger = logging.getLogger("uvicorn")
    assert len(uvicorn_logger.handlers) == 1
    assert uvicorn_logger.propagate is False
    assert logging.getLogger("httpx").level == logging.WARNING


def test_unknown_level_name_falls_back_to_info():
    configure_logging("chatty")
    assert logging.getLogger().level == logging.INFO

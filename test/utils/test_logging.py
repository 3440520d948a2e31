import logging

from tagcheck.utils.logging import setup_logger


def test_setup_logger_attaches_single_handler():
    logger = setup_logger("TestLoggerOnce")
    setup_logger("TestLoggerOnce")
    assert len(logger.handlers) == 1


def test_setup_logger_honors_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    logger = setup_logger("TestLoggerLevel")
    assert logger.level == logging.DEBUG

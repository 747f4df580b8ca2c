import logging

from utils.logging_config import configure_logging


def test_explicit_level_wins(clean_env):
    clean_env.setenv("LOG_LEVEL", "ERROR")

    assert configure_logging("debug") == "DEBUG"
    assert logging.getLogger().level == logging.DEBUG


def test_level_from_environment(clean_env):
    clean_env.setenv("LOG_LEVEL", "warning")

    assert configure_logging() == "WARNING"


def test_unknown_level_falls_back_to_info(clean_env):
    clean_env.setenv("LOG_LEVEL", "chatty")

    assert configure_logging() == "INFO"
    assert logging.getLogger("urllib3").level == logging.WARNING

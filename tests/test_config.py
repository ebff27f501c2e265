# tests/test_config.py

import logging

import pytest
from pydantic import ValidationError

from core.config import AppConfig
from core.loader import LoaderConfig
from core.logging_config import setup_logging


@pytest.fixture
def clean_env(monkeypatch):
    for key in (
        "STUDENT_RECORDS_LOG_LEVEL",
        "STUDENT_RECORDS_TICKS",
        "STUDENT_RECORDS_TICK_INTERVAL",
    ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_app_config_defaults(clean_env):
    config = AppConfig()

    assert config.log_level == "WARNING"
    assert config.loader == LoaderConfig()


def test_app_config_reads_env_overrides(clean_env):
    clean_env.setenv("STUDENT_RECORDS_LOG_LEVEL", " debug ")
    clean_env.setenv("STUDENT_RECORDS_TICKS", "2")
    clean_env.setenv("STUDENT_RECORDS_TICK_INTERVAL", "0.05")

    config = AppConfig()

    assert config.log_level == "DEBUG"
    assert config.loader == LoaderConfig(ticks=2, tick_interval=0.05)


def test_app_config_is_frozen(clean_env):
    config = AppConfig()

    with pytest.raises(ValidationError):
        config.ticks = 1


@pytest.mark.parametrize(
    "key, value",
    [
        ("STUDENT_RECORDS_TICKS", "many"),
        ("STUDENT_RECORDS_TICKS", "-1"),
        ("STUDENT_RECORDS_TICK_INTERVAL", "fast"),
        ("STUDENT_RECORDS_TICK_INTERVAL", "-0.5"),
        ("STUDENT_RECORDS_TICK_INTERVAL", "nan"),
        ("STUDENT_RECORDS_TICK_INTERVAL", "inf"),
        ("STUDENT_RECORDS_LOG_LEVEL", "basic_format"),
        ("STUDENT_RECORDS_LOG_LEVEL", "verbose"),
    ],
)
def test_app_config_rejects_bad_values(clean_env, key, value):
    clean_env.setenv(key, value)

    with pytest.raises(ValidationError):
        AppConfig()


def test_setup_logging_replaces_handlers():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level

    try:
        setup_logging("info")
        setup_logging("debug")

        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

        setup_logging("not-a-level")
        assert root.level == logging.WARNING

        setup_logging("basic_format")
        assert root.level == logging.WARNING

    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)

import logging

from utils.logger import _resolve_level, get_logger


def test_resolve_level_known_names():
    assert _resolve_level("DEBUG") == logging.DEBUG
    assert _resolve_level("ERROR") == logging.ERROR


def test_resolve_level_unknown_name_falls_back_to_info():
    assert _resolve_level("LOUD") == logging.INFO


def test_get_logger_returns_named_logger():
    assert get_logger("db.seed").name == "db.seed"

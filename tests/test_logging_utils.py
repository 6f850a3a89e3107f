"""Mini README: Tests for the logging helpers."""

import logging

import pytest

from maintenance_maker.logging_utils import configure_root_logger, get_logger, resolve_level


def test_configure_root_logger_accepts_level_names() -> None:
    previous = logging.getLogger().level
    try:
        configure_root_logger("debug")
        assert logging.getLogger().level == logging.DEBUG
    finally:
        logging.getLogger().setLevel(previous)


def test_configure_root_logger_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        configure_root_logger("chatty")


def test_get_logger_returns_named_logger() -> None:
    assert get_logger("maintenance_maker.ledger").name == "maintenance_maker.ledger"


def test_resolve_level_maps_names_and_numbers() -> None:
    assert resolve_level("warning") == logging.WARNING
    assert resolve_level(logging.ERROR) == logging.ERROR

# tests/test_logging.py

from __future__ import annotations

from roster_parser.logging import get_logger


def test_module_logger_lives_under_base_logger() -> None:
    log = get_logger("csv_parser")

    assert log.name == "roster_parser.csv_parser"
    assert log.propagate is True
    assert any(getattr(h, "is_module_handler", False) for h in log.handlers)


def test_module_handler_is_attached_once() -> None:
    first = get_logger("json_store")
    second = get_logger("roster_parser.json_store")

    assert first is second
    assert sum(getattr(h, "is_module_handler", False) for h in second.handlers) == 1


def test_base_logger_does_not_propagate() -> None:
    base = get_logger()

    assert base.name == "roster_parser"
    assert base.propagate is False

"""Tests for fluent_icons.logging."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from fluent_icons.logging import LOG_LEVEL_ENV, configure_logging, get_logger, resolve_level


def test_get_logger_nests_under_package_logger() -> None:
    assert get_logger().name == "fluent_icons"
    assert get_logger("retriever").name == "fluent_icons.retriever"


@pytest.mark.parametrize(
    ("kwargs", "env", "expected"),
    [
        ({}, {}, logging.INFO),
        ({"verbose": True}, {}, logging.DEBUG),
        ({"quiet": True}, {}, logging.WARNING),
        ({}, {LOG_LEVEL_ENV: "debug"}, logging.DEBUG),
        ({}, {LOG_LEVEL_ENV: "not-a-level"}, logging.INFO),
        ({"quiet": True}, {LOG_LEVEL_ENV: "debug"}, logging.WARNING),
        ({"verbose": True, "quiet": True}, {}, logging.DEBUG),
    ],
)
def test_resolve_level_precedence(kwargs: dict, env: dict, expected: int) -> None:
    assert resolve_level(environ=env, **kwargs) == expected


def test_configure_logging_replaces_handlers_on_rerun() -> None:
    configure_logging(environ={})
    logger = configure_logging(environ={})

    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_quiet_console_still_writes_debug_to_log_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "icons.log"
    logger = configure_logging(quiet=True, log_file=log_file, environ={})

    get_logger("classifier").debug("indexed %d icons", 3)
    for handler in logger.handlers:
        handler.flush()

    assert logger.handlers[0].level == logging.WARNING
    assert "fluent_icons.classifier: indexed 3 icons" in log_file.read_text(encoding="utf-8")

    configure_logging(environ={})

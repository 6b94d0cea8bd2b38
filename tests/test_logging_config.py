"""Tests for playground_proxy/logging_config.py."""

import logging

import pytest

from playground_proxy.logging_config import configure_logging, parse_level


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("debug", logging.DEBUG),
        ("info", logging.INFO),
        ("warn", logging.WARNING),
        ("ERROR", logging.ERROR),
        ("trace", logging.INFO),
        ("", logging.INFO),
    ],
)
def test_parse_level(raw, expected):
    assert parse_level(raw) == expected


def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, root.handlers[:]
    try:
        assert configure_logging("warn") == logging.WARNING
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

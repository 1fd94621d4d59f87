"""Shared test fixtures and helpers."""

from __future__ import annotations

import logging

import pytest

from scrawlc.scanner import scan
from scrawlc.tokens import Token


@pytest.fixture
def lex():
    """Return a helper that scans source and returns the token list."""

    def _lex(source: str) -> list[Token]:
        return scan(source)

    return _lex


@pytest.fixture
def restore_logging():
    """Put the root logger back the way it was after a CLI run reconfigures it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def assert_kinds(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_texts(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token texts match the expected list."""
    actual = [t.text for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"

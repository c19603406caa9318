"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from dslscan.cursor import TokenCursor
from dslscan.lexer import tokenize
from dslscan.tokens import Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns the token list."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source)

    return _lex


@pytest.fixture
def cursor():
    """Return a helper that builds a TokenCursor over source text."""

    def _cursor(source: str) -> TokenCursor:
        return TokenCursor.from_source(source)

    return _cursor


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token lexemes match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def values(tokens: list[Token]) -> list[str]:
    return [t.value for t in tokens]

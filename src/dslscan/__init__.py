"""Lexer and token cursor for a small configuration/expression DSL."""

from __future__ import annotations

from dslscan.cursor import TokenCursor
from dslscan.errors import CursorError, ExpectedToken, OutOfBounds
from dslscan.lexer import Lexer, scan, tokenize
from dslscan.lines import LineIndex
from dslscan.tokens import SourceSpan, Token, TokenKind

__version__ = "0.1.0"

__all__ = [
    "CursorError",
    "ExpectedToken",
    "Lexer",
    "LineIndex",
    "OutOfBounds",
    "SourceSpan",
    "Token",
    "TokenCursor",
    "TokenKind",
    "scan",
    "tokenize",
]

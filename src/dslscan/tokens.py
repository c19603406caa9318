"""Token kinds, source spans, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenKind(Enum):
    NUMBER = auto()  # 42, 3.14, .5
    IDENTIFIER = auto()  # bare words and keywords
    STRING = auto()  # "..." or '...', quotes included
    OPERATOR = auto()  # ( ) , ; = == != <= >= && || += -= ...
    SPECIAL = auto()  # reserved, never produced by the lexer


@dataclass(frozen=True, slots=True, eq=False)
class SourceSpan:
    """Half-open range [start, end) into a source string.

    The span holds a reference to the source, never a copy of the lexeme.
    """

    source: str = field(repr=False)
    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end <= len(self.source):
            raise ValueError(
                f"invalid span [{self.start}, {self.end}) for source of length {len(self.source)}"
            )

    @property
    def text(self) -> str:
        return self.source[self.start : self.end]

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return self.text

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return len(self) == len(other) and self.source.startswith(other, self.start)
        if isinstance(other, SourceSpan):
            return len(self) == len(other) and self.text == other.text
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)


@dataclass(frozen=True, slots=True)
class Token:
    """A classified lexeme with its 0-based line and column."""

    kind: TokenKind
    text: SourceSpan
    line: int
    column: int

    @property
    def value(self) -> str:
        return self.text.text

    def is_float(self) -> bool:
        """Return True for a NUMBER token containing a decimal point."""
        return self.kind == TokenKind.NUMBER and "." in self.value

    def as_float(self) -> float:
        self._require_number()
        return float(self.value)

    def as_number(self) -> int | float:
        """Convert a NUMBER token to int, or float when it has a decimal point."""
        self._require_number()
        if self.is_float():
            return float(self.value)
        return int(self.value)

    def is_closed(self) -> bool:
        """Return True if a STRING token ends with its matching closing quote."""
        if self.kind != TokenKind.STRING:
            raise ValueError(f"{self.kind.name} token is not a string literal")
        raw = self.value
        if len(raw) < 2:
            return False
        i = 1
        while i < len(raw):
            if raw[i] == "\\":
                i += 2
                continue
            if raw[i] == raw[0]:
                return i == len(raw) - 1
            i += 1
        return False

    def _require_number(self) -> None:
        if self.kind != TokenKind.NUMBER:
            raise ValueError(f"{self.kind.name} token {self.value!r} is not a number")


# Two-character operators; anything else is a one-character operator
TWO_CHAR_OPERATORS = frozenset({"==", "!=", "<=", ">=", "&&", "||", "+=", "-="})

QUOTES = frozenset("\"'")

# Whitespace other than newline
_BLANK = frozenset(" \t\r\v\f")


def is_blank(ch: str) -> bool:
    """Return True if ch is non-newline whitespace."""
    return ch in _BLANK


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return len(ch) == 1 and "0" <= ch <= "9"


def is_ident_start(ch: str) -> bool:
    return ch.isalpha() or ch == "_"


def is_ident_char(ch: str) -> bool:
    return ch.isalpha() or is_digit(ch) or ch == "_"

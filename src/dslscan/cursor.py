"""Token cursor — the navigation primitives a recursive descent parser uses."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from dslscan.errors import ExpectedToken, OutOfBounds, render_diagnostic, render_end_of_input
from dslscan.lexer import Lexer
from dslscan.lines import LineIndex
from dslscan.tokens import Token


class TokenCursor:
    """A movable position over an immutable token sequence.

    The position is always within [0, len(tokens)]; len(tokens) means the
    cursor is exhausted. Only the position ever changes.
    """

    def __init__(self, tokens: Iterable[Token], lines: LineIndex | None = None) -> None:
        self._tokens: tuple[Token, ...] = tuple(tokens)
        self._lines = lines if lines is not None else LineIndex()
        self._pos = 0

    @classmethod
    def from_source(cls, source: str) -> TokenCursor:
        lexer = Lexer(source)
        return cls(lexer.tokens, lexer.lines)

    @property
    def position(self) -> int:
        return self._pos

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    @property
    def lines(self) -> LineIndex:
        return self._lines

    def __len__(self) -> int:
        return len(self._tokens)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def peek(self) -> Token:
        if self._pos >= len(self._tokens):
            raise OutOfBounds("peek past end of token stream", self._pos, len(self._tokens))
        return self._tokens[self._pos]

    def next(self) -> Token:
        if self._pos >= len(self._tokens):
            raise OutOfBounds("read past end of token stream", self._pos, len(self._tokens))
        tok = self._tokens[self._pos]
        self._pos += 1
        return tok

    def consume(self, expected: str) -> bool:
        """Advance past the current token if its text is exactly `expected`."""
        if self._pos < len(self._tokens) and self._tokens[self._pos].text == expected:
            self._pos += 1
            return True
        return False

    def expect(self, expected: str) -> Token:
        """Consume `expected` and return its token, or raise ExpectedToken."""
        found = self._current()
        if not self.consume(expected):
            raise ExpectedToken(expected, found)
        return self._tokens[self._pos - 1]

    def has_more(self) -> bool:
        return self._pos < len(self._tokens)

    def is_exhausted(self) -> bool:
        return self._pos >= len(self._tokens)

    def move_back(self) -> None:
        if self._pos == 0:
            raise OutOfBounds("move back before start of token stream", self._pos, 0)
        self._pos -= 1

    def move_forward(self) -> None:
        if self._pos >= len(self._tokens):
            raise OutOfBounds(
                "move forward past end of token stream", self._pos, len(self._tokens)
            )
        self._pos += 1

    def _current(self) -> Token | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    # ------------------------------------------------------------------
    # Group extraction
    # ------------------------------------------------------------------

    def collect_until(
        self, end_markers: Sequence[str], consume_terminator: bool = True
    ) -> list[Token]:
        """Collect tokens up to the first one whose text is in `end_markers`.

        The terminator is stepped over when `consume_terminator` is set. If
        input runs out first, the position is restored and OutOfBounds raised.
        """
        saved_pos = self._pos
        result: list[Token] = []
        try:
            while True:
                tok = self.peek()
                if any(tok.text == marker for marker in end_markers):
                    break
                result.append(self.next())
        except OutOfBounds:
            self._pos = saved_pos
            raise
        if consume_terminator:
            self._pos += 1
        return result

    def unwrap_parentheses(self) -> list[Token]:
        """Return the tokens between a leading `(` and its matching `)`.

        Nested parentheses are kept verbatim in the result.
        """
        start_pos = self._pos
        self.expect("(")
        result: list[Token] = []
        depth = 0
        while True:
            try:
                tok = self.peek()
            except OutOfBounds:
                self._pos = start_pos
                raise ExpectedToken(")", None) from None
            if tok.text == ")" and depth == 0:
                self._pos += 1
                return result
            if tok.text == "(":
                depth += 1
            elif tok.text == ")":
                depth -= 1
            result.append(self.next())

    def group_by_separator(self, start: str, end: str, separator: str) -> list[list[Token]]:
        """Split the tokens between `start` and `end` on `separator`.

        Empty groups are dropped, so `(1,,2)` yields [[1], [2]] and `()`
        yields no groups at all.
        """
        start_pos = self._pos
        self.expect(start)
        groups: list[list[Token]] = []
        current: list[Token] = []
        while not self.consume(end):
            if self.is_exhausted():
                self._pos = start_pos
                raise ExpectedToken(end, None)
            if self.consume(separator):
                if current:
                    groups.append(current)
                    current = []
            else:
                current.append(self.next())
        if current:
            groups.append(current)
        return groups

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def line_text(self, line_number: int) -> str:
        if not 0 <= line_number < len(self._lines):
            raise OutOfBounds(f"no line {line_number}", line_number, len(self._lines))
        return self._lines.text(line_number)

    def format_error(self, message: str) -> str:
        """Render `message` against the current token, or as an end-of-input error."""
        tok = self._current()
        if tok is None:
            return render_end_of_input(message)
        source_line = self._lines.text(tok.line) if tok.line < len(self._lines) else ""
        return render_diagnostic(message, tok.line, tok.column, source_line)

    def report_error(self, message: str, *, file: TextIO | None = None) -> None:
        """Write the diagnostic for the current token to `file` (stderr by default)."""
        out = file if file is not None else sys.stderr
        out.write(self.format_error(message) + "\n")

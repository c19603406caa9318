"""dslscan lexer — converts source text into classified tokens and a line index."""

from __future__ import annotations

import logging

from dslscan.lines import LineIndex
from dslscan.tokens import (
    QUOTES,
    TWO_CHAR_OPERATORS,
    SourceSpan,
    Token,
    TokenKind,
    is_blank,
    is_digit,
    is_ident_char,
    is_ident_start,
)

logger = logging.getLogger(__name__)


class Lexer:
    """Scan source text in a single pass.

    Scanning runs to completion in the constructor. Malformed input never
    raises: an unterminated string runs to end of input and any other
    character becomes a one-character operator.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 0
        self._line_start = 0
        self._tokens: list[Token] = []
        self._line_texts: list[str] = []
        self._line_starts: list[int] = []
        self._scan()
        self.tokens: tuple[Token, ...] = tuple(self._tokens)
        self.lines = LineIndex(tuple(self._line_texts), tuple(self._line_starts))
        logger.debug("scanned %d tokens over %d lines", len(self.tokens), len(self.lines))

    @property
    def source(self) -> str:
        return self._source

    def _scan(self) -> None:
        while self._pos < len(self._source):
            ch = self._peek()

            if ch == "\n":
                self._advance()
            elif is_blank(ch):
                self._advance()
            elif ch == "/" and self._peek(1) == "/":
                self._skip_comment()
            elif ch in QUOTES:
                self._lex_string()
            elif is_digit(ch) or (ch == "." and is_digit(self._peek(1))):
                self._lex_number()
            elif is_ident_start(ch):
                self._lex_identifier()
            else:
                self._lex_operator()

        # Trailing line without a final newline
        if self._line_start < len(self._source):
            self._close_line(len(self._source))

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._close_line(self._pos - 1)
        return ch

    def _close_line(self, end: int) -> None:
        self._line_texts.append(self._source[self._line_start : end])
        self._line_starts.append(self._line_start)
        self._line_start = end + 1
        self._line += 1

    def _emit(self, kind: TokenKind, start: int, line: int, column: int) -> Token:
        tok = Token(kind, SourceSpan(self._source, start, self._pos), line, column)
        self._tokens.append(tok)
        return tok

    # ------------------------------------------------------------------
    # Lexemes
    # ------------------------------------------------------------------

    def _skip_comment(self) -> None:
        while self._pos < len(self._source) and self._peek() != "\n":
            self._advance()

    def _lex_string(self) -> None:
        start, line, column = self._pos, self._line, self._pos - self._line_start
        quote = self._advance()
        while self._pos < len(self._source):
            ch = self._advance()
            if ch == quote:
                break
            if ch == "\\" and self._pos < len(self._source):
                self._advance()
        self._emit(TokenKind.STRING, start, line, column)

    def _lex_number(self) -> None:
        start, column = self._pos, self._pos - self._line_start
        has_dot = False
        while self._pos < len(self._source):
            ch = self._peek()
            if is_digit(ch):
                self._advance()
            elif ch == "." and not has_dot:
                has_dot = True
                self._advance()
            else:
                break
        self._emit(TokenKind.NUMBER, start, self._line, column)

    def _lex_identifier(self) -> None:
        start, column = self._pos, self._pos - self._line_start
        while self._pos < len(self._source) and is_ident_char(self._peek()):
            self._advance()
        self._emit(TokenKind.IDENTIFIER, start, self._line, column)

    def _lex_operator(self) -> None:
        start, column = self._pos, self._pos - self._line_start
        self._advance()
        if self._source[start : start + 2] in TWO_CHAR_OPERATORS:
            self._advance()
        self._emit(TokenKind.OPERATOR, start, self._line, column)


def scan(source: str) -> tuple[tuple[Token, ...], LineIndex]:
    """Scan source text and return its tokens and line index."""
    lexer = Lexer(source)
    return lexer.tokens, lexer.lines


def tokenize(source: str) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return list(Lexer(source).tokens)

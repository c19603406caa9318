"""Best-effort lint pass over the token stream: unterminated strings and brackets."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from dslscan.cursor import TokenCursor
from dslscan.errors import render_diagnostic
from dslscan.lexer import Lexer
from dslscan.lines import LineIndex
from dslscan.tokens import Token, TokenKind

ERROR = "error"
WARNING = "warning"

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = frozenset(_OPENERS.values())

# Single-character operators that are usually a typo for the doubled form
_LONE_OPERATORS = {"|": "||", "&": "&&"}


@dataclass(frozen=True, slots=True)
class Problem:
    """A lint finding at a 0-based line and column."""

    message: str
    line: int
    column: int
    severity: str = ERROR


def check(source: str) -> list[Problem]:
    """Tokenize source and return its problems ordered by position."""
    return check_tokens(Lexer(source).tokens)


def check_tokens(tokens: Iterable[Token]) -> list[Problem]:
    """Return the problems in an already scanned token sequence."""
    cursor = TokenCursor(tokens)
    problems: list[Problem] = []
    open_stack: list[Token] = []

    while cursor.has_more():
        tok = cursor.next()
        if tok.kind == TokenKind.STRING:
            if not tok.is_closed():
                problems.append(_at(tok, "unterminated string literal"))
            continue
        if tok.kind != TokenKind.OPERATOR:
            continue

        if tok.value in _OPENERS:
            open_stack.append(tok)
        elif tok.value in _CLOSERS:
            if not open_stack:
                problems.append(_at(tok, f"unmatched '{tok.value}'"))
            elif _OPENERS[open_stack[-1].value] != tok.value:
                opener = open_stack.pop()
                problems.append(
                    _at(
                        tok,
                        f"'{tok.value}' does not close '{opener.value}' "
                        f"opened at line {opener.line + 1}, col {opener.column}",
                    )
                )
            else:
                open_stack.pop()
        elif tok.value in _LONE_OPERATORS:
            problems.append(
                _at(
                    tok,
                    f"lone '{tok.value}', did you mean '{_LONE_OPERATORS[tok.value]}'?",
                    WARNING,
                )
            )

    for opener in open_stack:
        problems.append(_at(opener, f"'{opener.value}' is never closed"))

    problems.sort(key=lambda p: (p.line, p.column))
    return problems


def render_problem(problem: Problem, lines: LineIndex) -> str:
    """Render a problem with its source line and caret."""
    source_line = lines.text(problem.line) if problem.line < len(lines) else ""
    return render_diagnostic(
        problem.message, problem.line, problem.column, source_line, problem.severity.capitalize()
    )


def has_errors(problems: list[Problem]) -> bool:
    return any(p.severity == ERROR for p in problems)


def _at(tok: Token, message: str, severity: str = ERROR) -> Problem:
    return Problem(message, tok.line, tok.column, severity)

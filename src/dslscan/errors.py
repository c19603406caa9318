"""Cursor error types and diagnostic rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dslscan.tokens import Token


class CursorError(Exception):
    """Base class for token cursor contract failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class OutOfBounds(CursorError, IndexError):
    """Raised when a cursor operation would read or move past a boundary."""

    def __init__(self, message: str, position: int, limit: int) -> None:
        self.position = position
        self.limit = limit
        super().__init__(message)


class ExpectedToken(CursorError):
    """Raised when a required delimiter is absent."""

    def __init__(self, expected: str, found: Token | None) -> None:
        self.expected = expected
        self.found = found
        if found is None:
            message = f"expected '{expected}', found end of input"
        else:
            message = (
                f"expected '{expected}', found '{found.value}' "
                f"at line {found.line + 1}, col {found.column}"
            )
        super().__init__(message)


def render_diagnostic(
    message: str, line: int, column: int, source_line: str, label: str = "Error"
) -> str:
    """Render the error header, the offending line, and a caret under `column`.

    `line` and `column` are 0-based; the header shows the line 1-based.
    """
    source_line = source_line.rstrip("\r")
    return (
        f"{label} at line {line + 1}, col {column}: {message}\n"
        f"{source_line}\n"
        f"{' ' * column}^"
    )


def render_end_of_input(message: str) -> str:
    return f"Error at end of input: {message}"

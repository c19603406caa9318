"""Token and line index dumps for --format text / json."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Any, TextIO

from dslscan.lines import LineIndex
from dslscan.tokens import Token


def dump_tokens(tokens: Iterable[Token], *, file: TextIO | None = None) -> None:
    """Print one `line:col KIND 'lexeme'` row per token to *file*."""
    f = file if file is not None else sys.stderr
    for tok in tokens:
        f.write(f"{tok.line + 1}:{tok.column} {tok.kind.name} {tok.value!r}\n")


def dump_lines(lines: LineIndex, *, file: TextIO | None = None) -> None:
    """Print one `number @offset | text` row per recorded line to *file*."""
    f = file if file is not None else sys.stderr
    width = len(str(len(lines)))
    for number, (text, start) in enumerate(lines, start=1):
        f.write(f"{number:>{width}} @{start} | {text}\n")


def tokens_to_json(tokens: Iterable[Token]) -> list[dict[str, Any]]:
    return [
        {
            "kind": tok.kind.name,
            "text": tok.value,
            "line": tok.line,
            "column": tok.column,
            "start": tok.text.start,
            "end": tok.text.end,
        }
        for tok in tokens
    ]


def lines_to_json(lines: LineIndex) -> list[dict[str, Any]]:
    return [{"text": text, "start": start} for text, start in lines]

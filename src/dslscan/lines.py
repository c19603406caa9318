"""Line index recorded while scanning, used to render diagnostics."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LineIndex:
    """Source lines (without their newline) and the offset each one starts at."""

    texts: tuple[str, ...] = ()
    starts: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if len(self.texts) != len(self.starts):
            raise ValueError("line texts and start offsets differ in length")

    def __len__(self) -> int:
        return len(self.texts)

    def __iter__(self) -> Iterator[tuple[str, int]]:
        return iter(zip(self.texts, self.starts))

    def text(self, line: int) -> str:
        """Return the text of 0-based line `line`; IndexError if out of range."""
        if not 0 <= line < len(self.texts):
            raise IndexError(line)
        return self.texts[line]

    def start(self, line: int) -> int:
        if not 0 <= line < len(self.starts):
            raise IndexError(line)
        return self.starts[line]

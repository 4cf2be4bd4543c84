"""
Line cursor over a cleaned line sequence.

Block parsers consume a variable number of lines; they share a
``LineCursor`` so each parser advances it by exactly the lines it
consumed. Lines are never pushed back, including when a parser fails
half-way through a block.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from prm_ingest.exceptions import StructuralError


class LineCursor:
    """Forward-only position into a sequence of cleaned lines."""

    def __init__(self, lines: Sequence[str], start: int = 0) -> None:
        self._lines = lines
        self._pos = start

    def __repr__(self) -> str:
        return f"LineCursor(position={self._pos}, remaining={self.remaining})"

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._pos >= len(self._lines):
            raise StopIteration
        line = self._lines[self._pos]
        self._pos += 1
        return line

    @property
    def position(self) -> int:
        """Index of the next line to be consumed."""
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._lines) - self._pos

    def at_end(self) -> bool:
        return self._pos >= len(self._lines)

    def take(self, expected: str) -> str:
        """Consume the next line or fail with a ``StructuralError``.

        Args:
            expected: What the caller wanted, used in the error message
                (e.g. ``"cult stage line"``).
        """
        if self.at_end():
            raise StructuralError(
                f"expected {expected}, but input ended after content line {self._pos}"
            )
        return next(self)

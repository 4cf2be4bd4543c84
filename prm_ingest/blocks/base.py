"""
Shared helpers for block parsers.

A record parser is any callable taking one cleaned line and returning a
typed record, raising a leaf ``PrmParseError`` (FieldError, ShapeError,
...) when the line is unusable. The helpers below run a record parser
against the cursor and attach the record context to failures.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from prm_ingest.cursor import LineCursor
from prm_ingest.exceptions import PrmParseError, RecordError

T = TypeVar("T")

RecordParser = Callable[[str], T]


def parse_record(parser: RecordParser[T], line: str, *, record: str, position: int) -> T:
    """Run *parser* on *line*, wrapping failures in ``RecordError``."""
    try:
        return parser(line)
    except PrmParseError as exc:
        raise RecordError(record, position, line) from exc


def take_record(cursor: LineCursor, parser: RecordParser[T], *, record: str) -> T:
    """Consume the next line and parse it as *record*.

    Raises:
        StructuralError: If the cursor is exhausted.
        RecordError: If the line fails to parse.
    """
    position = cursor.position
    line = cursor.take(f"{record} line")
    return parse_record(parser, line, record=record, position=position)

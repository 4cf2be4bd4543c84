"""
Sentinel-terminated list parser.

Layout::

    <header line>
    <a> <b>          two-token item lines, any number
    ...
    none             terminator, consumed and discarded

The terminator is recognised only when it is the whole line. The same
literal may also appear inside the header as a single-valued field (the
spot's "no personal item"); that usage is the header parser's business.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from prm_ingest.blocks.base import RecordParser, parse_record, take_record
from prm_ingest.cursor import LineCursor
from prm_ingest.exceptions import ShapeError, StructuralError

H = TypeVar("H")
I = TypeVar("I")

SENTINEL = "none"


@dataclass(frozen=True)
class SentinelList(Generic[H, I]):
    header: H
    items: tuple[I, ...]


def read_pair(line: str) -> tuple[str, str]:
    """Parse an item line made of exactly two tokens."""
    tokens = line.split()
    if len(tokens) != 2:
        raise ShapeError(f"expected 2 tokens, found {len(tokens)}")
    return tokens[0], tokens[1]


def read_sentinel_list(
    cursor: LineCursor,
    *,
    header: RecordParser[H],
    item: RecordParser[I] = read_pair,  # type: ignore[assignment]
    header_record: str = "header",
    item_record: str = "item",
    sentinel: str = SENTINEL,
) -> SentinelList[H, I]:
    """Consume one header line, its items and the terminator.

    Raises:
        StructuralError: No header line, or input ended before the terminator.
        RecordError: The header or an item line failed to parse.
    """
    head = take_record(cursor, header, record=header_record)

    items: list[I] = []
    while True:
        if cursor.at_end():
            raise StructuralError(
                f"expected `{sentinel}` terminate line not found "
                f"after {len(items)} {item_record} lines"
            )
        position = cursor.position
        line = next(cursor)
        if line == sentinel:
            break
        items.append(parse_record(item, line, record=item_record, position=position))

    return SentinelList(header=head, items=tuple(items))

"""
Item records from ``item.prm``.

Line layout::

    name type steeler_full steeler_empty size count param1 param2
"""

from __future__ import annotations

from dataclasses import dataclass

from prm_ingest.tokens import TokenReader, signed, unsigned


@dataclass(frozen=True)
class SteelerType:
    full: int
    empty: int


@dataclass(frozen=True)
class Item:
    name: str
    type: int
    steeler: SteelerType
    size: int
    count: int
    param1: int
    param2: int


def parse_item_count(line: str) -> int:
    """Parse the header line holding the number of item records."""
    reader = TokenReader(line)
    count = reader.take("item count", unsigned)
    reader.finish("item count line")
    return count


def parse_item(line: str) -> Item:
    reader = TokenReader(line)
    name = reader.take("name")
    item_type = reader.take("type", signed)
    steeler = SteelerType(
        full=reader.take("steeler_full", signed),
        empty=reader.take("steeler_empty", signed),
    )
    size = reader.take("size", unsigned)
    count = reader.take("count", unsigned)
    param1 = reader.take("param1", signed)
    param2 = reader.take("param2", signed)
    reader.finish()
    return Item(
        name=name,
        type=item_type,
        steeler=steeler,
        size=size,
        count=count,
        param1=param1,
        param2=param2,
    )

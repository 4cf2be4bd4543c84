"""
Fixed-count block parser.

Layout::

    <title fields...> <count>        title line, last field is the unit count
    <unit line 1>                    \
    <unit line 2>                     | repeated exactly <count> times
    ...                              /

The title parser returns ``(header, count)``. A zero count is rejected:
an entity with no units is not representable. Each unit is a fixed tuple
of lines, one record parser per line.

Two failures are kept apart on purpose:
- input running out before ``count`` units were read raises
  ``StructuralError`` directly;
- a unit line that is present but malformed raises ``RecordError``
  wrapping the record's own error.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from prm_ingest.blocks.base import RecordParser, take_record
from prm_ingest.cursor import LineCursor
from prm_ingest.exceptions import StructuralError

logger = logging.getLogger(__name__)

H = TypeVar("H")


@dataclass(frozen=True)
class FixedCountBlock(Generic[H]):
    """A parsed title plus exactly ``len(units)`` units.

    Attributes:
        header: Whatever the title parser returned besides the count.
        units: One tuple per unit, holding one parsed record per unit line.
    """
    header: H
    units: tuple[tuple[Any, ...], ...]


def read_fixed_count_block(
    cursor: LineCursor,
    *,
    title: RecordParser[tuple[H, int]],
    unit: Sequence[tuple[str, RecordParser[Any]]],
    title_record: str = "title",
) -> FixedCountBlock[H]:
    """Consume one title line and the units it declares.

    Args:
        cursor: Cursor positioned on the title line.
        title: Parser returning ``(header, count)`` for the title line.
        unit: ``(record_name, parser)`` pairs, one per line of a unit.
        title_record: Record name used in diagnostics for the title line.

    Returns:
        The assembled ``FixedCountBlock``.

    Raises:
        StructuralError: Missing title, zero count, or fewer units than declared.
        RecordError: A title or unit line failed to parse.
    """
    header, count = take_record(cursor, title, record=title_record)
    if count == 0:
        raise StructuralError(f"{title_record} declares zero units")

    units: list[tuple[Any, ...]] = []
    for index in range(count):
        values: list[Any] = []
        for record, parser in unit:
            if cursor.at_end():
                raise StructuralError(
                    f"{title_record} declares {count} units, but input ended in "
                    f"unit {index + 1} while expecting a {record} line"
                )
            values.append(take_record(cursor, parser, record=record))
        units.append(tuple(values))

    logger.debug("Read fixed-count block with %d units", count)
    return FixedCountBlock(header=header, units=tuple(units))

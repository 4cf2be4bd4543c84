"""
Title-delimited group parser.

A title is any line made of exactly one token; it opens a new group.
Every line with more tokens is an item of the currently open group.

- an item before the first title is a ``StructuralError``
  ("expected title block");
- a new title, or the end of input, seals the open group;
- a repeated title replaces the earlier group under the same key.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from prm_ingest.blocks.base import RecordParser, parse_record
from prm_ingest.cursor import LineCursor
from prm_ingest.exceptions import StructuralError

logger = logging.getLogger(__name__)

I = TypeVar("I")


def is_title(line: str) -> bool:
    return len(line.split()) == 1


def read_title_groups(
    cursor: LineCursor,
    *,
    item: RecordParser[I],
    item_record: str = "item",
) -> dict[str, tuple[I, ...]]:
    """Consume the rest of the cursor as title-delimited groups.

    Returns:
        Insertion-ordered mapping ``title -> items``.

    Raises:
        StructuralError: If an item line comes before any title.
        RecordError: If an item line fails to parse.
    """
    groups: dict[str, tuple[I, ...]] = {}
    title: str | None = None
    items: list[I] = []

    def seal() -> None:
        if title is None:
            return
        if title in groups:
            logger.debug("Group '%s' repeated; later group replaces earlier one", title)
        groups[title] = tuple(items)

    for line in cursor:
        if is_title(line):
            seal()
            title = line
            items = []
            continue

        if title is None:
            raise StructuralError(
                "expected title block: item line found before any title "
                f"at content line {cursor.position}"
            )
        items.append(parse_record(item, line, record=item_record, position=cursor.position - 1))

    seal()
    return groups

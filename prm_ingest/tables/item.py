"""
Item table from ``item.prm``.

The first content line declares how many item lines follow. Both a
shortfall and surplus lines after the declared count are rejected.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import pandas as pd

from prm_ingest.blocks.base import take_record
from prm_ingest.cursor import LineCursor
from prm_ingest.exceptions import StructuralError
from prm_ingest.records.item import Item, parse_item, parse_item_count
from prm_ingest.tables.base import PrmTable


@dataclass(frozen=True)
class TableItem(PrmTable):
    name = "items"

    items: tuple[Item, ...]

    @classmethod
    def _assemble(cls, cursor: LineCursor) -> TableItem:
        count = take_record(cursor, parse_item_count, record="item count")

        items = []
        for _ in range(count):
            if cursor.at_end():
                raise StructuralError(
                    f"item count is set to {count}, but only {len(items)} items follow"
                )
            items.append(take_record(cursor, parse_item, record="item"))

        if not cursor.at_end():
            raise StructuralError(
                f"item count is set to {count}, but {cursor.remaining} "
                "additional lines follow"
            )
        return cls(items=tuple(items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Item:
        return self.items[index]

    def to_frame(self) -> pd.DataFrame:
        rows = [
            {
                "name": item.name,
                "type": item.type,
                "steeler_full": item.steeler.full,
                "steeler_empty": item.steeler.empty,
                "size": item.size,
                "count": item.count,
                "param1": item.param1,
                "param2": item.param2,
            }
            for item in self.items
        ]
        columns = [
            "name", "type", "steeler_full", "steeler_empty",
            "size", "count", "param1", "param2",
        ]
        return pd.DataFrame(rows, columns=columns)

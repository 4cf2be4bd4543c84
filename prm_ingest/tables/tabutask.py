"""
Tabutask table from ``tabutask.prm``.

Same title-delimited grouping as ``price.prm``. Task lines have no known
layout, so any file holding at least one task line fails with
``UnimplementedRecord`` at the root of the error chain.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

import pandas as pd

from prm_ingest.blocks.grouped import read_title_groups
from prm_ingest.cursor import LineCursor
from prm_ingest.records.tabutask import Tabutask, parse_tabutask
from prm_ingest.tables.base import PrmTable


@dataclass(frozen=True)
class TableTabutask(PrmTable):
    """Escave name -> tasks; unhashable like ``TablePrice``."""

    name = "tabutasks"
    __hash__ = None  # type: ignore[assignment]

    tabutasks: Mapping[str, tuple[Tabutask, ...]]

    @classmethod
    def _assemble(cls, cursor: LineCursor) -> TableTabutask:
        groups = read_title_groups(cursor, item=parse_tabutask, item_record="tabutask")
        return cls(tabutasks=MappingProxyType(groups))

    def __len__(self) -> int:
        return len(self.tabutasks)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tabutasks)

    def __getitem__(self, escave: str) -> tuple[Tabutask, ...]:
        return self.tabutasks[escave]

    def to_frame(self) -> pd.DataFrame:
        rows = [
            (escave, task.line)
            for escave, tasks in self.tabutasks.items()
            for task in tasks
        ]
        return pd.DataFrame(rows, columns=["escave", "line"])

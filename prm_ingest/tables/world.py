"""World table from ``worlds.prm``: one world per line."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import astuple, dataclass, fields

import pandas as pd

from prm_ingest.blocks.base import parse_record
from prm_ingest.cursor import LineCursor
from prm_ingest.records.world import World, parse_world
from prm_ingest.tables.base import PrmTable


@dataclass(frozen=True)
class TableWorld(PrmTable):
    """All worlds, in file order."""

    name = "worlds"

    worlds: tuple[World, ...]

    @classmethod
    def _assemble(cls, cursor: LineCursor) -> TableWorld:
        worlds = []
        for line in cursor:
            worlds.append(
                parse_record(parse_world, line, record="world", position=cursor.position - 1)
            )
        return cls(worlds=tuple(worlds))

    def __len__(self) -> int:
        return len(self.worlds)

    def __iter__(self) -> Iterator[World]:
        return iter(self.worlds)

    def __getitem__(self, index: int) -> World:
        return self.worlds[index]

    def to_frame(self) -> pd.DataFrame:
        columns = [f.name for f in fields(World)]
        return pd.DataFrame([astuple(w) for w in self.worlds], columns=columns)

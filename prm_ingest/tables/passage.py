"""Passage table from ``passages.prm``: one passage per line."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import astuple, dataclass, fields

import pandas as pd

from prm_ingest.blocks.base import parse_record
from prm_ingest.cursor import LineCursor
from prm_ingest.records.passage import Passage, parse_passage
from prm_ingest.tables.base import PrmTable


@dataclass(frozen=True)
class TablePassage(PrmTable):
    """All passages between worlds, in file order."""

    name = "passages"

    passages: tuple[Passage, ...]

    @classmethod
    def _assemble(cls, cursor: LineCursor) -> TablePassage:
        passages = []
        for line in cursor:
            passages.append(
                parse_record(parse_passage, line, record="passage", position=cursor.position - 1)
            )
        return cls(passages=tuple(passages))

    def __len__(self) -> int:
        return len(self.passages)

    def __iter__(self) -> Iterator[Passage]:
        return iter(self.passages)

    def __getitem__(self, index: int) -> Passage:
        return self.passages[index]

    def to_frame(self) -> pd.DataFrame:
        columns = [f.name for f in fields(Passage)]
        return pd.DataFrame([astuple(p) for p in self.passages], columns=columns)

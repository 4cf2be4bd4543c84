"""Vanger density table from ``vangers.prm``."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

import pandas as pd

from prm_ingest.blocks.base import parse_record, take_record
from prm_ingest.cursor import LineCursor
from prm_ingest.records.vangers import parse_vangers_total, parse_world_weight
from prm_ingest.tables.base import PrmTable


@dataclass(frozen=True)
class TableVangersWeight(PrmTable):
    """Total c-vanger count and relative density per world.

    Attributes:
        vangers_total: Total c-vangers number in the Chain at one moment.
        weights: World name -> relative weight of total c-vanger density.

    Unhashable: ``weights`` is a read-only mapping view.
    """

    name = "vangers"
    __hash__ = None  # type: ignore[assignment]

    vangers_total: int
    weights: Mapping[str, int]

    @classmethod
    def _assemble(cls, cursor: LineCursor) -> TableVangersWeight:
        total = take_record(cursor, parse_vangers_total, record="vangers total")
        weights: dict[str, int] = {}
        for line in cursor:
            world, weight = parse_record(
                parse_world_weight, line, record="relative weight", position=cursor.position - 1
            )
            weights[world] = weight
        return cls(vangers_total=total, weights=MappingProxyType(weights))

    def __len__(self) -> int:
        return len(self.weights)

    def __iter__(self) -> Iterator[str]:
        return iter(self.weights)

    def __getitem__(self, world: str) -> int:
        return self.weights[world]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            list(self.weights.items()), columns=["world", "relative_weight"]
        )

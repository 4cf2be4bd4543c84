"""
Spot table from ``spot.prm``.

The file is a run of sentinel-terminated blocks, read until the input is
exhausted (there is no declared count).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import pandas as pd

from prm_ingest.blocks.sentinel import read_sentinel_list
from prm_ingest.cursor import LineCursor
from prm_ingest.exceptions import BlockError, PrmParseError
from prm_ingest.records.spot import Spot, parse_spot_header
from prm_ingest.tables.base import PrmTable


def read_spot(cursor: LineCursor) -> Spot:
    """Consume one spot block: header, goods lines and the ``none`` terminator."""
    block = read_sentinel_list(
        cursor,
        header=parse_spot_header,
        header_record="spot header",
        item_record="goods",
    )
    head = block.header
    return Spot(
        name=head.name,
        world_name=head.world_name,
        pos_x=head.pos_x,
        pos_y=head.pos_y,
        personal_item_name=head.personal_item_name,
        goods=block.items,
    )


@dataclass(frozen=True)
class TableSpot(PrmTable):
    name = "spots"

    spots: tuple[Spot, ...]

    @classmethod
    def _assemble(cls, cursor: LineCursor) -> TableSpot:
        spots: list[Spot] = []
        while not cursor.at_end():
            try:
                spots.append(read_spot(cursor))
            except PrmParseError as exc:
                raise BlockError("spot", len(spots)) from exc
        return cls(spots=tuple(spots))

    def __len__(self) -> int:
        return len(self.spots)

    def __iter__(self) -> Iterator[Spot]:
        return iter(self.spots)

    def __getitem__(self, index: int) -> Spot:
        return self.spots[index]

    def to_frame(self) -> pd.DataFrame:
        """One row per spot; ``goods`` holds the list of pairs."""
        rows = [
            {
                "name": s.name,
                "world_name": s.world_name,
                "pos_x": s.pos_x,
                "pos_y": s.pos_y,
                "personal_item_name": s.personal_item_name,
                "goods": list(s.goods),
            }
            for s in self.spots
        ]
        columns = ["name", "world_name", "pos_x", "pos_y", "personal_item_name", "goods"]
        df = pd.DataFrame(rows, columns=columns)
        df["personal_item_name"] = pd.Series(
            [s.personal_item_name for s in self.spots], index=df.index, dtype=object
        )
        return df

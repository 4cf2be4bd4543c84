"""
Bunch table from ``bunches.prm``.

The file holds one fixed-count block per bios. How many blocks to read
comes from the ``Bios`` enumeration, not from the file: if the format
ever gains another bios, the extra block is left unread. Leftover lines
are reported with a warning rather than parsed or rejected.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

import pandas as pd

from prm_ingest.blocks.fixed_count import read_fixed_count_block
from prm_ingest.cursor import LineCursor
from prm_ingest.exceptions import BlockError, PrmParseError
from prm_ingest.records.bunch import (
    Bios,
    Bunch,
    Cult,
    parse_bunch_title,
    parse_cult_game,
    parse_cult_stage,
)
from prm_ingest.tables.base import PrmTable

logger = logging.getLogger(__name__)

_CULT_UNIT = (
    ("cult stage", parse_cult_stage),
    ("cult game", parse_cult_game),
)


def read_bunch(cursor: LineCursor) -> Bunch:
    """Consume one bunch: title line plus ``cycles`` stage/game pairs."""
    block = read_fixed_count_block(
        cursor,
        title=parse_bunch_title,
        unit=_CULT_UNIT,
        title_record="bunch title",
    )
    cults = tuple(Cult(stage=stage, game=game) for stage, game in block.units)
    return Bunch(bios=block.header.bios, escave_name=block.header.escave_name, cults=cults)


@dataclass(frozen=True)
class TableBunch(PrmTable):
    name = "bunches"

    bunches: tuple[Bunch, ...]

    @classmethod
    def _assemble(cls, cursor: LineCursor) -> TableBunch:
        bunches: list[Bunch] = []
        for index, bios in enumerate(Bios):
            try:
                bunches.append(read_bunch(cursor))
            except PrmParseError as exc:
                raise BlockError(f"bunch ({bios.display_name})", index) from exc

        if not cursor.at_end():
            logger.warning(
                "bunches: %d content lines left unread after %d bios blocks",
                cursor.remaining, len(Bios),
            )
        return cls(bunches=tuple(bunches))

    def __len__(self) -> int:
        return len(self.bunches)

    def __iter__(self) -> Iterator[Bunch]:
        return iter(self.bunches)

    def __getitem__(self, index: int) -> Bunch:
        return self.bunches[index]

    def to_frame(self) -> pd.DataFrame:
        """One row per cycle of every bunch."""
        rows = []
        for bunch in self.bunches:
            for cycle, cult in enumerate(bunch.cults):
                rows.append({
                    "escave_name": bunch.escave_name,
                    "bios": bunch.bios.display_name,
                    "cycle": cycle,
                    "stage_name": cult.stage.name,
                    "cirt": cult.stage.cirt,
                    "time": cult.stage.time,
                    "price": cult.stage.price,
                    "palette": cult.stage.palette,
                    "game_type": cult.game.game_type.value if cult.game else None,
                })
        columns = [
            "escave_name", "bios", "cycle", "stage_name", "cirt",
            "time", "price", "palette", "game_type",
        ]
        df = pd.DataFrame(rows, columns=columns)
        # object dtype: a cycle without a game stays None, not NaN
        df["game_type"] = pd.Series(
            [row["game_type"] for row in rows], index=df.index, dtype=object
        )
        return df

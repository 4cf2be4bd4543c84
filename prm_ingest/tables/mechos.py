"""
Mechos table from ``car.prm``.

Layout::

    <n0>                 three counter lines; their sum is the number
    <n1>                 of mechos lines that follow
    <n2>
    <mechos line>
    ...

The declared total must match the number of mechos lines exactly.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

import pandas as pd

from prm_ingest.blocks.base import parse_record, take_record
from prm_ingest.cursor import LineCursor
from prm_ingest.exceptions import StructuralError
from prm_ingest.records.mechos import Mechos, parse_mechos, parse_mechos_counter
from prm_ingest.tables.base import PrmTable

logger = logging.getLogger(__name__)

_COUNTER_LINES = 3


@dataclass(frozen=True)
class TableMechos(PrmTable):
    """Characteristics of every mechos."""

    name = "mechoses"

    mechoses: tuple[Mechos, ...]

    @classmethod
    def _assemble(cls, cursor: LineCursor) -> TableMechos:
        counters = [
            take_record(cursor, parse_mechos_counter, record="mechos counter")
            for _ in range(_COUNTER_LINES)
        ]
        total = sum(counters)
        logger.debug("car.prm counters %s -> %d mechoses", counters, total)

        mechoses = []
        for line in cursor:
            mechoses.append(
                parse_record(parse_mechos, line, record="mechos", position=cursor.position - 1)
            )

        if len(mechoses) != total:
            raise StructuralError(
                f"counters declare {total} mechoses, but {len(mechoses)} mechos lines follow"
            )
        return cls(mechoses=tuple(mechoses))

    def __len__(self) -> int:
        return len(self.mechoses)

    def __iter__(self) -> Iterator[Mechos]:
        return iter(self.mechoses)

    def __getitem__(self, index: int) -> Mechos:
        return self.mechoses[index]

    def to_frame(self) -> pd.DataFrame:
        rows = []
        for m in self.mechoses:
            rows.append({
                "name": m.name,
                "type": m.type.name,
                "price_buy": m.price.buy,
                "price_sell": m.price.sell,
                "box0": m.box[0],
                "box1": m.box[1],
                "box2": m.box[2],
                "box3": m.box[3],
                "speed": m.speed,
                "armor": m.armor,
                "energy": m.energy,
                "energy_delta": m.energy_delta,
                "energy_drop": m.energy_drop,
                "drop_time": m.drop_time,
                "fire": m.fire,
                "water": m.water,
                "oxygen": m.oxygen,
                "fly": m.fly,
                "damage": m.damage,
                "teleport": m.teleport,
            })
        return pd.DataFrame(rows)

"""
Mechos (vehicle) records from ``car.prm``.

Line layout (20 tokens)::

    name type buy sell box0 box1 box2 box3 speed armor energy energy_delta
    energy_drop drop_time fire water oxygen fly damage teleport

``type`` is an index into ``MechosType``. Columns after ``teleport`` are
tolerated: the game files carry extra tuning columns with no agreed
meaning.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from prm_ingest.exceptions import FieldError
from prm_ingest.tokens import TokenReader, u8, unsigned


class MechosType(IntEnum):
    RAFFA = 0
    LIGHT = 1
    MICROBUS = 2
    ATW = 3
    TRACK = 4
    SPECIAL = 5


@dataclass(frozen=True)
class MechosPrice:
    buy: int
    sell: int


@dataclass(frozen=True)
class Mechos:
    """Vehicle characteristics.

    ``box`` holds the slot capacity for each of the four slot kinds.
    """
    name: str
    type: MechosType
    price: MechosPrice
    box: tuple[int, int, int, int]
    speed: int
    armor: int
    energy: int
    energy_delta: int
    energy_drop: int
    drop_time: int
    fire: int
    water: int
    oxygen: int
    fly: int
    damage: int
    teleport: int


_STAT_FIELDS = (
    "speed", "armor", "energy", "energy_delta", "energy_drop", "drop_time",
    "fire", "water", "oxygen", "fly", "damage", "teleport",
)


def parse_mechos_counter(line: str) -> int:
    """Parse one of the three leading counter lines of ``car.prm``."""
    reader = TokenReader(line)
    count = reader.take("mechos counter", unsigned)
    reader.finish("mechos counter line")
    return count


def parse_mechos(line: str) -> Mechos:
    reader = TokenReader(line)
    name = reader.take("name")
    type_id = reader.take("type", u8)
    try:
        mechos_type = MechosType(type_id)
    except ValueError as exc:
        raise FieldError("type", str(type_id), f"given wrong type `{type_id}`") from exc

    price = MechosPrice(
        buy=reader.take("price buy", unsigned),
        sell=reader.take("price sell", unsigned),
    )
    box = tuple(reader.take(f"box #{i}", u8) for i in range(4))
    stats = {field: reader.take(field, unsigned) for field in _STAT_FIELDS}

    return Mechos(name=name, type=mechos_type, price=price, box=box, **stats)  # type: ignore[arg-type]

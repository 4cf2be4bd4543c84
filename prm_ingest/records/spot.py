"""
Spot records from ``spot.prm``.

Each spot is a header line followed by its goods list::

    <name> <world> <pos_x> <pos_y> [<personal_item> | none]
    <goods> <destination>
    ...
    none

Here ``none`` plays two roles: as the optional fifth header token it
means "no personal item", as a whole line it terminates the goods list
(handled by ``blocks.sentinel``).
"""

from __future__ import annotations

from dataclasses import dataclass

from prm_ingest.blocks.sentinel import SENTINEL
from prm_ingest.tokens import TokenReader, signed


@dataclass(frozen=True)
class SpotHeader:
    name: str
    world_name: str
    pos_x: int
    pos_y: int
    personal_item_name: str | None


@dataclass(frozen=True)
class Spot:
    """A location and the goods it produces.

    Attributes:
        name: Spot name.
        world_name: World the spot is located in.
        pos_x: Abscissa of the spot.
        pos_y: Ordinate of the spot.
        personal_item_name: Personal item of the spot's advisor, if any.
        goods: ``(goods_name, destination_name)`` pairs in file order.
    """
    name: str
    world_name: str
    pos_x: int
    pos_y: int
    personal_item_name: str | None
    goods: tuple[tuple[str, str], ...]


def parse_spot_header(line: str) -> SpotHeader:
    reader = TokenReader(line)
    name = reader.take("name")
    world_name = reader.take("world")
    pos_x = reader.take("pos_x", signed)
    pos_y = reader.take("pos_y", signed)
    personal_item = reader.take_optional("personal_item")
    reader.finish("first line of the block")
    if personal_item == SENTINEL:
        personal_item = None
    return SpotHeader(
        name=name,
        world_name=world_name,
        pos_x=pos_x,
        pos_y=pos_y,
        personal_item_name=personal_item,
    )

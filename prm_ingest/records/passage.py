"""Passage records from ``passages.prm``."""

from __future__ import annotations

from dataclasses import dataclass

from prm_ingest.tokens import TokenReader, signed


@dataclass(frozen=True)
class Passage:
    """A corridor between two worlds.

    Attributes:
        name: Passage name.
        world_src_name: World the passage is located in.
        world_dest_name: World the passage leads to.
        pos_x: Abscissa of the passage in the source world.
        pos_y: Ordinate of the passage in the source world.
    """
    name: str
    world_src_name: str
    world_dest_name: str
    pos_x: int
    pos_y: int


def parse_passage(line: str) -> Passage:
    """Parse ``name world_source world_destination pos_x pos_y``."""
    reader = TokenReader(line)
    name = reader.take("name")
    world_src_name = reader.take("world_source")
    world_dest_name = reader.take("world_destination")
    pos_x = reader.take("pos_x", signed)
    pos_y = reader.take("pos_y", signed)
    reader.finish()
    return Passage(
        name=name,
        world_src_name=world_src_name,
        world_dest_name=world_dest_name,
        pos_x=pos_x,
        pos_y=pos_y,
    )

"""World records from ``worlds.prm``: ``name width height``."""

from __future__ import annotations

from dataclasses import dataclass

from prm_ingest.tokens import TokenReader, unsigned


@dataclass(frozen=True)
class World:
    name: str
    width: int   # x
    height: int  # y


def parse_world(line: str) -> World:
    reader = TokenReader(line)
    name = reader.take("name")
    width = reader.take("width", unsigned)
    height = reader.take("height", unsigned)
    reader.finish()
    return World(name=name, width=width, height=height)

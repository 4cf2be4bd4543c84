"""Vanger density records from ``vangers.prm``."""

from __future__ import annotations

from prm_ingest.tokens import TokenReader, unsigned


def parse_vangers_total(line: str) -> int:
    """Parse the first line: total c-vangers number in the Chain at one moment."""
    reader = TokenReader(line)
    total = reader.take("vangers_total", unsigned)
    reader.finish("vangers_total line")
    return total


def parse_world_weight(line: str) -> tuple[str, int]:
    """Parse ``world relative_weight``."""
    reader = TokenReader(line)
    world = reader.take("world")
    weight = reader.take(
        "relative weight", unsigned, malformed="one of a line with relative weights is bad"
    )
    reader.finish("relative weight line")
    return world, weight

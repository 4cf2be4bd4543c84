"""Price records from ``price.prm``: ``name buy sell`` under an escave title."""

from __future__ import annotations

from dataclasses import dataclass

from prm_ingest.tokens import TokenReader, unsigned


@dataclass(frozen=True)
class Price:
    name: str
    buy: int
    sell: int


def parse_price(line: str) -> Price:
    reader = TokenReader(line)
    name = reader.take("name")
    buy = reader.take("buy", unsigned)
    sell = reader.take("sell", unsigned)
    reader.finish()
    return Price(name=name, buy=buy, sell=sell)

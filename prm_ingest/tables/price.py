"""
Price table from ``price.prm``.

Prices are grouped under escave titles::

    Podish
    Nymbos 100 80
    Phlegma 40 30
    Incubator
    ...
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

import pandas as pd

from prm_ingest.blocks.grouped import read_title_groups
from prm_ingest.cursor import LineCursor
from prm_ingest.records.price import Price, parse_price
from prm_ingest.tables.base import PrmTable


@dataclass(frozen=True)
class TablePrice(PrmTable):
    """Escave name -> prices of the goods traded there.

    Unhashable: the groups live in a read-only mapping view.
    """

    name = "prices"
    __hash__ = None  # type: ignore[assignment]

    prices: Mapping[str, tuple[Price, ...]]

    @classmethod
    def _assemble(cls, cursor: LineCursor) -> TablePrice:
        groups = read_title_groups(cursor, item=parse_price, item_record="price")
        return cls(prices=MappingProxyType(groups))

    def __len__(self) -> int:
        return len(self.prices)

    def __iter__(self) -> Iterator[str]:
        return iter(self.prices)

    def __getitem__(self, escave: str) -> tuple[Price, ...]:
        return self.prices[escave]

    def __contains__(self, escave: object) -> bool:
        return escave in self.prices

    def to_frame(self) -> pd.DataFrame:
        rows = [
            (escave, price.name, price.buy, price.sell)
            for escave, prices in self.prices.items()
            for price in prices
        ]
        return pd.DataFrame(rows, columns=["escave", "name", "buy", "sell"])

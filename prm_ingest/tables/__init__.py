"""
Tables sub-package for prm-ingest.

One module per PRM file. Each table class assembles a complete,
immutable table from the cleaned lines of its file, using the record
parsers (``prm_ingest.records``) and, for the multi-line formats, the
block parsers (``prm_ingest.blocks``):

- world.py, passage.py: one record per line.
- item.py, mechos.py: records after a declared count.
- vangers.py: total line plus ``world weight`` lines.
- price.py, tabutask.py: title-delimited groups.
- spot.py: sentinel-terminated lists.
- bunch.py: fixed-count blocks, one per bios.
"""

from prm_ingest.tables.base import PrmTable
from prm_ingest.tables.bunch import TableBunch
from prm_ingest.tables.item import TableItem
from prm_ingest.tables.mechos import TableMechos
from prm_ingest.tables.passage import TablePassage
from prm_ingest.tables.price import TablePrice
from prm_ingest.tables.spot import TableSpot
from prm_ingest.tables.tabutask import TableTabutask
from prm_ingest.tables.vangers import TableVangersWeight
from prm_ingest.tables.world import TableWorld

__all__ = [
    "PrmTable",
    "TableBunch",
    "TableItem",
    "TableMechos",
    "TablePassage",
    "TablePrice",
    "TableSpot",
    "TableTabutask",
    "TableVangersWeight",
    "TableWorld",
]

"""
Tabutask records from ``tabutask.prm``.

The file groups task lines under escave titles, and the format mentions
cash, luck, cycle, target, work, item and count properties, but the
order and types of the tokens on a task line are not documented.
``parse_tabutask()`` therefore always raises ``UnimplementedRecord``
instead of guessing a layout.
"""

from __future__ import annotations

from dataclasses import dataclass

from prm_ingest.exceptions import UnimplementedRecord


@dataclass(frozen=True)
class Tabutask:
    line: str


def parse_tabutask(line: str) -> Tabutask:
    # TODO: implement once the tabutask token layout is documented
    raise UnimplementedRecord("tabutask")

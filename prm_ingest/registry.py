"""
Table registry for prm-ingest.

Maps table names (the keys of ``FilesConfig``) to the table classes that
assemble them. ``get_table_class()`` is the single lookup used by
``PrmFolder`` and the inspection script.
"""

from __future__ import annotations

import logging

from prm_ingest.exceptions import ConfigValidationError
from prm_ingest.tables import (
    PrmTable,
    TableBunch,
    TableItem,
    TableMechos,
    TablePassage,
    TablePrice,
    TableSpot,
    TableTabutask,
    TableVangersWeight,
    TableWorld,
)

logger = logging.getLogger(__name__)

_TABLE_CLASSES: tuple[type[PrmTable], ...] = (
    TableWorld,
    TablePassage,
    TableItem,
    TableMechos,
    TableVangersWeight,
    TablePrice,
    TableTabutask,
    TableSpot,
    TableBunch,
)

TABLES: dict[str, type[PrmTable]] = {cls.name: cls for cls in _TABLE_CLASSES}


def get_table_class(name: str) -> type[PrmTable]:
    """Return the table class registered under *name*.

    Raises:
        ConfigValidationError: If no table has that name.
    """
    try:
        return TABLES[name]
    except KeyError:
        raise ConfigValidationError(
            f"Unknown table name: '{name}'. Known tables: {list(TABLES)}"
        ) from None

"""
Folder handle for prm-ingest.

The ``PrmFolder`` class is a **handle object** that encapsulates a
configuration and the folder of PRM files it points at. Once created
(via ``prm_ingest.open()``), it remembers the folder, encoding and file
names so callers only name the table they want.

The handle holds no parsed state: every ``load()`` call re-reads and
re-parses its file, so independent handles (or threads) never share
mutable state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd

from prm_ingest.config import PrmConfig, save_config
from prm_ingest.exceptions import PrmError, describe_error
from prm_ingest.registry import TABLES, get_table_class
from prm_ingest.tables import PrmTable

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# FolderInfo -- lightweight summary
# ---------------------------------------------------------------------------

@dataclass
class FolderInfo:
    """Summary returned by ``PrmFolder.describe()``.

    Attributes:
        folder: The PRM folder.
        present: Table names whose file exists.
        missing: Table names whose file does not exist.
        sizes: Table name -> number of entries, for tables that loaded.
        errors: Table name -> error message, for tables that failed.
    """

    folder: str
    present: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    sizes: dict[str, int] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# PrmFolder -- the main handle class
# ---------------------------------------------------------------------------

class PrmFolder:
    """Handle object for a folder of PRM files.

    Attributes:
        config: The parsed ``PrmConfig``.
        config_path: Path of the YAML config, when opened from one.
    """

    def __init__(self, config: PrmConfig, config_path: str | Path | None = None) -> None:
        self.config = config
        self.config_path = Path(config_path) if config_path is not None else None

    @property
    def folder(self) -> Path:
        """Resolved PRM folder from the config."""
        return Path(self.config.source.folder)

    def __repr__(self) -> str:
        return f"PrmFolder(folder={str(self.folder)!r}, tables={self.config.tables})"

    def path_of(self, name: str) -> Path:
        return get_table_class(name).file_path(self.folder, self.config)

    def load(self, name: str) -> PrmTable:
        """Load and parse one table by name (e.g. ``"bunches"``).

        Raises:
            ConfigValidationError: If *name* is not a known table.
            OpenFailure, SignatureMismatch, TableError: As raised by the table.
        """
        table_cls = get_table_class(name)
        return table_cls.load(self.folder, self.config)

    def load_all(self, names: list[str] | None = None) -> dict[str, PrmTable]:
        """Load several tables, failing fast on the first error.

        Args:
            names: Table names; defaults to ``config.tables``.
        """
        names = names if names is not None else self.config.tables
        tables: dict[str, PrmTable] = {}
        for name in names:
            tables[name] = self.load(name)
        logger.info("Loaded %d tables from %s", len(tables), self.folder)
        return tables

    def load_frame(self, name: str) -> pd.DataFrame:
        """Load one table and return its DataFrame view."""
        return self.load(name).to_frame()

    def describe(self) -> FolderInfo:
        """Try every known table and summarise what loads and what does not.

        Unlike ``load_all()`` this never raises for a single bad table:
        failures are recorded in ``FolderInfo.errors``.
        """
        info = FolderInfo(folder=str(self.folder))
        for name in TABLES:
            if not self.path_of(name).exists():
                info.missing.append(name)
                continue
            info.present.append(name)
            try:
                info.sizes[name] = len(self.load(name))
            except PrmError as exc:
                logger.warning("Table '%s' failed to load: %s", name, describe_error(exc))
                info.errors[name] = describe_error(exc)
        return info

    def save_config(self, path: str | Path | None = None) -> Path:
        """Write ``self.config`` to *path* (or the path it was opened from)."""
        target = Path(path) if path is not None else self.config_path
        if target is None:
            raise ValueError("No config path: pass one explicitly")
        save_config(self.config, target)
        self.config_path = target
        return target

"""
Base table protocol / ABC for prm-ingest.

Every PRM table implements this interface. The contract is:

1. ``from_lines()`` takes the cleaned line sequence of one file (signature
   already removed) and assembles the complete table, or fails on the
   first error. Content errors are wrapped in ``TableError`` so callers
   get a single entry point into the diagnostic chain.
2. ``load()`` resolves the table's file inside a folder, runs the
   signature loader and then ``from_lines()``. ``OpenFailure`` and
   ``SignatureMismatch`` are propagated unchanged.
3. ``to_frame()`` exposes the records as a ``pandas.DataFrame`` for
   inspection.

Tables are immutable once built: record sequences are tuples and keyed
tables expose read-only mappings.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import ClassVar, TypeVar

import pandas as pd

from prm_ingest.config import PrmConfig
from prm_ingest.cursor import LineCursor
from prm_ingest.exceptions import PrmParseError, TableError
from prm_ingest.loader import load_prm_lines

logger = logging.getLogger(__name__)

TableT = TypeVar("TableT", bound="PrmTable")


class PrmTable(ABC):
    """Abstract base class for every table assembled from one PRM file.

    Subclasses set ``name`` (the key used in config and registry) and
    implement ``_assemble()``, ``__len__()`` and ``to_frame()``.
    """

    name: ClassVar[str]

    @classmethod
    @abstractmethod
    def _assemble(cls: type[TableT], cursor: LineCursor) -> TableT:
        """Build the table from a cursor over the cleaned lines."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of entities (or groups) in the table."""

    @abstractmethod
    def to_frame(self) -> pd.DataFrame:
        """Flatten the table into a DataFrame."""

    @classmethod
    def from_lines(
        cls: type[TableT],
        lines: Sequence[str],
        path: str | Path | None = None,
    ) -> TableT:
        """Assemble the table from cleaned lines.

        Raises:
            TableError: Wrapping the first content error encountered.
        """
        cursor = LineCursor(lines)
        try:
            table = cls._assemble(cursor)
        except PrmParseError as exc:
            raise TableError(cls.name, path) from exc
        logger.debug("Assembled %s table: %d entries", cls.name, len(table))
        return table

    @classmethod
    def file_path(cls, folder: str | Path, config: PrmConfig | None = None) -> Path:
        """Path of this table's file inside *folder*."""
        config = config or PrmConfig()
        return Path(folder) / config.files.file_for(cls.name)

    @classmethod
    def load(
        cls: type[TableT],
        folder: str | Path,
        config: PrmConfig | None = None,
    ) -> TableT:
        """Load the table from its file inside *folder*.

        Args:
            folder: Directory holding the PRM files.
            config: Encoding, signature and file names; defaults apply when ``None``.

        Raises:
            OpenFailure: If the file cannot be read.
            SignatureMismatch: If the signature line is missing or wrong.
            TableError: If the content fails to parse.
        """
        config = config or PrmConfig()
        path = cls.file_path(folder, config)
        lines = load_prm_lines(
            path,
            signature=config.source.signature,
            encoding=config.source.encoding,
        )
        table = cls.from_lines(lines, path=path)
        logger.info("Loaded %s table from %s: %d entries", cls.name, path, len(table))
        return table

"""
prm-ingest: Python library for ingesting Vangers PRM parameter files.

Public API surface:

- ``open(path)`` -- **recommended entry point**. Polymorphic: accepts
  either a folder of ``.prm`` files or a ``prmconfig.yaml`` path and
  returns a ``PrmFolder`` handle.

- ``load_table(name, folder)`` -- one-shot load of a single table.

- ``load_prm_lines(path)`` / ``strip_comments(lines)`` -- the engine
  pieces, for callers with their own table layouts.
"""

from __future__ import annotations

import logging
from pathlib import Path

from prm_ingest.comments import strip_comments
from prm_ingest.config import PrmConfig, generate_default_config, load_config
from prm_ingest.exceptions import describe_error
from prm_ingest.folder import FolderInfo, PrmFolder
from prm_ingest.loader import SIGNATURE, load_prm_lines
from prm_ingest.registry import TABLES, get_table_class
from prm_ingest.tables import PrmTable

__all__ = [
    "open",
    "load_table",
    "load_prm_lines",
    "strip_comments",
    "describe_error",
    "PrmConfig",
    "PrmFolder",
    "FolderInfo",
    "SIGNATURE",
    "TABLES",
]

logger = logging.getLogger(__name__)


def open(path: str | Path, encoding: str | None = None) -> PrmFolder:
    """Single entry point: open a PRM folder or an existing config.

    Polymorphic behaviour based on *path*:

    - **YAML file** (``.yaml`` / ``.yml``): loads the config and returns a
      handle for the folder it names.
    - **Directory**: returns a handle with the default config for that
      folder.

    Args:
        path: A folder of ``.prm`` files or a ``prmconfig.yaml`` path.
        encoding: Overrides the text encoding of the config.

    Returns:
        A ``PrmFolder`` handle. Nothing is parsed until a table is loaded.

    Raises:
        FileNotFoundError: If *path* is neither a config file nor a folder.

    Examples::

        folder = prm_ingest.open("data/resource/iscreen")
        bunches = folder.load("bunches")

        folder = prm_ingest.open("prmconfig.yaml")
        tables = folder.load_all()
    """
    p = Path(path)

    if p.suffix.lower() in (".yaml", ".yml"):
        logger.info("open() -- loading config from %s", p)
        config = load_config(p)
        if encoding is not None:
            config.source.encoding = encoding
        return PrmFolder(config, p)

    if not p.is_dir():
        raise FileNotFoundError(f"Not a PRM folder or config file: {p}")

    logger.info("open() -- PRM folder %s", p)
    config = generate_default_config(p, encoding=encoding or "utf-8")
    return PrmFolder(config)


def load_table(name: str, folder: str | Path, config: PrmConfig | None = None) -> PrmTable:
    """Load one table (e.g. ``"spots"``) from *folder*."""
    return get_table_class(name).load(folder, config)

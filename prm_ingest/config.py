"""
Configuration models and YAML I/O for prm-ingest.

This module defines the Pydantic models that map 1:1 to ``prmconfig.yaml``,
plus helper functions for loading, saving, and generating the config.

Key models:
- PrmConfig: Top-level config (source + files + tables).
- SourceConfig: Folder holding the PRM files, text encoding, signature.
- FilesConfig: File name of every table inside the folder.

Key functions:
- load_config(path) -> PrmConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
- generate_default_config(folder) -> PrmConfig: Defaults for a folder.

Why Pydantic + YAML:
- Pydantic gives strict validation and clear error messages.
- YAML is human-editable (mods rename files or use another encoding).
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

from prm_ingest.exceptions import ConfigValidationError
from prm_ingest.loader import SIGNATURE

logger = logging.getLogger(__name__)


class SourceConfig(BaseModel):
    """Where the PRM files live and how to read them."""

    folder: str = Field(".", description="Directory holding the .prm files")
    encoding: str = Field("utf-8", description="Text encoding of the .prm files")
    signature: str = Field(SIGNATURE, description="Expected first content line")


class FilesConfig(BaseModel):
    """File name of each table inside the source folder.

    Field names are the table names used throughout the package.
    """

    worlds: str = "worlds.prm"
    passages: str = "passages.prm"
    items: str = "item.prm"
    mechoses: str = "car.prm"
    vangers: str = "vangers.prm"
    prices: str = "price.prm"
    tabutasks: str = "tabutask.prm"
    spots: str = "spot.prm"
    bunches: str = "bunches.prm"

    def file_for(self, table_name: str) -> str:
        if table_name not in type(self).model_fields:
            raise ConfigValidationError(f"Unknown table name: '{table_name}'")
        return getattr(self, table_name)


TABLE_NAMES: tuple[str, ...] = tuple(FilesConfig.model_fields)


class PrmConfig(BaseModel):
    """Top-level configuration for prm-ingest.

    ``tables`` lists the tables loaded by ``PrmFolder.load_all()`` when no
    explicit selection is given.
    """

    source: SourceConfig = Field(default_factory=SourceConfig)
    files: FilesConfig = Field(default_factory=FilesConfig)
    tables: list[str] = Field(
        default_factory=lambda: list(TABLE_NAMES),
        description="Tables loaded by default, by name",
    )

    @model_validator(mode="after")
    def _check_table_names(self) -> PrmConfig:
        """Validate that every selected table is a known table."""
        unknown = [name for name in self.tables if name not in TABLE_NAMES]
        if unknown:
            raise ValueError(
                f"Unknown table name(s) {unknown}. Known tables: {list(TABLE_NAMES)}"
            )
        return self


def load_config(path: str | Path) -> PrmConfig:
    """Load and validate ``prmconfig.yaml`` into a PrmConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the config file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return PrmConfig.model_validate(raw)


def save_config(config: PrmConfig, path: str | Path) -> None:
    """Serialize a PrmConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# prm-ingest configuration\n")
        f.write("# Edit this file to change file names, encoding or the default tables.\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)


def generate_default_config(folder: str | Path, encoding: str = "utf-8") -> PrmConfig:
    """Build a PrmConfig for *folder* with the standard file names."""
    return PrmConfig(source=SourceConfig(folder=str(folder), encoding=encoding))

"""
Integration tests: PrmFolder handle end-to-end.

Tests the full handle lifecycle using ``prm_ingest.open()`` and the
``PrmFolder`` methods (``load``, ``load_all``, ``load_frame``,
``describe``, ``save_config``) against a complete folder of sample PRM
files written into ``tmp_path``.
"""

from __future__ import annotations

import pandas as pd
import pytest

import prm_ingest
from prm_ingest.exceptions import (
    ConfigValidationError,
    OpenFailure,
    SignatureMismatch,
    StructuralError,
    TableError,
    UnimplementedRecord,
    root_cause,
)
from prm_ingest.folder import FolderInfo, PrmFolder
from prm_ingest.tables import TableBunch, TableSpot, TableWorld
from tests.conftest import WORLDS_PRM, write_prm


@pytest.mark.integration
class TestOpenFolder:
    """open(folder) and loading tables from it."""

    def test_open_directory(self, prm_folder):
        folder = prm_ingest.open(prm_folder)
        assert isinstance(folder, PrmFolder)
        assert folder.folder == prm_folder
        assert folder.config_path is None

    def test_open_missing_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            prm_ingest.open(tmp_path / "missing")

    def test_load_one(self, prm_folder):
        table = prm_ingest.open(prm_folder).load("worlds")
        assert isinstance(table, TableWorld)
        assert len(table) == 3

    def test_load_all(self, prm_folder):
        tables = prm_ingest.open(prm_folder).load_all()
        assert list(tables) == list(prm_ingest.TABLES)
        assert {name: len(t) for name, t in tables.items()} == {
            "worlds": 3,
            "passages": 2,
            "items": 2,
            "mechoses": 2,
            "vangers": 3,
            "prices": 2,
            "tabutasks": 2,
            "spots": 2,
            "bunches": 3,
        }

    def test_load_selected(self, prm_folder):
        tables = prm_ingest.open(prm_folder).load_all(["spots", "bunches"])
        assert isinstance(tables["spots"], TableSpot)
        assert isinstance(tables["bunches"], TableBunch)

    def test_load_frame(self, prm_folder):
        df = prm_ingest.open(prm_folder).load_frame("prices")
        assert isinstance(df, pd.DataFrame)
        assert df["escave"].tolist() == ["Podish", "Podish", "Incubator"]

    def test_load_table_shortcut(self, prm_folder):
        table = prm_ingest.load_table("vangers", prm_folder)
        assert table.vangers_total == 120

    def test_unknown_table(self, prm_folder):
        with pytest.raises(ConfigValidationError):
            prm_ingest.open(prm_folder).load("escaves")

    def test_loads_are_independent(self, prm_folder):
        folder = prm_ingest.open(prm_folder)
        first = folder.load("bunches")
        second = folder.load("bunches")
        assert first == second
        assert first is not second


@pytest.mark.integration
class TestFailures:
    """File-level and content-level failures through the handle."""

    def test_missing_file_is_open_failure(self, prm_folder):
        (prm_folder / "spot.prm").unlink()
        with pytest.raises(OpenFailure) as info:
            prm_ingest.open(prm_folder).load("spots")
        assert info.value.path == prm_folder / "spot.prm"

    def test_wrong_signature(self, prm_folder):
        (prm_folder / "worlds.prm").write_text(
            "uniVang-ParametersFile_Ver_0\n" + WORLDS_PRM, encoding="utf-8"
        )
        with pytest.raises(SignatureMismatch):
            prm_ingest.open(prm_folder).load("worlds")

    def test_table_error_carries_path(self, prm_folder):
        write_prm(prm_folder / "item.prm", "5\nNymbos 1 0 0 2 1 0 0\n")
        with pytest.raises(TableError) as info:
            prm_ingest.open(prm_folder).load("items")
        assert info.value.path == prm_folder / "item.prm"
        assert isinstance(root_cause(info.value), StructuralError)

    def test_load_all_fails_fast(self, prm_folder):
        write_prm(prm_folder / "tabutask.prm", "Podish\ntask 1 2\n")
        with pytest.raises(TableError) as info:
            prm_ingest.open(prm_folder).load_all()
        assert isinstance(root_cause(info.value), UnimplementedRecord)

    def test_encoding_override(self, prm_folder):
        (prm_folder / "worlds.prm").write_bytes(
            ("uniVang-ParametersFile_Ver_1\nФострал 1 2\n").encode("cp866")
        )
        with pytest.raises(OpenFailure):
            prm_ingest.open(prm_folder).load("worlds")
        table = prm_ingest.open(prm_folder, encoding="cp866").load("worlds")
        assert table[0].name == "Фострал"


@pytest.mark.integration
class TestDescribe:
    """PrmFolder.describe() summaries."""

    def test_complete_folder(self, prm_folder):
        info = prm_ingest.open(prm_folder).describe()
        assert isinstance(info, FolderInfo)
        assert info.missing == []
        assert info.errors == {}
        assert info.sizes["bunches"] == 3

    def test_missing_and_broken(self, prm_folder):
        (prm_folder / "car.prm").unlink()
        write_prm(prm_folder / "price.prm", "Nymbos 100 80\n")
        info = prm_ingest.open(prm_folder).describe()
        assert info.missing == ["mechoses"]
        assert "prices" in info.present
        assert "prices" not in info.sizes
        assert info.errors["prices"].startswith("prices table from")
        assert "expected title block" in info.errors["prices"]


@pytest.mark.integration
class TestConfigWorkflow:
    """Config save -> edit -> open(yaml) cycle."""

    def test_save_and_reopen(self, prm_folder, tmp_path):
        folder = prm_ingest.open(prm_folder)
        config_path = folder.save_config(tmp_path / "prmconfig.yaml")
        assert config_path.exists()

        reopened = prm_ingest.open(config_path)
        assert reopened.config == folder.config
        assert reopened.config_path == config_path
        assert len(reopened.load("worlds")) == 3

    def test_renamed_file(self, prm_folder, tmp_path):
        (prm_folder / "car.prm").rename(prm_folder / "mechos.prm")
        folder = prm_ingest.open(prm_folder)
        folder.config.files.mechoses = "mechos.prm"
        folder.config.tables = ["mechoses"]
        config_path = folder.save_config(tmp_path / "prmconfig.yaml")

        tables = prm_ingest.open(config_path).load_all()
        assert list(tables) == ["mechoses"]
        assert len(tables["mechoses"]) == 2

    def test_save_without_path(self, prm_folder):
        with pytest.raises(ValueError):
            prm_ingest.open(prm_folder).save_config()

"""
Unit tests for the block parsers (prm_ingest.blocks).

Each pattern is exercised with small hand-written record parsers so the
tests pin the block behaviour (consumed lines, terminators, error kinds)
independently of any PRM file.
"""

from __future__ import annotations

import pytest

from prm_ingest.blocks.base import parse_record, take_record
from prm_ingest.blocks.fixed_count import read_fixed_count_block
from prm_ingest.blocks.grouped import is_title, read_title_groups
from prm_ingest.blocks.sentinel import read_pair, read_sentinel_list
from prm_ingest.cursor import LineCursor
from prm_ingest.exceptions import (
    FieldError,
    RecordError,
    ShapeError,
    StructuralError,
)
from prm_ingest.tokens import TokenReader, unsigned


def _title(line: str) -> tuple[str, int]:
    reader = TokenReader(line)
    name = reader.take("name")
    count = reader.take("count", unsigned)
    reader.finish()
    return name, count


def _number(line: str) -> int:
    reader = TokenReader(line)
    value = reader.take("value", unsigned)
    reader.finish()
    return value


def _header(line: str) -> tuple[str, str | None]:
    tokens = line.split()
    personal = tokens[4] if len(tokens) > 4 else None
    return tokens[0], None if personal == "none" else personal


PAIR_UNIT = [("first", _number), ("second", _number)]


class TestRecordHelpers:
    """Tests for parse_record() / take_record()."""

    def test_wraps_leaf_error(self):
        with pytest.raises(RecordError) as info:
            parse_record(_number, "x", record="number", position=4)
        assert info.value.position == 4
        assert info.value.line == "x"
        assert "content line 5" in str(info.value)
        assert isinstance(info.value.__cause__, FieldError)

    def test_take_record_at_end(self):
        with pytest.raises(StructuralError, match="expected number line"):
            take_record(LineCursor([]), _number, record="number")


class TestFixedCountBlock:
    """Tests for read_fixed_count_block()."""

    def test_reads_declared_units(self):
        cursor = LineCursor(["block 2", "1", "2", "3", "4", "next 1"])
        block = read_fixed_count_block(cursor, title=_title, unit=PAIR_UNIT)
        assert block.header == "block"
        assert block.units == ((1, 2), (3, 4))
        assert cursor.position == 5

    def test_missing_unit_is_structural(self):
        cursor = LineCursor(["block 2", "1", "2"])
        with pytest.raises(StructuralError, match="declares 2 units") as info:
            read_fixed_count_block(cursor, title=_title, unit=PAIR_UNIT)
        assert not isinstance(info.value, RecordError)

    def test_half_unit_is_structural(self):
        cursor = LineCursor(["block 1", "1"])
        with pytest.raises(StructuralError, match="second line"):
            read_fixed_count_block(cursor, title=_title, unit=PAIR_UNIT)

    def test_malformed_unit_is_record_error(self):
        cursor = LineCursor(["block 2", "1", "2", "1", "oops"])
        with pytest.raises(RecordError) as info:
            read_fixed_count_block(cursor, title=_title, unit=PAIR_UNIT)
        assert info.value.record == "second"
        assert info.value.position == 4
        assert isinstance(info.value.__cause__, FieldError)

    def test_zero_count_is_structural(self):
        cursor = LineCursor(["block 0", "1", "2"])
        with pytest.raises(StructuralError, match="zero units"):
            read_fixed_count_block(cursor, title=_title, unit=PAIR_UNIT)

    def test_bad_title_is_record_error(self):
        cursor = LineCursor(["block"])
        with pytest.raises(RecordError) as info:
            read_fixed_count_block(cursor, title=_title, unit=PAIR_UNIT, title_record="bunch title")
        assert info.value.record == "bunch title"


class TestSentinelList:
    """Tests for read_sentinel_list()."""

    def test_header_without_personal_item(self):
        cursor = LineCursor(["loc w 1 2 none", "potato market", "none"])
        block = read_sentinel_list(cursor, header=_header)
        assert block.header == ("loc", None)
        assert block.items == (("potato", "market"),)
        assert cursor.at_end()

    def test_empty_item_list(self):
        cursor = LineCursor(["loc w 1 2", "none", "other"])
        block = read_sentinel_list(cursor, header=_header)
        assert block.items == ()
        assert cursor.position == 2

    def test_missing_terminator(self):
        cursor = LineCursor(["loc w 1 2", "potato market"])
        with pytest.raises(StructuralError, match="`none` terminate line not found"):
            read_sentinel_list(cursor, header=_header)

    def test_terminator_must_be_whole_line(self):
        cursor = LineCursor(["loc w 1 2", "none market", "none"])
        block = read_sentinel_list(cursor, header=_header)
        assert block.items == (("none", "market"),)

    def test_bad_item_shape(self):
        cursor = LineCursor(["loc w 1 2", "potato market extra", "none"])
        with pytest.raises(RecordError) as info:
            read_sentinel_list(cursor, header=_header, item_record="goods")
        assert info.value.record == "goods"
        assert isinstance(info.value.__cause__, ShapeError)

    def test_read_pair(self):
        assert read_pair("a  b") == ("a", "b")
        with pytest.raises(ShapeError):
            read_pair("a")


class TestTitleGroups:
    """Tests for read_title_groups()."""

    def test_groups_by_title(self):
        cursor = LineCursor(["EscaveA", "item1 10 20", "item2 5 5", "EscaveB", "item3 1 1"])
        groups = read_title_groups(cursor, item=lambda line: line.split()[0])
        assert groups == {"EscaveA": ("item1", "item2"), "EscaveB": ("item3",)}
        assert list(groups) == ["EscaveA", "EscaveB"]

    def test_item_before_title(self):
        cursor = LineCursor(["item1 10 20", "EscaveA"])
        with pytest.raises(StructuralError, match="expected title block"):
            read_title_groups(cursor, item=str)

    def test_empty_group(self):
        cursor = LineCursor(["EscaveA", "EscaveB", "x 1"])
        groups = read_title_groups(cursor, item=str)
        assert groups == {"EscaveA": (), "EscaveB": ("x 1",)}

    def test_repeated_title_replaces(self):
        cursor = LineCursor(["A", "x 1", "B", "A", "y 2"])
        groups = read_title_groups(cursor, item=str)
        assert groups["A"] == ("y 2",)

    def test_empty_input(self):
        assert read_title_groups(LineCursor([]), item=str) == {}

    def test_item_error_position(self):
        cursor = LineCursor(["A", "x 1", "bad y"])
        with pytest.raises(RecordError) as info:
            read_title_groups(cursor, item=lambda line: _number(line.split()[1]), item_record="price")
        assert info.value.position == 2

    def test_is_title(self):
        assert is_title("Podish")
        assert not is_title("Podish 1")

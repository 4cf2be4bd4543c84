"""
Bunch records from ``bunches.prm``.

A bunch describes the economic cycles of one escave for one bios. Its
title line is::

    <escave_name> <bios_index> <cycles>

followed by ``cycles`` units of two lines each: a cult stage line and a
cult game line. The cult game line is a closed sum type selected by its
leading tag:

    none                                                   no game
    HARVEST <goods> <count> <destination> <rotten_goods>   4 more tokens
    RACE <source> <goods_beg> <count_beg> <destination>
         <goods_end> <count_end> <rotten_goods>            7 more tokens
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union

from prm_ingest.blocks.sentinel import SENTINEL
from prm_ingest.exceptions import FieldError, ShapeError
from prm_ingest.tokens import TokenReader, u8, unquote, unsigned


class Bios(IntEnum):
    """Bios known to the PRM format, in file order."""
    ELEEPODS = 0
    BEEBOORATS = 1
    ZEEXES = 2

    @classmethod
    def from_name(cls, name: str) -> Bios:
        """Look up a bios by its in-game name (``"Eleepods"``)."""
        for bios in cls:
            if bios.display_name == name:
                return bios
        raise ValueError(f"unknown bios name: {name!r}")

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


def bios_from_index(token: str) -> Bios:
    return Bios(unsigned(token))


class CultGameType(Enum):
    RACE = "RACE"
    HARVEST = "HARVEST"


# ---------------------------------------------------------------------------
# Cult stage
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CultStage:
    """One cycle of a bunch.

    Attributes:
        name: Cycle name (surrounding quotes removed).
        cirt: Amount of cirt needed to complete the period.
        time: Half-life time in minutes.
        price: Price coefficient.
        palette: Path to the palette resource used during the cycle.
    """
    name: str
    cirt: int
    time: int
    price: int
    palette: str


def parse_cult_stage(line: str) -> CultStage:
    reader = TokenReader(line)
    name = reader.take("name", unquote)
    cirt = reader.take("cirt", unsigned)
    time = reader.take("time", unsigned)
    price = reader.take("price koeff", unsigned)
    palette = reader.take("palette", missing="path to `.pal` file is missing")
    reader.finish()
    return CultStage(name=name, cirt=cirt, time=time, price=price, palette=palette)


# ---------------------------------------------------------------------------
# Cult games
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CultGameHarvest:
    goods_type_name: str
    goods_count: int
    destination_name: str
    rotten_goods_type_name: str

    @property
    def game_type(self) -> CultGameType:
        return CultGameType.HARVEST


@dataclass(frozen=True)
class CultGameRace:
    source_name: str
    destination_name: str
    goods_type_beg_name: str
    goods_count_beg: int
    goods_type_end_name: str
    goods_count_end: int
    rotten_goods_type_name: str

    @property
    def game_type(self) -> CultGameType:
        return CultGameType.RACE


CultGame = Union[CultGameHarvest, CultGameRace]

# Tokens expected after the tag, per game type.
_GAME_ARITY = {
    CultGameType.HARVEST: 4,
    CultGameType.RACE: 7,
}


def _parse_harvest(reader: TokenReader) -> CultGameHarvest:
    return CultGameHarvest(
        goods_type_name=reader.take("goods name"),
        goods_count=reader.take("goods count", unsigned),
        destination_name=reader.take("destination"),
        rotten_goods_type_name=reader.take("rotten goods name"),
    )


def _parse_race(reader: TokenReader) -> CultGameRace:
    source_name = reader.take("source name")
    goods_type_beg_name = reader.take("goods-begin name")
    goods_count_beg = reader.take("goods-begin count", unsigned)
    destination_name = reader.take("destination name")
    goods_type_end_name = reader.take("goods-end name")
    goods_count_end = reader.take("goods-end count", unsigned)
    rotten_goods_type_name = reader.take("rotten goods name")
    return CultGameRace(
        source_name=source_name,
        destination_name=destination_name,
        goods_type_beg_name=goods_type_beg_name,
        goods_count_beg=goods_count_beg,
        goods_type_end_name=goods_type_end_name,
        goods_count_end=goods_count_end,
        rotten_goods_type_name=rotten_goods_type_name,
    )


def parse_cult_game(line: str) -> CultGame | None:
    """Parse a cult game line; ``None`` means the cycle has no game.

    Raises:
        FieldError: Unknown tag, or a malformed property.
        ShapeError: Wrong number of tokens for the tag.
    """
    reader = TokenReader(line)
    tag = reader.take("game type name")
    arity = reader.remaining

    if tag == SENTINEL:
        if arity:
            raise ShapeError(f"incorrect count properties for `{SENTINEL}`: {arity}")
        return None

    try:
        game_type = CultGameType(tag)
    except ValueError as exc:
        raise FieldError("game type name", tag, "incorrect type of a cult game") from exc

    if arity != _GAME_ARITY[game_type]:
        raise ShapeError(
            f"incorrect count properties (gametype `{game_type.value}`): "
            f"expected {_GAME_ARITY[game_type]}, found {arity}"
        )

    if game_type is CultGameType.HARVEST:
        return _parse_harvest(reader)
    return _parse_race(reader)


# ---------------------------------------------------------------------------
# Bunch
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Cult:
    """A cycle and the cult game that runs during it (if any)."""
    stage: CultStage
    game: CultGame | None


@dataclass(frozen=True)
class BunchTitle:
    escave_name: str
    bios: Bios


@dataclass(frozen=True)
class Bunch:
    """Cycles of one escave for one bios."""
    bios: Bios
    escave_name: str
    cults: tuple[Cult, ...]

    @property
    def cycles(self) -> int:
        return len(self.cults)


def parse_bunch_title(line: str) -> tuple[BunchTitle, int]:
    """Parse ``escave_name bios_index cycles``.

    Returns:
        ``(title, cycles)``; the zero-cycle check belongs to the block parser.
    """
    reader = TokenReader(line)
    escave_name = reader.take("escave name")
    bios = reader.take("bios", bios_from_index)
    cycles = reader.take("cycles", u8)
    reader.finish("title of the bunch block")
    return BunchTitle(escave_name=escave_name, bios=bios), cycles

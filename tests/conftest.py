"""
Shared test fixtures and sample PRM contents for prm-ingest tests.

Sample file bodies are module-level constants so unit and integration
tests build the same folder. ``prm_folder`` writes a complete, valid
folder into ``tmp_path``; tests that need a broken file overwrite one.
"""

from pathlib import Path

import pytest

SIGNATURE_LINE = "uniVang-ParametersFile_Ver_1"

# ---------------------------------------------------------------------------
# Sample file bodies (signature added by write_prm)
# ---------------------------------------------------------------------------
WORLDS_PRM = """\
// name   width  height
Fostral   2048   16384
Glorx     2048   16384  /* big one */
Necross   2048   8192
"""

PASSAGES_PRM = """\
/* name  from  to  x  y */
FostralGlorx  Fostral  Glorx   1000  -200
GlorxFostral  Glorx    Fostral 1200  300
"""

ITEM_PRM = """\
2  // number of items
Nymbos    1  0 0  2  1  0   0
Phlegma   1  5 -5 2  3  10  -1
"""

CAR_PRM = """\
1 // raffa
1 // light
0 // microbus
Moog   0  100  80  1 1 0 0  20 30 100 5 1 60 0 0 0 0 10 0
Mole   1  900  700 2 2 1 0  25 50 150 6 2 50 1 1 1 0 20 0
"""

VANGERS_PRM = """\
120
Fostral 3
Glorx   2
Necross 1
"""

PRICE_PRM = """\
Podish
Nymbos  100  80
Phlegma  40  30
Incubator
Heroin   300 250
"""

TABUTASK_PRM = """\
/* no tasks documented yet */
Podish
Incubator
"""

SPOT_PRM = """\
Podish   Fostral  100  200  Tabutask
Nymbos   Incubator
Phlegma  Podish
none
Lampasso Glorx    -10  40   none
none
"""

BUNCHES_PRM = """\
/* escave  bios  cycles */
Podish 0 2
"Eleerection" 100 30 4 resource/pal/el.pal
HARVEST Nymbos 10 Incubator Elixir
"Waiting" 50 20 2 resource/pal/wait.pal
none
Incubator 1 1
"Keeprocking" 80 25 3 resource/pal/kr.pal
RACE Incubator Heroin 5 Podish Nymbos 3 Rotten
ZeePa 2 1
"Zeexed" 10 10 1 resource/pal/z.pal
none
"""

SAMPLE_FILES = {
    "worlds.prm": WORLDS_PRM,
    "passages.prm": PASSAGES_PRM,
    "item.prm": ITEM_PRM,
    "car.prm": CAR_PRM,
    "vangers.prm": VANGERS_PRM,
    "price.prm": PRICE_PRM,
    "tabutask.prm": TABUTASK_PRM,
    "spot.prm": SPOT_PRM,
    "bunches.prm": BUNCHES_PRM,
}


def prm_text(body: str) -> str:
    """Prefix *body* with a commented signature header."""
    return f"/* Vangers parameters */\n{SIGNATURE_LINE}\n{body}"


def write_prm(path: Path, body: str) -> Path:
    path.write_text(prm_text(body), encoding="utf-8")
    return path


def body_lines(body: str) -> list[str]:
    """Cleaned lines of a sample body, for ``from_lines()`` tests."""
    from prm_ingest.comments import strip_comments

    return strip_comments(body.splitlines())


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def prm_folder(tmp_path: Path) -> Path:
    """A folder holding every sample PRM file."""
    folder = tmp_path / "prm"
    folder.mkdir()
    for name, body in SAMPLE_FILES.items():
        write_prm(folder / name, body)
    return folder


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs against a whole PRM folder)",
    )

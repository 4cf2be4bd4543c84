"""
Inspection script: load every table of a PRM folder via the public API.

Usage:
    python scripts/inspect_prm.py path/to/prm/folder
    python scripts/inspect_prm.py prmconfig.yaml --strict

Without ``--strict`` every table is attempted and failures are logged
with their full diagnostic path. With ``--strict`` the first failing
table aborts the run with exit code 1.
"""

from __future__ import annotations

import logging
import sys

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("inspect_prm")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> int:
    import prm_ingest
    from prm_ingest.exceptions import PrmError

    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    strict = "--strict" in sys.argv
    if len(args) != 1:
        log.error("usage: inspect_prm.py <folder-or-config> [--strict]")
        return 2

    folder = prm_ingest.open(args[0])
    log.info("=" * 70)
    log.info("Inspecting: %s", folder.folder)
    log.info("=" * 70)

    if strict:
        try:
            tables = folder.load_all()
        except PrmError as exc:
            log.error("FAILED  %s", prm_ingest.describe_error(exc))
            return 1
        for name, table in tables.items():
            log.info("  Table '%s': %d entries", name, len(table))
        return 0

    info = folder.describe()
    for name in info.missing:
        log.warning("  SKIP  %s  (file not found)", name)
    for name, size in info.sizes.items():
        log.info("  Table '%s': %d entries", name, size)
    for name, error in info.errors.items():
        log.error("  Table '%s' failed: %s", name, error)

    log.info("All tables processed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

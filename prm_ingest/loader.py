"""
Signature loader for PRM files.

Every PRM file starts (after comments are stripped) with the fixed
signature line ``uniVang-ParametersFile_Ver_1``. ``load_prm_lines()``
reads a file, runs the comment stripper, checks the signature and
returns the remaining cleaned lines.

Failure modes:
- ``OpenFailure``: the file is missing, unreadable, or not decodable in
  the requested encoding. The ``OSError`` / ``UnicodeDecodeError`` is
  kept as ``__cause__``.
- ``SignatureMismatch``: no content lines, or the first one differs
  from the expected signature.
"""

from __future__ import annotations

import logging
from pathlib import Path

from prm_ingest.comments import strip_comments
from prm_ingest.exceptions import OpenFailure, SignatureMismatch

logger = logging.getLogger(__name__)

SIGNATURE = "uniVang-ParametersFile_Ver_1"


def read_source_text(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """Read the raw lines of a source file.

    Raises:
        OpenFailure: If the file cannot be opened, read or decoded.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding=encoding) as f:
            return f.read().splitlines()
    except OSError as exc:
        raise OpenFailure(path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise OpenFailure(path, f"not decodable as {encoding}") from exc


def check_signature(
    lines: list[str],
    signature: str = SIGNATURE,
    path: str | Path = "<memory>",
) -> list[str]:
    """Validate and drop the signature line of an already cleaned sequence.

    Returns:
        A new list without the signature line.

    Raises:
        SignatureMismatch: If *lines* is empty or starts with another line.
    """
    if not lines:
        raise SignatureMismatch(path, None)
    if lines[0] != signature:
        raise SignatureMismatch(path, lines[0])
    return lines[1:]


def load_prm_lines(
    path: str | Path,
    signature: str = SIGNATURE,
    encoding: str = "utf-8",
) -> list[str]:
    """Open a PRM file and return its cleaned content lines.

    Args:
        path: Path to the ``.prm`` file.
        signature: Expected first content line.
        encoding: Text encoding of the file.

    Returns:
        Cleaned content lines, signature removed.

    Raises:
        OpenFailure: If the file cannot be read.
        SignatureMismatch: If the signature line is missing or wrong.
    """
    path = Path(path)
    raw = read_source_text(path, encoding=encoding)
    cleaned = strip_comments(raw)
    rows = check_signature(cleaned, signature=signature, path=path)
    logger.info("Loaded %s: %d raw lines, %d content lines", path, len(raw), len(rows))
    return rows

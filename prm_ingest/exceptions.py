"""
Custom exception hierarchy for prm-ingest.

Why a custom hierarchy:
- Callers can catch specific failures (e.g., SignatureMismatch vs
  StructuralError) without relying on generic ValueError/RuntimeError.
- Every layer (record -> block -> table) re-raises with ``raise ... from``
  so the full causal path down to the offending token is kept on
  ``__cause__`` and can be rendered with ``describe_error()``.

Leaf kinds:
- OpenFailure / SignatureMismatch: the file itself is unusable.
- FieldError / ShapeError / StructuralError / UnimplementedRecord: the
  content is unusable.

Context wrappers (RecordError, BlockError, TableError) add *where* the
leaf error happened.
"""

from __future__ import annotations

from pathlib import Path


class PrmError(Exception):
    """Base exception for all prm-ingest errors."""


class ConfigValidationError(PrmError):
    """Raised when a prm-ingest YAML config is empty or references unknown tables."""


# ---------------------------------------------------------------------------
# File-level failures (terminal, never wrapped)
# ---------------------------------------------------------------------------

class OpenFailure(PrmError):
    """Raised when a PRM file cannot be read (missing, permission, I/O fault)."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"can't open a file to read: `{self.path}` ({reason})")


class SignatureMismatch(PrmError):
    """Raised when the first content line is not the PRM signature."""

    def __init__(self, path: str | Path, found: str | None) -> None:
        self.path = Path(path)
        self.found = found
        if found is None:
            detail = "file has no content lines"
        else:
            detail = f"first line is `{found}`"
        super().__init__(f"wrong signature in `{self.path}`: {detail}")


# ---------------------------------------------------------------------------
# Content failures
# ---------------------------------------------------------------------------

class PrmParseError(PrmError):
    """Base class for every error raised while parsing cleaned lines."""


class FieldError(PrmParseError):
    """A single token was absent or failed to convert to its expected type.

    Attributes:
        field: Name of the property being read (e.g. ``"pos_x"``).
        token: The offending token, or ``None`` when it was absent.
    """

    def __init__(self, field: str, token: str | None = None, reason: str | None = None) -> None:
        self.field = field
        self.token = token
        if reason is None:
            reason = "missing value" if token is None else f"malformed value `{token}`"
        self.reason = reason
        super().__init__(f"`{field}` property: {reason}")


class ShapeError(PrmParseError):
    """A line had too many or too few tokens for its context."""


class StructuralError(PrmParseError):
    """A stateful pattern's invariant was violated.

    Examples: item line before any title, fewer units than declared,
    unterminated sentinel list, zero declared count.
    """


class UnimplementedRecord(PrmParseError):
    """A record kind documented by the format but without a known layout."""

    def __init__(self, record: str) -> None:
        self.record = record
        super().__init__(
            f"`{record}` records are not supported: the token layout is undocumented"
        )


# ---------------------------------------------------------------------------
# Context wrappers
# ---------------------------------------------------------------------------

class RecordError(PrmParseError):
    """Wraps a leaf error raised while parsing one line into a record."""

    def __init__(self, record: str, position: int, line: str) -> None:
        self.record = record
        self.position = position
        self.line = line
        super().__init__(f"{record} record at content line {position + 1}: `{line}`")


class BlockError(PrmParseError):
    """Wraps an error raised while assembling one multi-line block."""

    def __init__(self, block: str, index: int) -> None:
        self.block = block
        self.index = index
        super().__init__(f"{block} block #{index + 1}")


class TableError(PrmParseError):
    """Wraps any content error raised while assembling a whole table."""

    def __init__(self, table: str, path: str | Path | None = None) -> None:
        self.table = table
        self.path = Path(path) if path is not None else None
        where = f" from `{self.path}`" if self.path is not None else ""
        super().__init__(f"{table} table{where}")


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------

def error_chain(exc: BaseException) -> list[BaseException]:
    """Return ``exc`` followed by each ``__cause__`` down to the leaf.

    The walk stops at the first cause outside the ``PrmError`` hierarchy
    (the ``ValueError`` of a converter, the ``OSError`` of an open): those
    stay reachable on the leaf's ``__cause__`` but their text is already
    part of the leaf's message.
    """
    chain: list[BaseException] = [exc]
    current = exc.__cause__
    while isinstance(current, PrmError) and current not in chain:
        chain.append(current)
        current = current.__cause__
    return chain


def root_cause(exc: BaseException) -> BaseException:
    """Return the innermost error of a wrapped chain."""
    return error_chain(exc)[-1]


def describe_error(exc: BaseException) -> str:
    """Render the diagnostic path from table down to the offending token.

    Example::

        bunches table from `data/bunches.prm` -> bunch block #2
        -> cult stage record at content line 7: `Stage 10 x 2 a.pal`
        -> `time` property: malformed value `x`
    """
    return " -> ".join(str(e) for e in error_chain(exc))

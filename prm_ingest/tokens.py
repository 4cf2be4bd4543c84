"""
Token reading combinator shared by every record parser.

Each PRM record is one line of whitespace-separated tokens read left to
right. ``TokenReader.take()`` replaces the "read next token or fail with
a named error" boilerplate: the caller names the field, the converter,
and optionally the messages used when the token is absent or malformed.

Converters are plain callables raising ``ValueError`` on bad input;
``unsigned``, ``signed`` and ``u8`` mirror the integer widths used by the
format.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TypeVar

from prm_ingest.exceptions import FieldError, ShapeError

T = TypeVar("T")

_INT_PATTERN = re.compile(r"[+-]?\d+$")


def signed(token: str) -> int:
    """Parse a decimal integer (optional sign, digits only)."""
    if not _INT_PATTERN.match(token):
        raise ValueError(f"not an integer: {token!r}")
    return int(token)


def unsigned(token: str) -> int:
    """Parse a non-negative decimal integer."""
    value = signed(token)
    if value < 0:
        raise ValueError(f"negative value: {token!r}")
    return value


def u8(token: str) -> int:
    """Parse an integer in ``0..255``."""
    value = unsigned(token)
    if value > 255:
        raise ValueError(f"out of range 0..255: {token!r}")
    return value


def unquote(token: str) -> str:
    """Strip surrounding double quotes (``"Name"`` -> ``Name``)."""
    return token.strip('"')


def split_tokens(line: str) -> list[str]:
    return line.split()


class TokenReader:
    """Sequential reader over the tokens of one record line."""

    def __init__(self, line: str) -> None:
        self.line = line
        self.tokens = split_tokens(line)
        self._pos = 0

    def __len__(self) -> int:
        return len(self.tokens)

    @property
    def remaining(self) -> int:
        return len(self.tokens) - self._pos

    def take(
        self,
        field: str,
        convert: Callable[[str], T] = str,  # type: ignore[assignment]
        *,
        missing: str | None = None,
        malformed: str | None = None,
    ) -> T:
        """Read the next token and convert it.

        Args:
            field: Field name reported in the ``FieldError``.
            convert: Callable turning the token into a value; any
                ``ValueError`` it raises marks the token as malformed.
            missing: Message used when there is no token left.
            malformed: Message used when *convert* rejects the token.

        Raises:
            FieldError: If the token is absent or malformed.
        """
        if self._pos >= len(self.tokens):
            raise FieldError(field, None, missing)
        token = self.tokens[self._pos]
        self._pos += 1
        try:
            return convert(token)
        except ValueError as exc:
            reason = malformed or f"malformed value `{token}` ({exc})"
            raise FieldError(field, token, reason) from exc

    def take_optional(self, field: str) -> str | None:
        """Read an optional trailing token, or ``None`` when none is left."""
        if self._pos >= len(self.tokens):
            return None
        return self.take(field)

    def finish(self, context: str = "line") -> None:
        """Fail with ``ShapeError`` if unread tokens remain."""
        if self._pos < len(self.tokens):
            extra = " ".join(self.tokens[self._pos:])
            raise ShapeError(f"unexpected additional parameter at {context}: `{extra}`")

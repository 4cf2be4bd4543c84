"""
Comment stripper for PRM files.

PRM files carry C-style comments:

- ``/* ... */`` block comments, possibly spanning several lines and
  possibly several per line;
- ``// ...`` line comments.

``strip_line()`` processes one raw line against the current
``CommentState`` and returns the cleaned content (or ``None``) plus the
updated state. ``strip_comments()`` threads the state through a whole
file. The state is an explicit value so that independent files can be
stripped concurrently.

Rules, applied to the not-yet-classified tail of the line until it is
exhausted:

1. Inside a block comment, only ``*/`` is looked for. If found, scanning
   resumes after it; otherwise the rest of the line is discarded.
2. Outside, a ``/*`` with a later ``*/`` in the same tail drops the
   interior and scanning resumes after the ``*/``. A ``/*`` without a
   closing marker keeps only the prefix and enters block state.
3. Outside, with no ``/*`` left, everything from ``//`` on is dropped.

A ``//`` inside a kept fragment discards the content after it, but block
markers later on the line still drive the state, so ``a // x /* y``
yields ``a`` and leaves the stripper inside a block comment.

Kept fragments are trimmed and joined with a single space; a removed
block comment therefore separates tokens. Empty results are dropped.
The stripper never fails and is idempotent on clean input.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

BLOCK_OPEN = "/*"
BLOCK_CLOSE = "*/"
LINE_COMMENT = "//"


@dataclass(frozen=True)
class CommentState:
    """Carried between raw lines: are we inside a ``/* ... */`` block?"""
    in_block: bool = False


OUTSIDE = CommentState(in_block=False)
INSIDE = CommentState(in_block=True)


def strip_line(line: str, state: CommentState = OUTSIDE) -> tuple[str | None, CommentState]:
    """Strip comments from one raw line.

    Args:
        line: One raw line (a trailing newline is allowed).
        state: Comment state left by the previous line.

    Returns:
        ``(cleaned, new_state)`` where *cleaned* is the trimmed, non-empty
        content or ``None`` when nothing is left.
    """
    fragments: list[str] = []
    in_block = state.in_block
    # Set once a ``//`` is met: later content is dropped, markers still count.
    line_cut = False
    tail = line

    def keep(fragment: str) -> None:
        nonlocal line_cut
        if line_cut:
            return
        cut = fragment.find(LINE_COMMENT)
        if cut >= 0:
            fragment = fragment[:cut]
            line_cut = True
        fragment = fragment.strip()
        if fragment:
            fragments.append(fragment)

    while tail:
        if in_block:
            end = tail.find(BLOCK_CLOSE)
            if end < 0:
                break
            tail = tail[end + len(BLOCK_CLOSE):]
            in_block = False
            continue

        start = tail.find(BLOCK_OPEN)
        if start < 0:
            keep(tail)
            break

        keep(tail[:start])
        end = tail.find(BLOCK_CLOSE, start + len(BLOCK_OPEN))
        if end < 0:
            in_block = True
            break
        tail = tail[end + len(BLOCK_CLOSE):]

    cleaned = " ".join(fragments)
    new_state = INSIDE if in_block else OUTSIDE
    return (cleaned or None), new_state


def strip_comments(lines: Iterable[str]) -> list[str]:
    """Turn raw lines into the cleaned line sequence.

    The comment state starts outside a block for every call. An
    unterminated block comment simply swallows the rest of the input.

    Returns:
        Trimmed, non-empty content lines in source order.
    """
    state = OUTSIDE
    cleaned: list[str] = []
    for raw in lines:
        content, state = strip_line(raw, state)
        if content is not None:
            cleaned.append(content)
    if state.in_block:
        logger.debug("Input ended inside a block comment")
    return cleaned

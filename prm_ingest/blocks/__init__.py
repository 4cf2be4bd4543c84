"""
Block parsers sub-package for prm-ingest.

Block parsers are the stateful part of the engine: each one consumes a
variable-length run of cleaned lines from a shared ``LineCursor`` and
assembles one entity (or a mapping of groups).

Patterns:
- fixed_count.py: a title line declares how many fixed-shape units follow
  (cycles of a bunch).
- sentinel.py: a header line followed by two-token items up to a ``none``
  terminator line (goods of a spot).
- grouped.py: one-token title lines open groups that own every following
  multi-token line (prices / tasks per escave).

Every pattern receives plain record parsers (``str -> record``) and wraps
their errors in ``RecordError`` with the cursor position, so a failure
can be traced down to the exact line and token.
"""

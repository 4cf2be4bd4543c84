"""
Record parsers sub-package for prm-ingest.

Each module defines the immutable record type(s) of one PRM file and a
``parse_*`` function turning one cleaned line into one record. Record
parsers are stateless: one line in, one record out, or a leaf error
(``FieldError`` for a bad token, ``ShapeError`` for a bad token count,
``UnimplementedRecord`` for a layout nobody has documented).

Token handling goes through ``prm_ingest.tokens.TokenReader``.
"""

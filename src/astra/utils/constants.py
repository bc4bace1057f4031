from __future__ import annotations

"""Layout constants for the NORAD three-line element format.

Column positions live in the field table (:mod:`astra.core.fields`); the
values here describe the record as a whole.
"""

# --- Record layout ---
LINES_PER_RECORD: int = 3
"""Name line, element line 1 and element line 2."""

NAME_LINE: int = 0
"""Index of the name line within a record."""

ELEMENT_LINE_1: int = 1
"""Index of the first element line within a record."""

ELEMENT_LINE_2: int = 2
"""Index of the second element line within a record."""

# --- Numeric encodings ---
EPOCH_CENTURY: int = 2000
"""Century added to the two-digit epoch year."""

LAUNCH_CENTURY_PAST: int = 1900
"""Century for launch years greater than the current two-digit year."""

LAUNCH_CENTURY_CURRENT: int = 2000
"""Century for launch years up to the current two-digit year."""

LAUNCH_PIECE_BASE: str = "@"
"""Character preceding ``A``; letter values are offsets from it."""

LAUNCH_PIECE_MAX_LETTERS: int = 3
"""Longest launch piece designator accepted."""

# --- Rendering ---
EPOCH_DATE_FORMAT: str = "%Y-%m-%d"
"""Format used when an epoch is rendered for display."""

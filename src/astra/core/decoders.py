"""Decoders for the numeric micro-formats used inside TLE columns.

Each decoder takes the raw text of one column range and returns the field
value, raising :class:`~astra.core.errors.FieldFormatError` (or
:class:`~astra.core.errors.InvalidEpochError` for the epoch day) when the
text does not follow its encoding.
"""

from __future__ import annotations

import re
from datetime import datetime

from astra.core.errors import FieldFormatError, InvalidEpochError
from astra.utils.constants import (
    EPOCH_CENTURY,
    LAUNCH_CENTURY_CURRENT,
    LAUNCH_CENTURY_PAST,
    LAUNCH_PIECE_BASE,
    LAUNCH_PIECE_MAX_LETTERS,
)

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_DIGITS_RE = re.compile(r"\d+")
_TWO_DIGITS_RE = re.compile(r"\d{1,2}")
_DAY_OF_YEAR_RE = re.compile(r"\d{1,3}")


def decode_int(text: str) -> int:
    """Parse a plain (optionally signed) integer."""
    text = text.strip()
    if not _INT_RE.fullmatch(text):
        raise FieldFormatError(f"Not an integer: {text!r}")
    return int(text)


def decode_float(text: str) -> float:
    """Parse a plain decimal number.

    Surrounding whitespace is ignored, so fields read without trimming
    still decode.
    """
    text = text.strip()
    if not _FLOAT_RE.fullmatch(text):
        raise FieldFormatError(f"Not a decimal: {text!r}")
    return float(text)


def decode_launch_year(text: str, current_year: int | None = None) -> int:
    """Expand a two-digit launch year to a calendar year.

    Years greater than the current two-digit year belong to the 1900s,
    the rest to the 2000s.

    Args:
        text: One or two digits.
        current_year: Year to compare against. Defaults to the year at the
            time of the call, so the same input may decode differently in
            another year.

    Returns:
        The four-digit launch year.
    """
    if not _TWO_DIGITS_RE.fullmatch(text):
        raise FieldFormatError(f"Not a two-digit year: {text!r}")
    if current_year is None:
        current_year = datetime.now().year
    yy = int(text)
    if yy > current_year % 100:
        return LAUNCH_CENTURY_PAST + yy
    return LAUNCH_CENTURY_CURRENT + yy


def decode_epoch_year(text: str) -> int:
    """Expand a two-digit epoch year; epochs always fall in the 2000s."""
    if not _TWO_DIGITS_RE.fullmatch(text):
        raise FieldFormatError(f"Not a two-digit year: {text!r}")
    return EPOCH_CENTURY + int(text)


def decode_epoch_day(text: str) -> int:
    """Return the whole day-of-year from a ``DDD.FFFFFFFF`` epoch day.

    The whole part has at most three digits. The fractional part of the
    day is discarded.
    """
    if "." not in text:
        raise InvalidEpochError(f"Epoch day has no fractional part: {text!r}")
    whole = text.split(".", 1)[0]
    if not _DAY_OF_YEAR_RE.fullmatch(whole):
        raise FieldFormatError(f"Not a day of year: {text!r}")
    return int(whole)


def decode_hyphenated(text: str) -> float:
    """Decode a field whose decimal point is written as ``-``.

    A leading ``-`` is a real minus sign; the decimal point is then the
    next ``-``. Without a leading sign every ``-`` becomes ``.``. The
    trailing exponent digit is not applied: ``"49495-4"`` decodes to
    ``49495.4``.
    """
    if not text:
        raise FieldFormatError("Empty hyphenated decimal")
    if text[0] == "-":
        formatted = "-" + text[1:].replace("-", ".", 1)
    else:
        formatted = text.replace("-", ".")
    if not _FLOAT_RE.fullmatch(formatted):
        raise FieldFormatError(f"Not a hyphenated decimal: {text!r}")
    return float(formatted)


def decode_eccentricity(text: str) -> float:
    """Decode eccentricity digits with their implied leading ``0.``."""
    if not _DIGITS_RE.fullmatch(text):
        raise FieldFormatError(f"Not an eccentricity: {text!r}")
    return float("0." + text)


def decode_launch_piece(text: str) -> int:
    """Encode a launch piece designator as the sum of its letter values.

    ``A`` is 1, ``B`` is 2 and so on; ``"AB"`` is 3. Characters outside
    ``A``-``Z`` are summed the same way and may produce a non-positive
    value, which is left to the caller to reject.
    """
    if not text:
        raise FieldFormatError("Empty launch piece")
    if len(text) > LAUNCH_PIECE_MAX_LETTERS:
        raise FieldFormatError(f"Launch piece too long: {text!r}")
    base = ord(LAUNCH_PIECE_BASE)
    return sum(ord(ch) - base for ch in text)

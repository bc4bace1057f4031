"""Column layout of a three-line TLE record.

The field table lists, for every field, the line it lives on, its
``[start, end)`` column range, the decoder that turns the column text into
a value and the validator applied to that value. Records are decoded by
walking the table in order, so the first failing field is always the
leftmost failing field of the earliest failing line.

Reference for the layout: https://celestrak.org/NORAD/documentation/tle-fmt.php
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from astra.core import decoders
from astra.core import record as rec
from astra.core.errors import TruncatedLineError
from astra.utils.constants import ELEMENT_LINE_1, ELEMENT_LINE_2, NAME_LINE


@dataclass(frozen=True)
class FieldSpec:
    """One entry of the field table.

    Attributes:
        attr: Name the decoded value is stored under.
        label: Human-readable field name used in error messages.
        line: Index of the line within the record.
        start: First column, 0-indexed, inclusive.
        end: Last column, 0-indexed, exclusive.
        decoder: Converts the column text into a value.
        validator: Raises if the decoded value is unacceptable.
        trim: Strip surrounding whitespace before decoding.
        column: Column reported in error offsets. Defaults to
            ``start + 1``.
        dated: The decoder depends on the current year.
    """

    attr: str
    label: str
    line: int
    start: int
    end: int
    decoder: Callable[..., Any]
    validator: Callable[[Any], None] | None = None
    trim: bool = True
    column: int | None = None
    dated: bool = False

    @property
    def message(self) -> str:
        return f"Invalid {self.label}"

    @property
    def report_column(self) -> int:
        return self.start + 1 if self.column is None else self.column

    def extract(self, line: str) -> str:
        """Slice this field's columns out of ``line``."""
        if len(line) < self.end:
            raise TruncatedLineError(
                f"Line too short for {self.label}: "
                f"needs {self.end} columns, has {len(line)}"
            )
        raw = line[self.start:self.end]
        return raw.strip() if self.trim else raw

    def decode(self, line: str, current_year: int | None = None) -> Any:
        """Extract, decode and validate this field from ``line``.

        Errors are raised with offset 0; :func:`field_offset` locates them
        within the record.
        """
        raw = self.extract(line)
        if self.dated:
            value = self.decoder(raw, current_year)
        else:
            value = self.decoder(raw)
        if self.validator is not None:
            self.validator(value)
        return value


FIELD_MAP: tuple[FieldSpec, ...] = (
    # Name line
    FieldSpec("name", "satellite name", NAME_LINE, 0, 23, str, rec.check_name, column=0),
    # Element line 1
    FieldSpec("catalog_number", "satellite number", ELEMENT_LINE_1, 2, 7,
              decoders.decode_int, rec.check_catalog_number),
    FieldSpec("classification", "classification", ELEMENT_LINE_1, 7, 8,
              str, rec.check_classification),
    FieldSpec("launch_year", "launch year", ELEMENT_LINE_1, 9, 11,
              decoders.decode_launch_year, dated=True),
    FieldSpec("launch_number", "launch number", ELEMENT_LINE_1, 11, 14,
              decoders.decode_int, rec.check_launch_number, column=13),
    FieldSpec("launch_piece", "launch piece", ELEMENT_LINE_1, 14, 16,
              decoders.decode_launch_piece, rec.check_launch_piece),
    FieldSpec("epoch_year", "epoch", ELEMENT_LINE_1, 17, 20,
              decoders.decode_epoch_year, column=22),
    FieldSpec("epoch_day", "epoch", ELEMENT_LINE_1, 20, 31,
              decoders.decode_epoch_day, column=22),
    FieldSpec("mean_motion_dot2", "first time derivative of mean motion", ELEMENT_LINE_1, 33, 43,
              decoders.decode_float),
    FieldSpec("mean_motion_dot6", "second time derivative of mean motion", ELEMENT_LINE_1, 45, 51,
              decoders.decode_hyphenated, column=45),
    FieldSpec("drag_term", "BSTAR drag term", ELEMENT_LINE_1, 53, 61,
              decoders.decode_hyphenated),
    FieldSpec("ephemeris_type", "ephemeris type", ELEMENT_LINE_1, 62, 63,
              decoders.decode_int),
    # Element line 2
    FieldSpec("inclination", "inclination", ELEMENT_LINE_2, 8, 17,
              decoders.decode_float),
    FieldSpec("right_ascension", "right ascension of the ascending node", ELEMENT_LINE_2, 17, 25,
              decoders.decode_float, trim=False),
    FieldSpec("eccentricity", "eccentricity", ELEMENT_LINE_2, 26, 33,
              decoders.decode_eccentricity, rec.check_eccentricity, trim=False),
    FieldSpec("perigee_argument", "argument of perigee", ELEMENT_LINE_2, 34, 43,
              decoders.decode_float),
    FieldSpec("mean_anomaly", "mean anomaly", ELEMENT_LINE_2, 43, 51,
              decoders.decode_float),
    FieldSpec("mean_motion", "mean motion", ELEMENT_LINE_2, 52, 62,
              decoders.decode_float),
    FieldSpec("revolutions_at_epoch", "number of revolutions at epoch", ELEMENT_LINE_2, 64, 69,
              decoders.decode_int, rec.check_revolutions, column=64),
)


def field_offset(lines: Sequence[str], spec: FieldSpec) -> int:
    """Character offset of ``spec`` from the start of its record.

    The lengths of all lines before the field's line, plus the field's
    reported column.
    """
    return sum(len(line) for line in lines[:spec.line]) + spec.report_column

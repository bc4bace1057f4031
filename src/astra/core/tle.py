"""TLE catalog decoding.

This module turns raw three-line element text into validated
:class:`~astra.core.record.OrbitalRecord` objects. Decoding is strict and
fail-fast: the first invalid field anywhere in a catalog aborts the whole
decode, and no records are returned.
"""

from __future__ import annotations

import logging
from typing import Sequence

from astra.core.errors import (
    EmptyInputError,
    FieldFormatError,
    InvalidEpochError,
    TLEError,
)
from astra.core.fields import FIELD_MAP, FieldSpec, field_offset
from astra.core.record import Epoch, OrbitalRecord
from astra.utils.constants import LINES_PER_RECORD

logger = logging.getLogger(__name__)


def segment_lines(lines: Sequence[str]) -> list[Sequence[str]]:
    """Split ``lines`` into consecutive three-line blocks.

    One or two trailing lines that do not fill a block are ignored.

    Raises:
        EmptyInputError: If ``lines`` is empty.
    """
    if len(lines) == 0:
        logger.error("Cannot decode an empty catalog")
        raise EmptyInputError("Empty file", 0)

    leftover = len(lines) % LINES_PER_RECORD
    if leftover:
        logger.debug("Ignoring %d trailing line(s)", leftover)

    return [
        lines[start:start + LINES_PER_RECORD]
        for start in range(0, len(lines) - leftover, LINES_PER_RECORD)
    ]


def _decode_field(spec: FieldSpec, lines: Sequence[str], current_year: int | None) -> object:
    try:
        return spec.decode(lines[spec.line], current_year)
    except (FieldFormatError, InvalidEpochError) as e:
        raise type(e)(spec.message, field_offset(lines, spec)) from e
    except TLEError as e:
        raise e.with_offset(field_offset(lines, spec)) from e


def decode_record(lines: Sequence[str], *, current_year: int | None = None) -> OrbitalRecord:
    """Decode one three-line TLE record.

    Fields are decoded and validated one at a time, in column order.

    Args:
        lines: Name line, element line 1 and element line 2.
        current_year: Year used to expand the two-digit launch year.
            Defaults to the current year.

    Returns:
        The decoded record.

    Raises:
        TLEError: On the first invalid field, with ``offset`` counted from
            the first character of the name line.
        ValueError: If ``lines`` does not hold exactly three lines.
    """
    if len(lines) != LINES_PER_RECORD:
        raise ValueError(f"A TLE record has {LINES_PER_RECORD} lines, got {len(lines)}")

    values = {spec.attr: _decode_field(spec, lines, current_year) for spec in FIELD_MAP}
    values["epoch"] = Epoch(values.pop("epoch_year"), values.pop("epoch_day"))

    record = OrbitalRecord(**values)
    logger.debug("Decoded TLE for catalog number %d (%s)", record.catalog_number, record.name)
    return record


def decode_catalog(lines: Sequence[str], *, current_year: int | None = None) -> list[OrbitalRecord]:
    """Decode every record in a sequence of TLE lines.

    Args:
        lines: Raw lines, three per record. One or two trailing lines are
            ignored.
        current_year: Year used to expand two-digit launch years.
            Defaults to the current year.

    Returns:
        The decoded records, in input order.

    Raises:
        EmptyInputError: If ``lines`` is empty.
        TLEError: For the first invalid record. The offset is relative to
            the start of that record, not to the start of the input.
    """
    records: list[OrbitalRecord] = []
    for index, block in enumerate(segment_lines(lines)):
        try:
            records.append(decode_record(block, current_year=current_year))
        except TLEError as e:
            logger.error(
                "Rejected record %d (line %d): %s at offset %d",
                index, index * LINES_PER_RECORD + 1, e.message, e.offset,
            )
            raise

    logger.debug("Decoded %d TLE records", len(records))
    return records


def parse_tle(text: str, *, current_year: int | None = None) -> list[OrbitalRecord]:
    """Decode a catalog held in a single string.

    Args:
        text: Three-line TLE text.
        current_year: Year used to expand two-digit launch years.

    Returns:
        The decoded records, in input order.
    """
    return decode_catalog(text.splitlines(), current_year=current_year)

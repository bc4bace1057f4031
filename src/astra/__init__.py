"""
Astra — strict decoding of NORAD three-line element catalogs.

Turns fixed-column TLE text into validated, immutable orbital element
records, and reports the exact character offset of the first invalid
field when a catalog cannot be decoded.
"""

from __future__ import annotations

__version__ = "0.2.0"

from astra.core.errors import (
    ErrorKind,
    TLEError,
    EmptyInputError,
    TruncatedLineError,
    FieldFormatError,
    InvalidEpochError,
    InvariantViolationError,
)
from astra.core.record import Epoch, OrbitalRecord, describe
from astra.core.tle import decode_catalog, decode_record, parse_tle, segment_lines
from astra.core.catalog import Catalog
from astra.data.source import CatalogSourceError, read_lines
from astra.data.arrays import ELEMENT_COLUMNS, catalog_numbers, elements_array

__all__ = [
    "__version__",
    "ErrorKind",
    "TLEError",
    "EmptyInputError",
    "TruncatedLineError",
    "FieldFormatError",
    "InvalidEpochError",
    "InvariantViolationError",
    "Epoch",
    "OrbitalRecord",
    "describe",
    "decode_catalog",
    "decode_record",
    "parse_tle",
    "segment_lines",
    "Catalog",
    "CatalogSourceError",
    "read_lines",
    "ELEMENT_COLUMNS",
    "elements_array",
    "catalog_numbers",
]

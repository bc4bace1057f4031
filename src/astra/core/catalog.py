"""An ordered, decoded TLE catalog."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterator, Sequence

from astra.core.record import OrbitalRecord, describe
from astra.core.tle import decode_catalog
from astra.data.source import read_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Catalog:
    """Records decoded from one TLE source, in input order.

    Attributes:
        records: The decoded records.
    """

    records: tuple[OrbitalRecord, ...]

    @classmethod
    def from_lines(cls, lines: Sequence[str], *, current_year: int | None = None) -> Catalog:
        """Decode a catalog from raw lines.

        Raises:
            TLEError: If any record is invalid; nothing is kept.
        """
        return cls(tuple(decode_catalog(lines, current_year=current_year)))

    @classmethod
    def from_file(cls, path: str | os.PathLike[str], *, current_year: int | None = None) -> Catalog:
        """Read and decode a catalog file.

        Raises:
            CatalogSourceError: If the file is missing or unreadable.
            TLEError: If any record is invalid.
        """
        catalog = cls.from_lines(read_lines(path), current_year=current_year)
        logger.debug("Loaded %d records from %s", len(catalog), path)
        return catalog

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[OrbitalRecord]:
        return iter(self.records)

    def __getitem__(self, index: int) -> OrbitalRecord:
        return self.records[index]

    def find(self, catalog_number: int) -> OrbitalRecord | None:
        """Return the first record with ``catalog_number``, if any."""
        for record in self.records:
            if record.catalog_number == catalog_number:
                return record
        return None

    def describe(self, record: OrbitalRecord) -> dict[str, str]:
        """Label-to-value description of a record held by this catalog.

        Raises:
            KeyError: If ``record`` is not in the catalog.
        """
        if record not in self.records:
            raise KeyError("No such satellite exists")
        return describe(record)

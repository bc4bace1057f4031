"""Columnar export of decoded records for numerical analysis."""
from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from astra.core.record import OrbitalRecord

ELEMENT_COLUMNS: tuple[str, ...] = (
    "inclination",
    "right_ascension",
    "eccentricity",
    "perigee_argument",
    "mean_anomaly",
    "mean_motion",
    "mean_motion_dot2",
    "mean_motion_dot6",
    "drag_term",
    "revolutions_at_epoch",
)
"""Record attributes exported by :func:`elements_array`, in column order."""


def elements_array(records: list[OrbitalRecord]) -> NDArray[np.float64]:
    """Stack the numeric elements of many records into one array.

    Args:
        records: Decoded records, e.g. from :func:`~astra.core.tle.decode_catalog`.

    Returns:
        Array of shape (n, len(ELEMENT_COLUMNS)); row ``i`` holds the
        elements of ``records[i]`` in :data:`ELEMENT_COLUMNS` order.
    """
    if not records:
        return np.empty((0, len(ELEMENT_COLUMNS)), dtype=np.float64)

    return np.array(
        [[getattr(r, col) for col in ELEMENT_COLUMNS] for r in records],
        dtype=np.float64,
    )


def catalog_numbers(records: list[OrbitalRecord]) -> NDArray[np.int64]:
    """Catalog numbers of ``records`` as an integer array, aligned with :func:`elements_array`."""
    return np.array([r.catalog_number for r in records], dtype=np.int64)

"""Decoded satellite records and the invariants they enforce."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date, timedelta
from typing import NamedTuple

from astra.core.errors import InvariantViolationError
from astra.utils.constants import EPOCH_DATE_FORMAT


class Epoch(NamedTuple):
    """Reference time of an element set, to whole-day resolution."""

    year: int
    day: int

    def as_date(self) -> date:
        """Return the calendar date of this epoch.

        Days outside 1..366 roll over into neighbouring years.
        """
        return date(self.year, 1, 1) + timedelta(days=self.day - 1)

    def __str__(self) -> str:
        return self.as_date().strftime(EPOCH_DATE_FORMAT)


# --- Validators ---
# Each takes a decoded value and raises InvariantViolationError if it is
# not acceptable for the record.


def check_name(value: str) -> None:
    if value is None:
        raise InvariantViolationError("Missing satellite name")


def check_catalog_number(value: int) -> None:
    if value < 0:
        raise InvariantViolationError("Negative satellite number")


def check_classification(value: str) -> None:
    if value is None:
        raise InvariantViolationError("Missing classification")
    if len(value) > 1:
        raise InvariantViolationError("Classification longer than one character")


def check_launch_number(value: int) -> None:
    if value < 1:
        raise InvariantViolationError("Non-positive launch number")


def check_launch_piece(value: int) -> None:
    if value < 1:
        raise InvariantViolationError("Non-positive launch piece")


def check_eccentricity(value: float) -> None:
    if not 0.0 <= value < 1.0:
        raise InvariantViolationError("Eccentricity out of range")


def check_revolutions(value: int) -> None:
    if value < 0:
        raise InvariantViolationError("Negative revolutions at epoch")


@dataclass(frozen=True)
class OrbitalRecord:
    """A validated satellite element set decoded from one TLE record.

    Instances are immutable and validated on construction, including copies
    made with :func:`dataclasses.replace`.

    Attributes:
        name: Satellite name from the name line, trimmed.
        catalog_number: NORAD catalog number.
        classification: Security classification letter (``U``, ``C``, ``S``).
        launch_year: Four-digit year of launch.
        launch_number: Launch number within the launch year.
        launch_piece: Letter-sum encoding of the launch piece.
        epoch: Epoch year and whole day-of-year.
        mean_motion_dot2: First time derivative of mean motion over 2.
        mean_motion_dot6: Second time derivative of mean motion over 6.
        drag_term: BSTAR drag term.
        ephemeris_type: Ephemeris type, carried through unvalidated.
        inclination: Inclination in degrees.
        right_ascension: Right ascension of the ascending node in degrees.
        eccentricity: Eccentricity in [0, 1).
        perigee_argument: Argument of perigee in degrees.
        mean_anomaly: Mean anomaly in degrees.
        mean_motion: Mean motion in revolutions per day.
        revolutions_at_epoch: Revolution count at epoch.
    """

    name: str
    catalog_number: int
    classification: str
    launch_year: int
    launch_number: int
    launch_piece: int
    epoch: Epoch
    mean_motion_dot2: float
    mean_motion_dot6: float
    drag_term: float
    ephemeris_type: int
    inclination: float
    right_ascension: float
    eccentricity: float
    perigee_argument: float
    mean_anomaly: float
    mean_motion: float
    revolutions_at_epoch: int

    def __post_init__(self) -> None:
        for attr, check in _VALIDATORS.items():
            check(getattr(self, attr))

    def describe(self) -> dict[str, str]:
        """Shorthand for :func:`describe`."""
        return describe(self)


_VALIDATORS = {
    "name": check_name,
    "catalog_number": check_catalog_number,
    "classification": check_classification,
    "launch_number": check_launch_number,
    "launch_piece": check_launch_piece,
    "eccentricity": check_eccentricity,
    "revolutions_at_epoch": check_revolutions,
}


def field_label(attr: str) -> str:
    """Turn an attribute name into its display label.

    ``mean_motion_dot2`` becomes ``MeanMotionDot2``.
    """
    return "".join(part[:1].upper() + part[1:] for part in attr.split("_"))


def describe(record: OrbitalRecord) -> dict[str, str]:
    """Project a record onto an ordered mapping of label to display value.

    Keys follow the attribute order of :class:`OrbitalRecord`; the epoch is
    rendered as an ISO calendar date.
    """
    return {field_label(f.name): str(getattr(record, f.name)) for f in fields(record)}

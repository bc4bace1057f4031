"""Tests for TLE record and catalog decoding."""

from __future__ import annotations

import pytest

from astra.core.errors import (
    EmptyInputError,
    ErrorKind,
    FieldFormatError,
    InvalidEpochError,
    InvariantViolationError,
    TLEError,
    TruncatedLineError,
)
from astra.core.record import Epoch, OrbitalRecord
from astra.core.tle import decode_catalog, decode_record, parse_tle, segment_lines


def _splice(line: str, start: int, text: str) -> str:
    """Overwrite ``line`` with ``text`` from column ``start``."""
    return line[:start] + text + line[start + len(text):]


class TestDecodeRecord:
    def test_iss(self, iss_lines, current_year) -> None:
        sat = decode_record(iss_lines, current_year=current_year)
        assert sat == OrbitalRecord(
            name="ISS (ZARYA)",
            catalog_number=25544,
            classification="U",
            launch_year=1998,
            launch_number=67,
            launch_piece=1,
            epoch=Epoch(2017, 126),
            mean_motion_dot2=0.0000278,
            mean_motion_dot6=0.0,
            drag_term=49495.4,
            ephemeris_type=0,
            inclination=51.6401,
            right_ascension=245.6477,
            eccentricity=0.0005666,
            perigee_argument=129.9909,
            mean_anomaly=47.4633,
            mean_motion=15.5397699,
            revolutions_at_epoch=52869,
        )

    def test_this_century_launch(self, tiangong_lines, current_year) -> None:
        sat = decode_record(tiangong_lines, current_year=current_year)
        assert sat.launch_year == 2011
        assert sat.launch_number == 53
        assert sat.right_ascension == pytest.approx(83.7323)
        assert sat.drag_term == pytest.approx(10346.3)
        assert sat.revolutions_at_epoch == 21677

    def test_negative_first_derivative(self, molniya_lines, current_year) -> None:
        sat = decode_record(molniya_lines, current_year=current_year)
        assert sat.catalog_number == 7376
        assert sat.launch_year == 1974
        assert sat.mean_motion_dot2 == pytest.approx(-0.00001767)
        assert sat.eccentricity == pytest.approx(0.7362834)
        assert sat.mean_motion == pytest.approx(2.011226)

    def test_epoch_keeps_whole_day(self, iss_lines, current_year) -> None:
        sat = decode_record(iss_lines, current_year=current_year)
        assert sat.epoch == Epoch(year=2017, day=126)
        assert sat.epoch.year == 2017
        assert sat.epoch.day == 126

    def test_short_name_line(self, iss_lines, current_year) -> None:
        lines = ["ISS (ZARYA)", iss_lines[1], iss_lines[2]]
        with pytest.raises(TruncatedLineError) as excinfo:
            decode_record(lines, current_year=current_year)
        assert "satellite name" in excinfo.value.message
        assert excinfo.value.offset == 0

    def test_blank_name(self, iss_lines, current_year) -> None:
        lines = [" " * 24, iss_lines[1], iss_lines[2]]
        assert decode_record(lines, current_year=current_year).name == ""

    def test_multi_letter_launch_piece(self, iss_lines, current_year) -> None:
        lines = [iss_lines[0], _splice(iss_lines[1], 14, "HY"), iss_lines[2]]
        assert decode_record(lines, current_year=current_year).launch_piece == 33

    def test_wrong_line_count(self, iss_lines) -> None:
        with pytest.raises(ValueError, match="3 lines"):
            decode_record(iss_lines[:2])

    def test_deterministic(self, iss_lines, current_year) -> None:
        first = decode_record(iss_lines, current_year=current_year)
        second = decode_record(list(iss_lines), current_year=current_year)
        assert first == second
        assert first is not second


class TestDecodeRecordErrors:
    """Errors carry the failing field's offset from the start of the record."""

    def test_negative_catalog_number(self, iss_lines) -> None:
        lines = [iss_lines[0], _splice(iss_lines[1], 2, "-0544"), iss_lines[2]]
        with pytest.raises(InvariantViolationError) as excinfo:
            decode_record(lines)
        assert excinfo.value.message == "Negative satellite number"
        assert excinfo.value.offset == 27
        assert excinfo.value.kind is ErrorKind.INVARIANT_VIOLATION

    def test_zero_launch_number(self, iss_lines) -> None:
        lines = [iss_lines[0], _splice(iss_lines[1], 11, "000"), iss_lines[2]]
        with pytest.raises(InvariantViolationError) as excinfo:
            decode_record(lines)
        assert str(excinfo.value) == "Non-positive launch number"
        assert excinfo.value.offset == 37

    def test_negative_launch_number(self, iss_lines) -> None:
        lines = [iss_lines[0], _splice(iss_lines[1], 11, "-01"), iss_lines[2]]
        with pytest.raises(InvariantViolationError) as excinfo:
            decode_record(lines)
        assert excinfo.value.message == "Non-positive launch number"
        assert excinfo.value.offset == len(iss_lines[0]) + 13

    def test_negative_launch_piece(self, iss_lines) -> None:
        lines = [iss_lines[0], _splice(iss_lines[1], 14, "-"), iss_lines[2]]
        with pytest.raises(InvariantViolationError) as excinfo:
            decode_record(lines)
        assert excinfo.value.message == "Non-positive launch piece"
        assert excinfo.value.offset == 24 + 15

    def test_unparseable_catalog_number(self, iss_lines) -> None:
        lines = [iss_lines[0], _splice(iss_lines[1], 2, "2A544"), iss_lines[2]]
        with pytest.raises(FieldFormatError) as excinfo:
            decode_record(lines)
        assert excinfo.value.message == "Invalid satellite number"
        assert excinfo.value.offset == 27

    def test_epoch_without_fraction(self, iss_lines) -> None:
        lines = [iss_lines[0], _splice(iss_lines[1], 23, "0"), iss_lines[2]]
        with pytest.raises(InvalidEpochError) as excinfo:
            decode_record(lines)
        assert excinfo.value.message == "Invalid epoch"
        assert excinfo.value.offset == 24 + 22
        assert excinfo.value.kind is ErrorKind.INVALID_EPOCH

    def test_epoch_day_wider_than_three_digits(self, iss_lines) -> None:
        lines = [iss_lines[0], _splice(iss_lines[1], 20, "9999999.999"), iss_lines[2]]
        with pytest.raises(FieldFormatError) as excinfo:
            decode_record(lines)
        assert excinfo.value.message == "Invalid epoch"
        assert excinfo.value.offset == 24 + 22

    def test_bad_drag_term(self, iss_lines) -> None:
        lines = [iss_lines[0], _splice(iss_lines[1], 54, "4949X-4"), iss_lines[2]]
        with pytest.raises(FieldFormatError) as excinfo:
            decode_record(lines)
        assert excinfo.value.message == "Invalid BSTAR drag term"
        assert excinfo.value.offset == 24 + 54

    def test_second_line_offsets_include_first_two_lines(self, iss_lines) -> None:
        lines = [iss_lines[0], iss_lines[1], _splice(iss_lines[2], 26, "00056a6")]
        with pytest.raises(FieldFormatError) as excinfo:
            decode_record(lines)
        assert excinfo.value.message == "Invalid eccentricity"
        assert excinfo.value.offset == 24 + 69 + 27

    def test_offset_follows_line_lengths(self, iss_lines) -> None:
        lines = ["ISS".ljust(30), _splice(iss_lines[1], 2, "-0544"), iss_lines[2]]
        with pytest.raises(InvariantViolationError) as excinfo:
            decode_record(lines)
        assert excinfo.value.offset == 30 + 3

    def test_truncated_line(self, iss_lines) -> None:
        lines = [iss_lines[0], iss_lines[1], iss_lines[2][:60]]
        with pytest.raises(TruncatedLineError) as excinfo:
            decode_record(lines)
        assert "mean motion" in excinfo.value.message
        assert excinfo.value.offset == 24 + 69 + 53

    def test_first_failing_field_wins(self, iss_lines) -> None:
        line1 = _splice(_splice(iss_lines[1], 2, "-0544"), 11, "000")
        with pytest.raises(InvariantViolationError, match="Negative satellite number"):
            decode_record([iss_lines[0], line1, iss_lines[2]])

    def test_line_one_checked_before_line_two(self, iss_lines) -> None:
        lines = [iss_lines[0], _splice(iss_lines[1], 11, "000"), iss_lines[2][:10]]
        with pytest.raises(InvariantViolationError):
            decode_record(lines)

    def test_errors_are_value_errors(self, iss_lines) -> None:
        lines = [iss_lines[0], _splice(iss_lines[1], 11, "000"), iss_lines[2]]
        with pytest.raises(ValueError):
            decode_record(lines)


class TestSegmentLines:
    def test_groups_of_three(self, catalog_lines) -> None:
        blocks = segment_lines(catalog_lines)
        assert len(blocks) == 3
        assert list(blocks[1]) == catalog_lines[3:6]

    @pytest.mark.parametrize("extra", [1, 2])
    def test_trailing_lines_dropped(self, catalog_lines, extra) -> None:
        blocks = segment_lines(catalog_lines[: 3 + extra])
        assert len(blocks) == 1

    def test_fewer_than_three_lines(self, iss_lines) -> None:
        assert segment_lines(iss_lines[:2]) == []

    def test_empty(self) -> None:
        with pytest.raises(EmptyInputError) as excinfo:
            segment_lines([])
        assert excinfo.value.offset == 0


class TestDecodeCatalog:
    def test_preserves_order(self, catalog_lines, current_year) -> None:
        sats = decode_catalog(catalog_lines, current_year=current_year)
        assert [s.catalog_number for s in sats] == [25544, 37820, 7376]

    @pytest.mark.parametrize("extra", [1, 2])
    def test_trailing_partial_record_ignored(self, catalog_lines, current_year, extra) -> None:
        lines = catalog_lines + catalog_lines[:extra]
        sats = decode_catalog(lines, current_year=current_year)
        assert len(sats) == 3

    def test_empty(self) -> None:
        with pytest.raises(EmptyInputError, match="Empty file"):
            decode_catalog([])

    def test_deterministic(self, catalog_lines, current_year) -> None:
        assert decode_catalog(catalog_lines, current_year=current_year) == decode_catalog(
            catalog_lines, current_year=current_year
        )

    def test_fails_whole_catalog(self, catalog_lines) -> None:
        lines = list(catalog_lines)
        lines[4] = _splice(lines[4], 11, "000")
        with pytest.raises(TLEError) as excinfo:
            decode_catalog(lines)
        assert excinfo.value.message == "Non-positive launch number"

    def test_offset_relative_to_failing_record(self, catalog_lines) -> None:
        lines = list(catalog_lines)
        lines[7] = _splice(lines[7], 2, "-0544")
        with pytest.raises(InvariantViolationError) as excinfo:
            decode_catalog(lines)
        assert excinfo.value.offset == len(lines[6]) + 3


class TestParseTLE:
    def test_text(self, catalog_lines, current_year) -> None:
        sats = parse_tle("\n".join(catalog_lines), current_year=current_year)
        assert [s.name for s in sats] == ["ISS (ZARYA)", "TIANGONG 1", "MOLNIYA 2-10"]

    def test_no_terminating_newline_equals_terminated(self, catalog_lines, current_year) -> None:
        text = "\n".join(catalog_lines)
        assert parse_tle(text, current_year=current_year) == parse_tle(
            text + "\n", current_year=current_year
        )

    def test_crlf(self, iss_lines, current_year) -> None:
        sats = parse_tle("\r\n".join(iss_lines) + "\r\n", current_year=current_year)
        assert sats[0].catalog_number == 25544

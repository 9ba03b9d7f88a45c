"""Tests for the station count and measurement error checks.

Run:
    pytest moody_plate/tests/test_consistency.py -v
"""
import pytest

from moody_plate.config.models import LineId
from moody_plate.engine.analysis import analyze_plate
from moody_plate.validators import ConsistencyChecker, check_station_counts


def test_matching_counts_give_no_warnings(lines_with_counts):
    report = check_station_counts(lines_with_counts())
    assert report.warnings == []
    assert report.is_consistent


def test_diagonal_mismatch_warns(lines_with_counts):
    report = check_station_counts(lines_with_counts(NW_SE=40, NE_SW=41))
    assert any("diagonals" in w for w in report.warnings)
    assert not report.is_consistent


def test_parallel_line_mismatch_warns(lines_with_counts):
    report = check_station_counts(lines_with_counts(E_W=5))
    assert any("E_W.txt" in w and "three lines" in w for w in report.warnings)


def test_pythagoras_deviation_warns(lines_with_counts):
    report = check_station_counts(lines_with_counts(NW_SE=7, NE_SW=7))
    messages = [w for w in report.warnings if "Pythagoras" in w]
    assert len(messages) == 2
    assert "x = 4, y = 3 and z = 7" in messages[0]


def test_pythagoras_within_tolerance(lines_with_counts):
    report = check_station_counts(lines_with_counts(NW_SE=6, NE_SW=6))
    assert not any("Pythagoras" in w for w in report.warnings)


def test_zero_readings_have_no_measurement_error(zero_readings, metric_config):
    survey = analyze_plate(metric_config, zero_readings)
    report = survey.report

    assert report.errors_acceptable is True
    assert report.center_errors[LineId.E_W] == 0.0
    assert report.center_errors[LineId.N_S] == 0.0
    assert any("0.00 microns" in note for note in report.notes)
    assert any("acceptable" in note for note in report.notes)


def test_large_center_error_is_flagged(zero_readings, metric_config):
    # Middle of E_W column 6 ends up at -50 arcsec
    zero_readings[LineId.E_W] = [0.0, 100.0, 100.0, 100.0]
    survey = analyze_plate(metric_config, zero_readings)
    report = survey.report

    assert report.center_errors[LineId.E_W] == pytest.approx(-50.0 * metric_config.conversion_factor)
    assert report.errors_acceptable is False
    assert any("done over" in note for note in report.notes)
    assert not any("done over" in w for w in report.warnings)


def test_imperial_error_reported_in_micro_inches(zero_readings, imperial_config):
    zero_readings[LineId.E_W] = [0.0, 1.0, 1.0, 1.0]
    survey = analyze_plate(imperial_config, zero_readings)
    report = survey.report

    # -0.5 arcsec at the middle, reported as 10x the 1e-5 inch value
    assert report.center_errors[LineId.E_W] == pytest.approx(-5.0 * imperial_config.conversion_factor)
    assert report.errors_acceptable is True
    assert any("micro-inches" in note for note in report.notes)


def test_checker_adds_to_existing_report(lines_with_counts):
    checker = ConsistencyChecker()
    report = checker.check_station_counts(lines_with_counts(NW_SE=40, NE_SW=41))
    again = checker.check_station_counts(lines_with_counts(E_W=5), report)
    assert again is report
    assert any("three lines" in w for w in report.warnings)
    assert any("diagonals" in w for w in report.warnings)

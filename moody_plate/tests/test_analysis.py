"""End-to-end tests for the plate analysis pipeline.

Run:
    pytest moody_plate/tests/test_analysis.py -v
"""
import numpy as np
import pytest

from moody_plate import MoodyAnalyzer, analyze_plate
from moody_plate.config.models import LineId, DELTA_DATUM, HEIGHT
from moody_plate.engine.plate_errors import MissingLineError


def test_zero_readings_give_flat_plate(metric_config):
    readings = {line_id: [0.0, 0.0, 0.0, 0.0] for line_id in LineId}
    survey = analyze_plate(metric_config, readings)

    for line_id in LineId:
        heights = survey.heights(line_id)
        assert len(heights) == 5
        assert (heights == 0.0).all()
    assert survey.max_height == 0.0
    assert survey.report.errors_acceptable is True


def test_results_are_repeatable(plate_readings, metric_config):
    first = analyze_plate(metric_config, plate_readings)
    second = analyze_plate(metric_config, plate_readings)

    for line_id in LineId:
        np.testing.assert_array_equal(first.heights(line_id), second.heights(line_id))


def test_readings_are_not_modified(plate_readings, metric_config):
    before = {line_id: list(values) for line_id, values in plate_readings.items()}
    analyze_plate(metric_config, plate_readings)
    assert plate_readings == before


def test_max_height_matches_highest_station(plate_readings, metric_config):
    survey = analyze_plate(metric_config, plate_readings)
    highest = max(survey.heights(line_id).max() for line_id in LineId)
    lowest = min(survey.heights(line_id).min() for line_id in LineId)

    assert lowest == 0.0
    assert survey.max_height == pytest.approx(highest)


def test_imperial_heights_scale_with_factor(plate_readings, metric_config, imperial_config):
    metric = analyze_plate(metric_config, plate_readings)
    imperial = analyze_plate(imperial_config, plate_readings)
    ratio = imperial_config.conversion_factor / metric_config.conversion_factor

    for line_id in LineId:
        np.testing.assert_allclose(
            imperial.heights(line_id), metric.heights(line_id) * ratio
        )


def test_diagonal_ramp_worksheet(zero_readings, metric_config):
    zero_readings[LineId.NW_SE] = [0.0, 10.0, 20.0, 30.0, 40.0]
    survey = analyze_plate(metric_config, zero_readings)
    datum = survey[LineId.NW_SE].worksheet.column(DELTA_DATUM)

    assert datum[0] == pytest.approx(datum[5])


def test_station_count_mismatch_still_completes(metric_config):
    readings = {line_id: [0.0] * 30 for line_id in LineId}
    readings[LineId.NW_SE] = [0.0] * 40
    readings[LineId.NE_SW] = [0.0] * 41

    survey = analyze_plate(metric_config, readings)

    assert any("diagonals" in w for w in survey.report.warnings)
    for line_id in LineId:
        assert np.isfinite(survey.heights(line_id)).all()


def test_missing_line_raises(plate_readings, metric_config):
    del plate_readings[LineId.N_S]
    with pytest.raises(MissingLineError, match="N_S"):
        analyze_plate(metric_config, plate_readings)


def test_sources_are_kept(plate_readings, metric_config):
    sources = {line_id: f"data/{line_id.filename}" for line_id in LineId}
    survey = MoodyAnalyzer(metric_config).analyze(plate_readings, sources)
    assert survey[LineId.E_W].source_file == "data/E_W.txt"


def test_survey_dataframe(plate_readings, metric_config):
    survey = analyze_plate(metric_config, plate_readings)
    frame = survey.to_dataframe()

    expected_rows = sum(len(values) + 1 for values in plate_readings.values())
    assert len(frame) == expected_rows
    assert set(frame['Line']) == {line_id.name for line_id in LineId}
    assert frame[HEIGHT].notna().all()

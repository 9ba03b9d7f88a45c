"""Tests for columns 7 and 8 and the unit conversion.

Run:
    pytest moody_plate/tests/test_normalizer.py -v
"""
import numpy as np
import pytest

from moody_plate.config.models import DELTA_BASE, HEIGHT
from moody_plate.config.settings import ARCSEC_IN_RADIANS
from moody_plate.engine.plate_errors import IncompleteWorksheetError
from moody_plate.engine.corner_propagator import propagate_corners
from moody_plate.engine.normalizer import find_height_range, normalize_heights


def test_conversion_factor_metric(metric_config):
    assert metric_config.conversion_factor == pytest.approx(66.0 * 1000.0 * ARCSEC_IN_RADIANS)
    assert metric_config.height_unit == 'micron'


def test_conversion_factor_imperial(imperial_config):
    assert imperial_config.conversion_factor == pytest.approx(4.0 * 100000.0 * ARCSEC_IN_RADIANS)
    assert imperial_config.height_unit == '10^-5in'


def test_arcsec_constant():
    assert ARCSEC_IN_RADIANS == pytest.approx(4.8481e-6, rel=1e-4)


def test_height_range_uses_reference_columns(prepared_lines):
    propagate_corners(prepared_lines)
    height_range = find_height_range(prepared_lines.values())

    values = np.concatenate([
        line.worksheet.column(line.reference_column)
        for line in prepared_lines.values()
    ])
    assert height_range.lowest == values.min()
    assert height_range.highest == values.max()


def test_lowest_point_is_zero(prepared_lines, metric_config):
    propagate_corners(prepared_lines)
    normalize_heights(prepared_lines.values(), metric_config)

    lowest = min(line.worksheet.column(DELTA_BASE).min() for line in prepared_lines.values())
    assert lowest == 0.0
    for line in prepared_lines.values():
        assert (line.worksheet.column(HEIGHT) >= 0.0).all()


def test_height_is_base_times_factor(prepared_lines, metric_config):
    propagate_corners(prepared_lines)
    normalize_heights(prepared_lines.values(), metric_config)

    for line in prepared_lines.values():
        np.testing.assert_allclose(
            line.worksheet.column(HEIGHT),
            line.worksheet.column(DELTA_BASE) * metric_config.conversion_factor
        )


def test_unsolved_lines_raise(prepared_lines):
    with pytest.raises(IncompleteWorksheetError):
        find_height_range(prepared_lines.values())

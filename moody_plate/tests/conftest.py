"""
Shared fixtures for the plate analysis tests.

The default plate is 4 stations east-west by 3 north-south, with 5 stations
along each diagonal, so the station counts satisfy every consistency check.
"""
from pathlib import Path

import numpy as np
import pytest

from moody_plate.config.models import LineId, PlateLine, PlateConfig
from moody_plate.config.settings import UnitMode
from moody_plate.engine.worksheet_columns import build_first_columns


STATION_COUNTS = {
    LineId.NW_SE: 5,
    LineId.NE_SW: 5,
    LineId.NE_NW: 4,
    LineId.NE_SE: 3,
    LineId.SE_SW: 4,
    LineId.NW_SW: 3,
    LineId.E_W: 4,
    LineId.N_S: 3,
}


@pytest.fixture
def metric_config():
    return PlateConfig(UnitMode.METRIC, 66.0)


@pytest.fixture
def imperial_config():
    return PlateConfig(UnitMode.IMPERIAL, 4.0)


@pytest.fixture
def zero_readings():
    """All-zero readings on the default plate."""
    return {line_id: [0.0] * n for line_id, n in STATION_COUNTS.items()}


@pytest.fixture
def plate_readings():
    """Reproducible non-trivial readings on the default plate."""
    rng = np.random.default_rng(1955)
    return {
        line_id: list(np.round(rng.normal(0.0, 4.0, n), 1))
        for line_id, n in STATION_COUNTS.items()
    }


@pytest.fixture
def prepared_lines(plate_readings):
    """PlateLines with columns 1-4 filled in."""
    lines = {}
    for line_id, readings in plate_readings.items():
        lines[line_id] = build_first_columns(PlateLine(line_id, readings))
    return lines


@pytest.fixture
def write_plate(tmp_path):
    """Factory writing a config file and eight reading files to tmp_path."""

    def write(readings, config_text="M 66.0\n") -> Path:
        (tmp_path / "Config.txt").write_text(config_text)
        for line_id, values in readings.items():
            body = "# readings in arcseconds\n" + "".join(f"{v}\n" for v in values)
            (tmp_path / line_id.filename).write_text(body)
        return tmp_path

    return write


@pytest.fixture
def lines_with_counts():
    """Factory for zero-reading PlateLines with some station counts changed."""

    def build(**overrides):
        counts = dict(STATION_COUNTS)
        for name, n in overrides.items():
            counts[LineId[name]] = n
        return {line_id: PlateLine(line_id, [0.0] * n) for line_id, n in counts.items()}

    return build

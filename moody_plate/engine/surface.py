"""
Surface Module

Places the stations of every line on the plate footprint so the
calibrated heights can be drawn as a 3D surface.
"""
from typing import List, Dict, Tuple
from dataclasses import dataclass
import numpy as np
import pandas as pd

from ..config.models import PlateSurvey, PlateLine, LineId, HEIGHT
from .line_registry import LINE_REGISTRY, EAST_WEST, NORTH_SOUTH, plot_order


@dataclass
class SurfaceTrace:
    """Stations of one line as (X, Y, Height) rows."""
    line_id: LineId
    points: pd.DataFrame

    @property
    def label(self) -> str:
        return self.line_id.filename


def plot_extent(lines: Dict[LineId, PlateLine]) -> Tuple[int, int]:
    """
    Footprint size in stations.

    Returns:
        (max_x, max_y), the longest east-west and north-south station counts
    """
    max_x = max(lines[line_id].num_stations for line_id in EAST_WEST)
    max_y = max(lines[line_id].num_stations for line_id in NORTH_SOUTH)
    return max_x, max_y


def line_points(
    line: PlateLine,
    max_x: float,
    max_y: float,
    column: str = HEIGHT
) -> pd.DataFrame:
    """
    Positions of a line's stations, running linearly from its start
    corner to its end corner.
    """
    entry = LINE_REGISTRY[line.line_id]
    n = line.num_stations
    t = np.arange(n + 1) / n

    (x0, y0), (x1, y1) = entry.start_xy, entry.end_xy
    return pd.DataFrame({
        'X': max_x * (x0 + (x1 - x0) * t),
        'Y': max_y * (y0 + (y1 - y0) * t),
        'Height': line.worksheet.column(column),
    })


def surface_traces(survey: PlateSurvey) -> List[SurfaceTrace]:
    """
    (X, Y, Height) triples for all eight lines: the diagonals, then the
    east-west lines, then the north-south lines.

    Args:
        survey: Completed PlateSurvey

    Returns:
        List of SurfaceTrace
    """
    max_x, max_y = plot_extent(survey.lines)
    return [
        SurfaceTrace(line_id, line_points(survey[line_id], max_x, max_y))
        for line_id in plot_order()
    ]

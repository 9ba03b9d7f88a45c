"""
Worksheet Columns Module

First four worksheet columns and the "middle value" rule used throughout
Moody's method.
"""
from typing import Sequence
import numpy as np
import logging

from ..config.models import (
    PlateLine, STATION, AUTO_CORR, ANGLE_DISPL, SUM_DISPL
)
from .plate_errors import IncompleteWorksheetError


logger = logging.getLogger(__name__)


def middle_value(values: Sequence[float]) -> float:
    """
    Return the middle value of a worksheet column.

    The column has N+1 rows (0..N). If N is even there is an odd number of
    rows and the middle one, row N/2, is returned. If N is odd the two rows
    either side of the center, (N-1)/2 and (N+1)/2, are averaged.

    This is positional, not a sorted median.

    Args:
        values: Column values for rows 0..N

    Returns:
        Middle value
    """
    values = np.asarray(values, dtype=float)
    n = len(values) - 1
    if n < 1:
        raise ValueError("A worksheet column needs at least two rows")

    if n % 2 == 0:
        picked = values[n // 2:n // 2 + 1]
    else:
        picked = values[(n - 1) // 2:(n + 1) // 2 + 1]

    if np.isnan(picked).any():
        raise IncompleteWorksheetError("Middle value of an unfilled column")
    return float(picked.mean())


def line_middle(line: PlateLine, column: str) -> float:
    """Middle value of one column of a line's worksheet."""
    try:
        return middle_value(line.worksheet.column(column))
    except IncompleteWorksheetError:
        raise IncompleteWorksheetError(
            f"Column {column} of {line.name} is not filled in at its middle"
        ) from None


def build_first_columns(line: PlateLine) -> PlateLine:
    """
    Fill in Moody columns 1 to 4.

        1: station label, row + 1
        2: raw reading in arcseconds (rows 1..N)
        3: angle displacement, reading minus the first reading
        4: running sum of column 3, zero at rows 0 and 1

    Args:
        line: PlateLine with readings (modified in place)

    Returns:
        The same PlateLine
    """
    sheet = line.worksheet
    n = line.num_stations

    stations = np.arange(1, n + 2, dtype=float)

    readings = np.full(n + 1, np.nan)
    readings[1:] = line.readings

    displacement = np.full(n + 1, np.nan)
    displacement[1:] = readings[1:] - readings[1]

    cumulative = np.zeros(n + 1)
    cumulative[2:] = np.cumsum(displacement[2:])

    sheet.set_column(STATION, stations)
    sheet.set_column(AUTO_CORR, readings)
    sheet.set_column(ANGLE_DISPL, displacement)
    sheet.set_column(SUM_DISPL, cumulative)

    logger.debug(f"{line.name}: columns 1-4 for {n} stations")
    return line

"""
Line Adjustment Module

Moody columns 5 and 6: the cumulative correction of the diagonals and the
correction factor shift of the perimeter and center lines, plus column 6a
for the center lines.
"""
from typing import Optional
import numpy as np
import logging

from ..config.models import (
    PlateLine, LineKind, SUM_DISPL, CUMUL_CORR, DELTA_DATUM, ERROR_SHIFT_OUT
)
from .plate_errors import IncompleteWorksheetError
from .worksheet_columns import middle_value, line_middle


logger = logging.getLogger(__name__)


def _require(line: PlateLine, column: str, rows=None):
    if not line.worksheet.is_defined(column, rows):
        where = f" rows {list(rows)}" if rows is not None else ""
        raise IncompleteWorksheetError(
            f"{line.name}: column {column}{where} is not filled in"
        )


def reconcile_diagonal(line: PlateLine) -> PlateLine:
    """
    Cumulative corrections for a diagonal line.

    A straight line a*j + b is added to column 4 so that the corrected
    line ends where it starts, and both ends sit symmetric about the
    middle value of column 4:

        a = -col4[N] / N
        b = col4[N] / 2 - middle(col4)

    Args:
        line: Diagonal PlateLine with columns 1-4 filled in

    Returns:
        The same PlateLine with columns 5 and 6 filled in
    """
    if line.kind != LineKind.DIAGONAL:
        raise ValueError(f"{line.name} is not a diagonal")
    _require(line, SUM_DISPL)

    sheet = line.worksheet
    n = line.num_stations
    cumulative = sheet.column(SUM_DISPL)

    a = -cumulative[n] / n
    b = 0.5 * cumulative[n] - middle_value(cumulative)

    correction = a * np.arange(n + 1) + b
    sheet.set_column(CUMUL_CORR, correction)
    sheet.set_column(DELTA_DATUM, cumulative + correction)

    logger.debug(f"{line.name}: slope {a:.4f}, intercept {b:.4f}")
    return line


def seed_line(line: PlateLine, start_value: float, end_value: float) -> PlateLine:
    """
    Copy corner values into the ends of a perimeter or center line.

    The start value goes into columns 5 and 6 of row 0, the end value into
    column 6 of row N.
    """
    sheet = line.worksheet
    n = line.num_stations
    sheet.set(CUMUL_CORR, 0, start_value)
    sheet.set(DELTA_DATUM, 0, start_value)
    sheet.set(DELTA_DATUM, n, end_value)
    return line


def shift_line(line: PlateLine) -> PlateLine:
    """
    Correction factor shift for a perimeter or center line.

    The shift needed at the far end is solved from the seeded end value,
    and the difference to the seeded start is spread uniformly over the
    stations in between:

        col5[N] = col6[N] - col4[N]
        c = (col5[0] - col5[N]) / N
        col5[j] = col5[j+1] + c,  col6[j] = col5[j] + col4[j],  j = N-1..1

    Center lines also get column 6a, column 6 less its middle value.

    Args:
        line: Seeded PlateLine with columns 1-4 filled in

    Returns:
        The same PlateLine
    """
    if line.kind == LineKind.DIAGONAL:
        raise ValueError(f"{line.name} is a diagonal, use reconcile_diagonal")

    n = line.num_stations
    _require(line, SUM_DISPL)
    _require(line, CUMUL_CORR, [0])
    _require(line, DELTA_DATUM, [0, n])

    sheet = line.worksheet
    cumulative = sheet.column(SUM_DISPL)
    correction = sheet.column(CUMUL_CORR)
    datum = sheet.column(DELTA_DATUM)

    correction[n] = datum[n] - cumulative[n]
    factor = (correction[0] - correction[n]) / n
    for j in range(n - 1, 0, -1):
        correction[j] = correction[j + 1] + factor
        datum[j] = correction[j] + cumulative[j]

    sheet.set_column(CUMUL_CORR, correction)
    sheet.set_column(DELTA_DATUM, datum)
    logger.debug(f"{line.name}: correction factor {factor:.4f}")

    if line.is_center:
        should_be_zero = line_middle(line, DELTA_DATUM)
        sheet.set_column(ERROR_SHIFT_OUT, datum - should_be_zero)
        logger.debug(f"{line.name}: shifted out {should_be_zero:.4f}")

    return line


class LineAdjuster:
    """Fills in columns 5, 6 and 6a of one line."""

    def adjust(
        self,
        line: PlateLine,
        start_value: Optional[float] = None,
        end_value: Optional[float] = None
    ) -> PlateLine:
        """
        Adjust a line, seeding its ends first where values are given.

        Args:
            line: PlateLine with columns 1-4 filled in
            start_value: Corner value for row 0 (perimeter and center lines)
            end_value: Corner value for row N (perimeter and center lines)

        Returns:
            The adjusted PlateLine
        """
        if line.kind == LineKind.DIAGONAL:
            return reconcile_diagonal(line)

        if start_value is not None and end_value is not None:
            seed_line(line, start_value, end_value)
        return shift_line(line)

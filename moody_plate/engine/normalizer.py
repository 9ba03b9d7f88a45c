"""
Height Normalizer Module

Moody columns 7 and 8: every line's corrected heights rebased to the
lowest point on the plate, then converted from arcseconds to length.
"""
from typing import Iterable
import numpy as np
import logging

from ..config.models import (
    PlateLine, PlateConfig, HeightRange, DELTA_BASE, HEIGHT
)
from .plate_errors import IncompleteWorksheetError


logger = logging.getLogger(__name__)


def find_height_range(lines: Iterable[PlateLine]) -> HeightRange:
    """
    Search column 6 (column 6a for center lines) of all lines for the
    lowest and highest value.

    Args:
        lines: Solved PlateLines

    Returns:
        HeightRange in arcseconds
    """
    values = []
    for line in lines:
        column = line.reference_column
        if not line.worksheet.is_defined(column):
            raise IncompleteWorksheetError(
                f"{line.name}: column {column} is not filled in"
            )
        values.append(line.worksheet.column(column))

    if not values:
        raise ValueError("No lines to search")

    all_values = np.concatenate(values)
    return HeightRange(lowest=float(all_values.min()), highest=float(all_values.max()))


def normalize_heights(lines: Iterable[PlateLine], config: PlateConfig) -> HeightRange:
    """
    Fill in columns 7 and 8 of every line.

        col7 = col6 (or col6a) - lowest
        col8 = col7 * foot_spacing * arcsec * length scale

    Args:
        lines: Solved PlateLines (modified in place)
        config: Plate configuration for the unit conversion

    Returns:
        HeightRange used as the base
    """
    lines = list(lines)
    height_range = find_height_range(lines)
    factor = config.conversion_factor

    for line in lines:
        sheet = line.worksheet
        base = sheet.column(line.reference_column) - height_range.lowest
        sheet.set_column(DELTA_BASE, base)
        sheet.set_column(HEIGHT, base * factor)

    logger.debug(
        f"Lowest {height_range.lowest:.3f}, highest {height_range.highest:.3f} "
        f"arcsec; {factor:.6f} {config.height_unit} per arcsec"
    )
    return height_range

"""
Validators Package

Consistency checks for surface plate measurements. Nothing here stops a
run: problems are collected as warnings and left to the operator.
"""
from typing import Dict, Optional
import logging
import math

from ..config.models import (
    PlateLine, PlateConfig, LineId, ConsistencyReport, DELTA_DATUM
)
from ..config.settings import get_settings, error_tolerance
from ..engine.line_registry import (
    DIAGONALS, CENTER_LINES, PARALLEL_GROUPS, RIGHT_TRIANGLES
)
from ..engine.worksheet_columns import line_middle


logger = logging.getLogger(__name__)


class ConsistencyChecker:
    """Checker for the geometry and quality of a plate measurement."""

    def __init__(self):
        self.settings = get_settings()

    def check_station_counts(
        self,
        lines: Dict[LineId, PlateLine],
        report: Optional[ConsistencyReport] = None
    ) -> ConsistencyReport:
        """
        Check that the station counts of the eight lines fit together.

        Args:
            lines: All eight lines
            report: Report to add to, a new one if None

        Returns:
            ConsistencyReport with any warnings
        """
        if report is None:
            report = ConsistencyReport()

        self._check_diagonals(lines, report)
        self._check_parallel_lines(lines, report)
        self._check_pythagoras(lines, report)
        return report

    def _check_diagonals(self, lines: Dict[LineId, PlateLine], report: ConsistencyReport):
        first, second = DIAGONALS
        if lines[first].num_stations != lines[second].num_stations:
            self._warn(
                report,
                f"The number of stations along the {first.filename} and "
                f"{second.filename} diagonals are expected to be the same, "
                f"but are not ({lines[first].num_stations} and "
                f"{lines[second].num_stations})."
            )

    def _check_parallel_lines(self, lines: Dict[LineId, PlateLine], report: ConsistencyReport):
        for group in PARALLEL_GROUPS:
            counts = {lines[line_id].num_stations for line_id in group}
            if len(counts) > 1:
                names = ', '.join(line_id.filename for line_id in group[:-1])
                self._warn(
                    report,
                    f"The number of stations along the three lines {names} "
                    f"and {group[-1].filename} are expected to be the same, "
                    f"but are not."
                )

    def _check_pythagoras(self, lines: Dict[LineId, PlateLine], report: ConsistencyReport):
        """x^2 + y^2 = z^2 for each pair of perimeter lines and its diagonal."""
        limit = self.settings.tolerance.pythagoras_stations
        for x_id, y_id, z_id in RIGHT_TRIANGLES:
            x = lines[x_id].num_stations
            y = lines[y_id].num_stations
            z = lines[z_id].num_stations
            diagonal = math.sqrt(x * x + y * y)
            if abs(diagonal - z) > limit:
                self._warn(
                    report,
                    f"The number of stations along the perimeter lines and "
                    f"diagonal lines appears to deviate significantly from "
                    f"Pythagoras' Theorem x^2 + y^2 = z^2 for "
                    f"x = {x}, y = {y} and z = {z}."
                )

    def check_center_errors(
        self,
        lines: Dict[LineId, PlateLine],
        config: PlateConfig,
        report: Optional[ConsistencyReport] = None
    ) -> ConsistencyReport:
        """
        Estimate measurement errors from the center lines.

        With perfect readings the computed height at the middle of each
        center line (the middle value of column 6, before it is shifted
        out into column 6a) would be zero.

        Args:
            lines: All eight solved lines
            config: Plate configuration
            report: Report to add to, a new one if None

        Returns:
            ConsistencyReport with center_errors and errors_acceptable set
        """
        if report is None:
            report = ConsistencyReport()

        tolerance = error_tolerance(config.unit)
        acceptable = True

        for line_id in CENTER_LINES:
            error = line_middle(lines[line_id], DELTA_DATUM) * config.conversion_factor
            if config.is_metric:
                report.center_errors[line_id] = error
                report.add_note(
                    f"Computed height at the center of the {line_id.filename} "
                    f"line: {error:4.2f} microns."
                )
            else:
                report.center_errors[line_id] = 10 * error
                report.add_note(
                    f"Computed height at the center of the {line_id.filename} "
                    f"line: {10 * error:4.2f} micro-inches."
                )
            if abs(error) > tolerance:
                acceptable = False

        report.errors_acceptable = acceptable
        if acceptable:
            report.add_note(
                "According to Moody these errors are acceptable, because their "
                "magnitude is less than 100 micro-inch = 2.54 microns."
            )
        else:
            report.add_note(
                "Warning: measurement errors are larger than Moody considers\n"
                "acceptable (100 micro-inch = 2.54 microns). The job must be done over!"
            )
        logger.debug(f"Center line errors acceptable: {acceptable}")
        return report

    def _warn(self, report: ConsistencyReport, message: str):
        report.add_warning(message)
        logger.debug(f"Consistency warning recorded: {message}")


def check_station_counts(lines: Dict[LineId, PlateLine]) -> ConsistencyReport:
    """Convenience function for the station count checks alone."""
    return ConsistencyChecker().check_station_counts(lines)

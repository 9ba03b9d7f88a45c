"""
Plate Analysis Module

Runs Moody's worksheet recipe from raw readings to calibrated heights.
"""
from typing import Dict, Mapping, Optional, Sequence
import logging

from ..config.models import PlateLine, PlateConfig, PlateSurvey, LineId
from ..validators import ConsistencyChecker
from .plate_errors import MissingLineError
from .worksheet_columns import build_first_columns
from .corner_propagator import CornerPropagator
from .normalizer import normalize_heights


logger = logging.getLogger(__name__)


def build_lines(
    readings: Mapping[LineId, Sequence[float]],
    sources: Optional[Mapping[LineId, str]] = None
) -> Dict[LineId, PlateLine]:
    """
    Create the eight PlateLines, in worksheet order.

    Args:
        readings: Arcsecond readings per line
        sources: Optional file name per line

    Returns:
        Dictionary of PlateLine by LineId
    """
    sources = sources or {}
    missing = [line_id.name for line_id in LineId if line_id not in readings]
    if missing:
        raise MissingLineError(f"No readings for line(s): {', '.join(missing)}")

    return {
        line_id: PlateLine(line_id, list(readings[line_id]), sources.get(line_id))
        for line_id in LineId
    }


class MoodyAnalyzer:
    """Performs the complete surface plate analysis."""

    def __init__(self, config: PlateConfig):
        self.config = config
        self.checker = ConsistencyChecker()

    def analyze(
        self,
        readings: Mapping[LineId, Sequence[float]],
        sources: Optional[Mapping[LineId, str]] = None
    ) -> PlateSurvey:
        """
        Analyze one set of plate measurements.

        Args:
            readings: Arcsecond readings for each of the eight lines
            sources: Optional file name per line, for reporting

        Returns:
            PlateSurvey with every worksheet filled in
        """
        lines = build_lines(readings, sources)

        report = self.checker.check_station_counts(lines)

        for line in lines.values():
            build_first_columns(line)

        order = CornerPropagator(lines).solve()
        logger.debug(f"Solve order: {', '.join(line_id.name for line_id in order)}")

        height_range = normalize_heights(lines.values(), self.config)

        self.checker.check_center_errors(lines, self.config, report)

        survey = PlateSurvey(
            config=self.config,
            lines=lines,
            height_range=height_range,
            report=report
        )
        logger.info(
            f"Plate analyzed: maximum height {survey.max_height:.2f} "
            f"{self.config.height_unit}"
        )
        return survey


def analyze_plate(
    config: PlateConfig,
    readings: Mapping[LineId, Sequence[float]]
) -> PlateSurvey:
    """
    Convenience function to analyze a plate.

    Args:
        config: Unit mode and foot spacing
        readings: Arcsecond readings for each of the eight lines

    Returns:
        Completed PlateSurvey
    """
    return MoodyAnalyzer(config).analyze(readings)

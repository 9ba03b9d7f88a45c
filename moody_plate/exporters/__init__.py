"""
Exporters Package

Fixed-width text output of the completed worksheets, laid out like
Moody's paper forms, and of the measurement quality report.
"""
from typing import List, TextIO
import math
import logging

from ..config.models import (
    PlateLine, PlateConfig, PlateSurvey,
    MOODY_LABELS, STATION, AUTO_CORR, ANGLE_DISPL, SUM_DISPL, CUMUL_CORR,
    DELTA_DATUM, ERROR_SHIFT_OUT, DELTA_BASE, HEIGHT
)
from ..config.settings import get_settings


logger = logging.getLogger(__name__)


# Column number line is prepended from MOODY_LABELS
HEADER = (
    "---------------------------------------------------------------\n"
    "Station  Auto-   Angle  Sum of   Cumul   Delta   Delta   Delta \n"
    " Num-    Corr    Displ   Displ   Corr    Datum    Base    Base \n"
    " ber    ArcSec  ArcSec  ArcSec   Factor  ArcSec  ArcSec {unit:>7}\n"
    "---------------------------------------------------------------\n"
)

CENTER_HEADER = (
    "-----------------------------------------------------------------------\n"
    "Station  Auto-   Angle  Sum of   Cumul   Delta    Error  Delta   Delta \n"
    " Num-    Corr    Displ   Displ   Corr    Datum    Shift   Base    Base \n"
    " ber    ArcSec  ArcSec  ArcSec   Factor  ArcSec    Out   ArcSec {unit:>7}\n"
    "-----------------------------------------------------------------------\n"
)

RULE = "=" * 64


class WorksheetExporter:
    """
    Export completed worksheets as fixed-width tables.

    Table layout:
        Title line: TABLE <line name>
        Header: Moody column numbers and titles, 6a only for center lines
        Rows: station (%6d) then each column (%8.1f), undefined cells blank
    """

    def __init__(self):
        self.settings = get_settings()
        self.encoding = self.settings.encoding.output_encoding

    def format_worksheet(self, line: PlateLine, config: PlateConfig) -> str:
        """
        Render one worksheet.

        Args:
            line: Solved PlateLine
            config: Plate configuration, selects the column 8 unit

        Returns:
            Table text
        """
        out = self.settings.output
        columns = [AUTO_CORR, ANGLE_DISPL, SUM_DISPL, CUMUL_CORR, DELTA_DATUM]
        if line.is_center:
            columns.append(ERROR_SHIFT_OUT)
            header = CENTER_HEADER
        else:
            header = HEADER
        columns += [DELTA_BASE, HEIGHT]

        rows = [
            f"\nTABLE {line.name}\n",
            self.label_line(columns),
            header.format(unit=config.height_unit),
        ]

        frame = line.worksheet.frame
        for _, record in frame.iterrows():
            cells = [f"{int(record[STATION]):{out.station_width}d}"]
            for column in columns:
                value = record[column]
                if math.isnan(value):
                    cells.append(" " * out.value_width)
                else:
                    cells.append(f"{value:{out.value_width}.{out.decimal_places}f}")
            rows.append("".join(cells) + "\n")

        return "".join(rows)

    def label_line(self, columns: List[str]) -> str:
        """Moody's column numbers, right-aligned over the table columns."""
        out = self.settings.output
        labels = [f"{MOODY_LABELS[STATION]:>{out.station_width}}"]
        labels += [f"{MOODY_LABELS[column]:>{out.value_width}}" for column in columns]
        return "".join(labels) + "\n"

    def format_survey(self, survey: PlateSurvey) -> str:
        """Render all eight worksheets."""
        return "".join(
            self.format_worksheet(line, survey.config)
            for line in survey.lines.values()
        )

    def write(self, f: TextIO, survey: PlateSurvey):
        f.write(self.format_survey(survey))

    def export(self, filepath: str, survey: PlateSurvey):
        """
        Export all worksheets to a text file.

        Args:
            filepath: Output file path
            survey: Completed PlateSurvey
        """
        with open(filepath, 'w', encoding=self.encoding) as f:
            self.write(f, survey)
        logger.info(f"Exported worksheets to {filepath}")


def format_measurement_report(survey: PlateSurvey) -> str:
    """
    Measurement error summary from the center lines.

    Args:
        survey: Completed PlateSurvey

    Returns:
        Report text framed by rules
    """
    lines: List[str] = [
        RULE,
        "Measurement errors are estimated from the computed",
        "heights at the middle of the two center lines. Absent any",
        "measurement errors, these computed heights would be zero.",
    ]
    lines.extend(survey.report.notes)
    lines.append(RULE)
    return "\n".join(lines) + "\n"


def format_worksheet(line: PlateLine, config: PlateConfig) -> str:
    """Convenience function to render one worksheet."""
    return WorksheetExporter().format_worksheet(line, config)


def export_worksheets(filepath: str, survey: PlateSurvey):
    """Convenience function to export all worksheets."""
    WorksheetExporter().export(filepath, survey)

"""
Reading File Parser

Reads the angular readings of one measurement line.

File Format:
    # comment lines and blank lines are ignored
    12.5        one reading in arcseconds per line, in station order
    13.0
    ...
"""
from pathlib import Path
from typing import Dict, List, Optional
import logging
import math

from .base_parser import BaseParser
from ..config.models import PlateLine, LineId
from ..engine.plate_errors import (
    ReadingFormatError,
    InsufficientStationsError,
    StationCapacityError,
    MissingLineError
)


logger = logging.getLogger(__name__)


class ReadingParser(BaseParser):
    """Parser for per-line reading files."""

    error_class = MissingLineError

    def __init__(self, encoding: str = None, max_readings: Optional[int] = None):
        """
        Initialize the parser.

        Args:
            encoding: File encoding to use
            max_readings: Capacity limit, from settings if None
        """
        super().__init__(encoding)
        self.min_readings = self.settings.limits.min_readings
        self.max_readings = max_readings or self.settings.limits.max_readings

    def parse(self, filepath: str, line_id: Optional[LineId] = None) -> PlateLine:
        """
        Parse a reading file.

        Args:
            filepath: Path to the file
            line_id: Line the file belongs to; taken from the file name if None

        Returns:
            PlateLine holding the readings
        """
        if line_id is None:
            line_id = line_id_from_filename(filepath)
        readings = self.read_readings(filepath)
        return PlateLine(line_id, readings, source_file=str(filepath))

    def read_readings(self, filepath: str) -> List[float]:
        """
        Read and validate the readings of a file.

        Raises:
            ReadingFormatError: A line is not a single angle
            StationCapacityError: More readings than max_readings
            InsufficientStationsError: Fewer readings than min_readings
        """
        self.clear_messages()
        fname = self.extract_filename(filepath)
        lines = self.read_file(filepath)
        readings: List[float] = []

        for file_line, content in self.data_lines(lines):
            readings.append(self._parse_reading(content, fname, file_line))

            if len(readings) > self.max_readings:
                raise StationCapacityError(
                    f"A maximum of {self.max_readings} stations can be accepted, "
                    f"but file {fname} contains more stations than this. Raise "
                    f"the station limit, then rerun the analysis.",
                    filename=fname,
                    file_line=file_line
                )

        if len(readings) < self.min_readings:
            raise InsufficientStationsError(
                f"Read {len(readings)} data lines from data file {fname}. "
                f"Need at least {self.min_readings} valid data lines.",
                filename=fname
            )

        logger.info(f"Read {len(readings)} data entries from {fname}")
        return readings

    def _parse_reading(self, content: str, fname: str, file_line: int) -> float:
        parts = content.split()
        try:
            if len(parts) != 1:
                raise ValueError(content)
            value = float(parts[0])
            if not math.isfinite(value):
                raise ValueError(content)
            return value
        except ValueError:
            raise ReadingFormatError(
                f"Unable to parse line {file_line} of data file {fname}. "
                f"Expected is an angle in arcseconds. Line {file_line} reads: {content}",
                filename=fname,
                file_line=file_line,
                text=content
            ) from None


def line_id_from_filename(filepath: str) -> LineId:
    """Map a file name such as 'NW_SE.txt' to its LineId."""
    stem = Path(filepath).stem.upper()
    try:
        return LineId[stem]
    except KeyError:
        raise MissingLineError(
            f"File {Path(filepath).name} does not name one of the lines "
            f"{', '.join(line_id.name for line_id in LineId)}",
            filename=str(filepath)
        ) from None


def load_readings(
    data_dir: str,
    parser: Optional[ReadingParser] = None
) -> Dict[LineId, PlateLine]:
    """
    Read all eight line files from a directory.

    Args:
        data_dir: Directory holding NW_SE.txt, NE_SW.txt, ...
        parser: ReadingParser to use, a default one if None

    Returns:
        Dictionary of PlateLine by LineId, in worksheet order
    """
    parser = parser or ReadingParser()
    suffix = parser.settings.files.line_suffix
    lines = {}
    for line_id in LineId:
        path = Path(data_dir) / f"{line_id.name}{suffix}"
        lines[line_id] = parser.parse(str(path), line_id)
    return lines

"""
Configuration File Parser

Reads the plate configuration file.

File Format:
    # comment lines and blank lines are ignored
    M 66.0      metric, 66 mm foot spacing
    I 4.0       imperial, 4 inch foot spacing
    M66         the flag may be written against the number

Only the first non-comment line is read.
"""
import logging
import math

from .base_parser import BaseParser
from ..config.models import PlateConfig
from ..config.settings import UnitMode
from ..engine.plate_errors import ConfigurationError


logger = logging.getLogger(__name__)

EXPECTED_FORMAT = (
    'Expected is either "M x" or "I x", where "x" is the foot spacing '
    'in mm or inches respectively.'
)


class ConfigParser(BaseParser):
    """Parser for the plate configuration file."""

    error_class = ConfigurationError

    def parse(self, filepath: str) -> PlateConfig:
        """
        Parse a configuration file.

        Args:
            filepath: Path to the configuration file

        Returns:
            PlateConfig with unit mode and foot spacing
        """
        self.clear_messages()
        fname = self.extract_filename(filepath)
        lines = self.read_file(filepath)

        for file_line, content in self.data_lines(lines):
            config = self.parse_line(content, fname, file_line)
            logger.info(
                f"From file {fname}: using a {config.foot_spacing:.2f} "
                f"{config.spacing_unit} foot spacing."
            )
            return PlateConfig(config.unit, config.foot_spacing, source_file=str(filepath))

        raise ConfigurationError(
            f"Configuration file {fname} must specify a foot spacing and units. "
            f"Examples: 'M 66.0' means 66mm foot spacing, and 'I 4.0' means "
            f"4 inch foot spacing.",
            filename=fname
        )

    def parse_line(self, content: str, fname: str = '', file_line: int = 0) -> PlateConfig:
        """
        Parse a single "flag spacing" line. The flag is the first
        character, so "M66" reads the same as "M 66".

        Raises:
            ConfigurationError: If the line does not match the format
        """
        flag = content[:1]
        fields = content[1:].split()

        def fail(reason: str):
            raise ConfigurationError(
                f"Unable to parse line {file_line} of data file {fname}: {reason}. "
                f"{EXPECTED_FORMAT} Line {file_line} reads: {content}",
                filename=fname,
                file_line=file_line,
                text=content
            )

        if len(fields) != 1:
            fail(f"expected one foot spacing after the unit flag, found {len(fields)} fields")

        value = fields[0]
        try:
            unit = UnitMode(flag)
        except ValueError:
            fail(f"unknown unit flag '{flag}'")

        try:
            spacing = float(value)
        except ValueError:
            fail(f"'{value}' is not a number")

        if not (math.isfinite(spacing) and spacing > 0):
            fail("foot spacing must be a positive number")

        return PlateConfig(unit, spacing)


def read_config(filepath: str) -> PlateConfig:
    """Convenience function to read a configuration file."""
    return ConfigParser().parse(filepath)

"""
Moody Plate Configuration Settings
"""
from dataclasses import dataclass, field
from typing import List
from enum import Enum


# One arc second in radians, using the value of pi from the published
# worksheet program so that its results are reproduced.
ARCSEC_IN_RADIANS = 2.0 * 3.141592 / (360.0 * 60 * 60)


class UnitMode(Enum):
    """Unit system of the foot spacing and of the final heights."""
    METRIC = "M"     # foot spacing in mm, heights in microns
    IMPERIAL = "I"   # foot spacing in inches, heights in 1e-5 inch


@dataclass
class StationLimits:
    """Accepted number of readings per measurement line."""
    min_readings: int = 3
    max_readings: int = 125   # MAX_STATIONS (128) - 3


@dataclass
class ToleranceConfig:
    """Consistency check tolerances."""
    # Allowed deviation from x^2 + y^2 = z^2, in stations
    pythagoras_stations: float = 1.5

    # Largest acceptable computed height at a center line midpoint.
    # 100 micro-inch = 2.54 microns = 10 units of 1e-5 inch
    metric_error: float = 2.54
    imperial_error: float = 10.0


@dataclass
class FileConfig:
    """Input and output file names."""
    config_file: str = 'Config.txt'
    line_suffix: str = '.txt'
    gnuplot_command: str = 'gnuplot.cmd'
    gnuplot_data: str = 'gnuplot.dat'


@dataclass
class EncodingConfig:
    """File encoding configuration."""
    default_encoding: str = 'utf-8'
    fallback_encodings: List[str] = field(default_factory=lambda: ['latin-1'])
    output_encoding: str = 'utf-8'


@dataclass
class OutputConfig:
    """Worksheet table formatting."""
    station_width: int = 6
    value_width: int = 8
    decimal_places: int = 1


@dataclass
class Settings:
    """Main settings container."""
    limits: StationLimits = field(default_factory=StationLimits)
    tolerance: ToleranceConfig = field(default_factory=ToleranceConfig)
    files: FileConfig = field(default_factory=FileConfig)
    encoding: EncodingConfig = field(default_factory=EncodingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings


def length_scale(unit: UnitMode) -> float:
    """
    Factor taking the foot spacing to the output length unit.

    Metric spacings are in mm and heights are reported in microns;
    imperial spacings are in inches and heights in 1e-5 inch.
    """
    if unit == UnitMode.METRIC:
        return 1000.0
    return 100000.0


def error_tolerance(unit: UnitMode) -> float:
    """Largest acceptable center line error in the output length unit."""
    if unit == UnitMode.METRIC:
        return settings.tolerance.metric_error
    return settings.tolerance.imperial_error

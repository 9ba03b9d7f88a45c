"""
Config Package

Configuration and data models for the plate analysis.
"""
from .settings import (
    get_settings,
    Settings,
    UnitMode,
    ARCSEC_IN_RADIANS,
    length_scale,
    error_tolerance
)

from .models import (
    LineId,
    LineKind,
    Worksheet,
    PlateLine,
    PlateConfig,
    HeightRange,
    ConsistencyReport,
    PlateSurvey,
    WORKSHEET_COLUMNS,
    MOODY_LABELS
)

__all__ = [
    # Settings
    'get_settings',
    'Settings',
    'UnitMode',
    'ARCSEC_IN_RADIANS',
    'length_scale',
    'error_tolerance',

    # Models
    'LineId',
    'LineKind',
    'Worksheet',
    'PlateLine',
    'PlateConfig',
    'HeightRange',
    'ConsistencyReport',
    'PlateSurvey',
    'WORKSHEET_COLUMNS',
    'MOODY_LABELS',
]

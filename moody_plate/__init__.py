"""
Moody Surface Plate Analysis
============================
Calibrates a precision surface plate from autocollimator or electronic
level readings, following "How to calibrate a surface plate in the
plant", J.C. Moody, The Tool Engineer, October 1955.

Features:
- Config and reading file parsing
- Moody's eight worksheets (two diagonals, four perimeter and two
  center lines)
- Station count and measurement error checks
- Fixed-width worksheet tables
- gnuplot export for a 3D view of the plate
"""

__version__ = "1.0.0"
__author__ = "Moody Plate Tools"

from .config.models import LineId, PlateLine, PlateConfig, PlateSurvey
from .config.settings import Settings, UnitMode
from .engine.analysis import MoodyAnalyzer, analyze_plate

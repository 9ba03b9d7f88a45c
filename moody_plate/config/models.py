"""
Data Models for Surface Plate Measurements

Core data structures used throughout the plate analysis: the eight
measurement lines, their worksheets, and the result of a complete run.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Sequence
from enum import Enum
import numpy as np
import pandas as pd

from .settings import UnitMode, ARCSEC_IN_RADIANS, length_scale


class LineKind(Enum):
    """Role of a measurement line on the plate."""
    DIAGONAL = "diagonal"
    PERIMETER = "perimeter"
    CENTER = "center"


class LineId(Enum):
    """The eight measurement lines of Moody's layout, in worksheet order."""
    NW_SE = 0
    NE_SW = 1
    NE_NW = 2
    NE_SE = 3
    SE_SW = 4
    NW_SW = 5
    E_W = 6
    N_S = 7

    @property
    def index(self) -> int:
        return self.value

    @property
    def kind(self) -> LineKind:
        if self.value < 2:
            return LineKind.DIAGONAL
        if self.value < 6:
            return LineKind.PERIMETER
        return LineKind.CENTER

    @property
    def is_center(self) -> bool:
        return self.kind == LineKind.CENTER

    @property
    def filename(self) -> str:
        """Default input file name, e.g. 'NW_SE.txt'."""
        return f"{self.name}.txt"


# Worksheet columns, keyed by name, with Moody's column labels
STATION = 'Station'
AUTO_CORR = 'AutoCorr'
ANGLE_DISPL = 'AngleDispl'
SUM_DISPL = 'SumDispl'
CUMUL_CORR = 'CumulCorr'
DELTA_DATUM = 'DeltaDatum'
ERROR_SHIFT_OUT = 'ErrorShiftOut'
DELTA_BASE = 'DeltaBase'
HEIGHT = 'Height'

WORKSHEET_COLUMNS = [
    STATION, AUTO_CORR, ANGLE_DISPL, SUM_DISPL, CUMUL_CORR,
    DELTA_DATUM, ERROR_SHIFT_OUT, DELTA_BASE, HEIGHT,
]

MOODY_LABELS = {
    STATION: '1',
    AUTO_CORR: '2',
    ANGLE_DISPL: '3',
    SUM_DISPL: '4',
    CUMUL_CORR: '5',
    DELTA_DATUM: '6',
    ERROR_SHIFT_OUT: '6a',
    DELTA_BASE: '7',
    HEIGHT: '8',
}


class Worksheet:
    """
    Moody's paper worksheet for one line.

    Rows 0..N, one per station. Every cell starts undefined (NaN) and is
    filled in column by column as the pipeline stages run.
    """

    def __init__(self, num_stations: int):
        self.frame = pd.DataFrame(
            np.nan,
            index=pd.RangeIndex(num_stations + 1, name='Row'),
            columns=WORKSHEET_COLUMNS,
            dtype=float,
        )

    @property
    def num_stations(self) -> int:
        """N, the index of the last row."""
        return len(self.frame) - 1

    def column(self, name: str) -> np.ndarray:
        """Copy of a column as a float array of length N+1."""
        return self.frame[name].to_numpy(dtype=float, copy=True)

    def set_column(self, name: str, values: Sequence[float]):
        """Replace a whole column."""
        values = np.asarray(values, dtype=float)
        if len(values) != len(self.frame):
            raise ValueError(
                f"Column {name} needs {len(self.frame)} values, got {len(values)}"
            )
        self.frame[name] = values

    def get(self, name: str, row: int) -> float:
        return float(self.frame.at[row, name])

    def set(self, name: str, row: int, value: float):
        self.frame.at[row, name] = float(value)

    def is_defined(self, name: str, rows: Optional[Sequence[int]] = None) -> bool:
        """True if the column (or the given rows of it) holds no NaN."""
        values = self.frame[name]
        if rows is not None:
            values = values.iloc[list(rows)]
        return not values.isna().any()


@dataclass
class PlateLine:
    """One measurement line with its readings and its worksheet."""
    line_id: LineId
    readings: List[float]                 # arcseconds, in file order
    source_file: Optional[str] = None
    worksheet: Worksheet = field(init=False, repr=False)

    def __post_init__(self):
        self.readings = [float(r) for r in self.readings]
        self.worksheet = Worksheet(len(self.readings))

    @property
    def name(self) -> str:
        return self.line_id.name

    @property
    def num_stations(self) -> int:
        """N, the number of readings (the worksheet has N+1 rows)."""
        return len(self.readings)

    @property
    def kind(self) -> LineKind:
        return self.line_id.kind

    @property
    def is_center(self) -> bool:
        return self.line_id.is_center

    @property
    def reference_column(self) -> str:
        """Column holding the final corrected height before rebasing."""
        return ERROR_SHIFT_OUT if self.is_center else DELTA_DATUM


@dataclass(frozen=True)
class PlateConfig:
    """Unit mode and reflector foot spacing read from the config file."""
    unit: UnitMode
    foot_spacing: float              # mm (metric) or inches (imperial)
    source_file: Optional[str] = None

    @property
    def is_metric(self) -> bool:
        return self.unit == UnitMode.METRIC

    @property
    def length_scale(self) -> float:
        return length_scale(self.unit)

    @property
    def conversion_factor(self) -> float:
        """Output length units per arcsecond of column 7."""
        return self.foot_spacing * ARCSEC_IN_RADIANS * self.length_scale

    @property
    def spacing_unit(self) -> str:
        return 'mm' if self.is_metric else 'inch'

    @property
    def height_unit(self) -> str:
        return 'micron' if self.is_metric else '10^-5in'


@dataclass(frozen=True)
class HeightRange:
    """Global lowest and highest corrected height, in arcseconds."""
    lowest: float
    highest: float

    @property
    def span(self) -> float:
        return self.highest - self.lowest


@dataclass
class ConsistencyReport:
    """Non-fatal diagnostics collected during a run."""
    warnings: List[str] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)

    # Computed height at the middle of each center line, in reporting units
    center_errors: Dict[LineId, float] = field(default_factory=dict)
    errors_acceptable: Optional[bool] = None

    @property
    def is_consistent(self) -> bool:
        return not self.warnings

    def add_warning(self, message: str):
        """Add a warning; computation continues regardless."""
        self.warnings.append(message)

    def add_note(self, message: str):
        self.notes.append(message)


@dataclass
class PlateSurvey:
    """Complete result of one plate analysis."""
    config: PlateConfig
    lines: Dict[LineId, PlateLine]
    height_range: HeightRange
    report: ConsistencyReport = field(default_factory=ConsistencyReport)

    def __getitem__(self, line_id: LineId) -> PlateLine:
        return self.lines[line_id]

    @property
    def max_height(self) -> float:
        """Highest point above the lowest, in micron or 1e-5 inch."""
        return self.height_range.span * self.config.conversion_factor

    def heights(self, line_id: LineId) -> np.ndarray:
        """Final calibrated heights (column 8) of one line."""
        return self.lines[line_id].worksheet.column(HEIGHT)

    def to_dataframe(self) -> pd.DataFrame:
        """Long-form table of every station of every line."""
        frames = []
        for line_id, line in self.lines.items():
            frame = line.worksheet.frame.copy()
            frame.insert(0, 'Line', line_id.name)
            frames.append(frame.reset_index())
        return pd.concat(frames, ignore_index=True)

"""
Engine Package

Core worksheet calculation modules. The full pipeline is in
``moody_plate.engine.analysis``.
"""
from .plate_errors import (
    PlateInputError,
    ConfigurationError,
    ReadingFormatError,
    InsufficientStationsError,
    StationCapacityError,
    MissingLineError,
    IncompleteWorksheetError,
    PropagationError
)

from .line_registry import (
    LineSpec,
    LINE_REGISTRY,
    DIAGONALS,
    PERIMETER,
    CENTER_LINES,
    lines_of_kind,
    plot_order
)

from .worksheet_columns import (
    middle_value,
    line_middle,
    build_first_columns
)

from .line_adjustment import (
    LineAdjuster,
    reconcile_diagonal,
    seed_line,
    shift_line
)

from .corner_propagator import (
    Anchor,
    Seed,
    PROPAGATION_TABLE,
    CornerPropagator,
    propagate_corners
)

from .normalizer import (
    find_height_range,
    normalize_heights
)

from .surface import (
    SurfaceTrace,
    plot_extent,
    line_points,
    surface_traces
)

__all__ = [
    # Errors
    'PlateInputError',
    'ConfigurationError',
    'ReadingFormatError',
    'InsufficientStationsError',
    'StationCapacityError',
    'MissingLineError',
    'IncompleteWorksheetError',
    'PropagationError',

    # Line registry
    'LineSpec',
    'LINE_REGISTRY',
    'DIAGONALS',
    'PERIMETER',
    'CENTER_LINES',
    'lines_of_kind',
    'plot_order',

    # Worksheet columns
    'middle_value',
    'line_middle',
    'build_first_columns',

    # Line adjustment
    'LineAdjuster',
    'reconcile_diagonal',
    'seed_line',
    'shift_line',

    # Corner propagation
    'Anchor',
    'Seed',
    'PROPAGATION_TABLE',
    'CornerPropagator',
    'propagate_corners',

    # Normalizer
    'find_height_range',
    'normalize_heights',

    # Surface
    'SurfaceTrace',
    'plot_extent',
    'line_points',
    'surface_traces',
]

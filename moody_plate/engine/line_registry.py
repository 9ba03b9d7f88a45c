"""
Line Registry Module

Fixed topology of Moody's eight measurement lines: where each line lies on
the plate footprint, and which lines are expected to share a station count.
"""
from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..config.models import LineId, LineKind


@dataclass(frozen=True)
class LineSpec:
    """Physical placement of one measurement line."""
    line_id: LineId
    start_xy: Tuple[float, float]    # footprint position of row 0, 0..1
    end_xy: Tuple[float, float]      # footprint position of row N, 0..1


# West is x=0, east x=1, south y=0, north y=1
LINE_REGISTRY: Dict[LineId, LineSpec] = {
    LineId.NW_SE: LineSpec(LineId.NW_SE, (0.0, 1.0), (1.0, 0.0)),
    LineId.NE_SW: LineSpec(LineId.NE_SW, (1.0, 1.0), (0.0, 0.0)),
    LineId.NE_NW: LineSpec(LineId.NE_NW, (1.0, 1.0), (0.0, 1.0)),
    LineId.NE_SE: LineSpec(LineId.NE_SE, (1.0, 1.0), (1.0, 0.0)),
    LineId.SE_SW: LineSpec(LineId.SE_SW, (1.0, 0.0), (0.0, 0.0)),
    LineId.NW_SW: LineSpec(LineId.NW_SW, (0.0, 1.0), (0.0, 0.0)),
    LineId.E_W: LineSpec(LineId.E_W, (1.0, 0.5), (0.0, 0.5)),
    LineId.N_S: LineSpec(LineId.N_S, (0.5, 1.0), (0.5, 0.0)),
}


def lines_of_kind(kind: LineKind) -> List[LineId]:
    """All lines of one kind, in worksheet order."""
    return [line_id for line_id in LineId if line_id.kind == kind]


DIAGONALS = lines_of_kind(LineKind.DIAGONAL)
PERIMETER = lines_of_kind(LineKind.PERIMETER)
CENTER_LINES = lines_of_kind(LineKind.CENTER)

# Lines running east-west and north-south, in plotting order
EAST_WEST = [LineId.NE_NW, LineId.SE_SW, LineId.E_W]
NORTH_SOUTH = [LineId.NE_SE, LineId.NW_SW, LineId.N_S]

# Parallel lines of equal length
PARALLEL_GROUPS: List[List[LineId]] = [EAST_WEST, NORTH_SOUTH]

# (x side, y side, diagonal) triangles for the Pythagoras check
RIGHT_TRIANGLES: List[Tuple[LineId, LineId, LineId]] = [
    (LineId.NE_NW, LineId.NE_SE, LineId.NW_SE),
    (LineId.SE_SW, LineId.NW_SW, LineId.NE_SW),
]


def plot_order() -> List[LineId]:
    """Diagonals, then east-west lines, then north-south lines."""
    return DIAGONALS + EAST_WEST + NORTH_SOUTH

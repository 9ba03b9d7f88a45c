"""
Corner Propagator Module

Solves the eight worksheets in the order Moody's method requires. Lines
that meet at a plate corner (or at the midpoint of a perimeter line) must
agree there, so a solved line's value is copied into the matching end of
each line that starts or finishes at the same point.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple
import math
import logging

from ..config.models import PlateLine, LineId, LineKind, DELTA_DATUM
from .plate_errors import PropagationError, IncompleteWorksheetError
from .line_adjustment import LineAdjuster
from .worksheet_columns import line_middle


logger = logging.getLogger(__name__)


class Anchor(Enum):
    """Where on the source line a seed value is taken from."""
    START = "start"     # row 0
    END = "end"         # row N
    MIDDLE = "middle"   # middle value


@dataclass(frozen=True)
class Seed:
    """Column 6 value of a solved line, at one of its anchors."""
    source: LineId
    anchor: Anchor

    def value(self, lines: Dict[LineId, PlateLine]) -> float:
        line = lines[self.source]
        if self.anchor == Anchor.MIDDLE:
            return line_middle(line, DELTA_DATUM)
        row = 0 if self.anchor == Anchor.START else line.num_stations
        value = line.worksheet.get(DELTA_DATUM, row)
        if math.isnan(value):
            raise IncompleteWorksheetError(
                f"{line.name}: column {DELTA_DATUM} row {row} is not filled in"
            )
        return value


# (start seed, end seed) for every line that is not a diagonal
PROPAGATION_TABLE: Dict[LineId, Tuple[Seed, Seed]] = {
    # perimeter lines take the corners of the diagonals
    LineId.NE_NW: (Seed(LineId.NE_SW, Anchor.START), Seed(LineId.NW_SE, Anchor.START)),
    LineId.NE_SE: (Seed(LineId.NE_SW, Anchor.START), Seed(LineId.NW_SE, Anchor.END)),
    LineId.SE_SW: (Seed(LineId.NW_SE, Anchor.END), Seed(LineId.NE_SW, Anchor.END)),
    LineId.NW_SW: (Seed(LineId.NW_SE, Anchor.START), Seed(LineId.NE_SW, Anchor.END)),
    # center lines take the midpoints of the perimeter lines
    LineId.E_W: (Seed(LineId.NE_SE, Anchor.MIDDLE), Seed(LineId.NW_SW, Anchor.MIDDLE)),
    LineId.N_S: (Seed(LineId.NE_NW, Anchor.MIDDLE), Seed(LineId.SE_SW, Anchor.MIDDLE)),
}


class CornerPropagator:
    """Walks the propagation table: diagonals, then perimeter, then center."""

    def __init__(
        self,
        lines: Dict[LineId, PlateLine],
        table: Dict[LineId, Tuple[Seed, Seed]] = None
    ):
        """
        Initialize the propagator.

        Args:
            lines: All eight lines with columns 1-4 filled in
            table: Propagation table, PROPAGATION_TABLE if None
        """
        self.lines = lines
        self.table = table if table is not None else PROPAGATION_TABLE
        self.adjuster = LineAdjuster()
        self.solve_order: List[LineId] = []

    def solve(self) -> List[LineId]:
        """
        Fill in columns 5, 6 and 6a of every line.

        Returns:
            Line IDs in the order they were solved
        """
        self.solve_order = []
        solved = set()

        for line_id in self.lines:
            if line_id.kind == LineKind.DIAGONAL:
                self.adjuster.adjust(self.lines[line_id])
                solved.add(line_id)
                self.solve_order.append(line_id)

        pending = [line_id for line_id in LineId
                   if line_id in self.lines and line_id not in solved]

        while pending:
            ready = [
                line_id for line_id in pending
                if self._sources_solved(line_id, solved)
            ]
            if not ready:
                names = ', '.join(line_id.name for line_id in pending)
                raise PropagationError(f"No corner values available for {names}")

            for line_id in ready:
                start_seed, end_seed = self.table[line_id]
                start_value = start_seed.value(self.lines)
                end_value = end_seed.value(self.lines)
                logger.debug(
                    f"{line_id.name}: start {start_value:.3f} from "
                    f"{start_seed.source.name}, end {end_value:.3f} from "
                    f"{end_seed.source.name}"
                )
                self.adjuster.adjust(self.lines[line_id], start_value, end_value)
                solved.add(line_id)
                self.solve_order.append(line_id)
                pending.remove(line_id)

        return self.solve_order

    def _sources_solved(self, line_id: LineId, solved: set) -> bool:
        if line_id not in self.table:
            raise PropagationError(f"{line_id.name} has no propagation entry")
        return all(seed.source in solved for seed in self.table[line_id])


def propagate_corners(lines: Dict[LineId, PlateLine]) -> List[LineId]:
    """
    Convenience function to solve all lines in Moody's order.

    Args:
        lines: All eight lines with columns 1-4 filled in

    Returns:
        Line IDs in solve order
    """
    return CornerPropagator(lines).solve()

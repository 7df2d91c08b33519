"""Map normalized strike-zone clicks to zone identifiers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from contracts import (
    EdgeDirection,
    EdgeZone,
    InteriorZone,
    PitcherHandedness,
    ZoneId,
)

Point2D = Tuple[float, float]

# The 3x3 grid is the centered 60 units of a 90-unit clickable canvas.
GRID_START = 15.0 / 90.0
GRID_END = 75.0 / 90.0
# Roughly a ball radius; touching the grid still counts as inside.
EDGE_MARGIN = 0.05


@dataclass(frozen=True)
class ZoneGrid:
    grid_start: float = GRID_START
    grid_end: float = GRID_END
    margin: float = EDGE_MARGIN

    @property
    def expanded_start(self) -> float:
        return self.grid_start - self.margin

    @property
    def expanded_end(self) -> float:
        return self.grid_end + self.margin

    @property
    def span(self) -> float:
        return self.grid_end - self.grid_start


DEFAULT_GRID = ZoneGrid()

ALL_ZONES: List[ZoneId] = [
    InteriorZone(1, 1), InteriorZone(1, 2), InteriorZone(1, 3),
    InteriorZone(2, 1), InteriorZone(2, 2), InteriorZone(2, 3),
    InteriorZone(3, 1), InteriorZone(3, 2), InteriorZone(3, 3),
    EdgeZone(EdgeDirection.HIGH),
    EdgeZone(EdgeDirection.LOW),
    EdgeZone(EdgeDirection.GLOVE),
    EdgeZone(EdgeDirection.ARM),
]


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _side_edge(left_side: bool, pitcher_hand: PitcherHandedness) -> EdgeZone:
    # Catcher's view: a right-hander's arm side is on the left.
    arm_on_left = pitcher_hand == PitcherHandedness.RIGHT
    if left_side == arm_on_left:
        return EdgeZone(EdgeDirection.ARM)
    return EdgeZone(EdgeDirection.GLOVE)


def coords_to_zone(
    x: float,
    y: float,
    pitcher_hand: PitcherHandedness = PitcherHandedness.RIGHT,
    grid: ZoneGrid = DEFAULT_GRID,
) -> ZoneId:
    """Classify a normalized point (x: 0=left, y: 0=bottom) into a zone.

    Vertical edges are checked before horizontal ones, so corner points
    outside the expanded grid resolve to EDGE_HIGH or EDGE_LOW.
    """
    if y > grid.expanded_end:
        return EdgeZone(EdgeDirection.HIGH)
    if y < grid.expanded_start:
        return EdgeZone(EdgeDirection.LOW)
    if x < grid.expanded_start:
        return _side_edge(True, pitcher_hand)
    if x > grid.expanded_end:
        return _side_edge(False, pitcher_hand)

    clamped_x = _clamp(x, grid.grid_start, grid.grid_end)
    clamped_y = _clamp(y, grid.grid_start, grid.grid_end)
    grid_x = (clamped_x - grid.grid_start) / grid.span
    grid_y = (clamped_y - grid.grid_start) / grid.span

    col = int(_clamp(math.floor(grid_x * 3), 0, 2))
    # y=1 is the top but row 0 is the top row.
    row = int(_clamp(math.floor((1.0 - grid_y) * 3), 0, 2))
    return InteriorZone(row + 1, col + 1)


def zone_to_row_col(zone: ZoneId) -> Optional[Tuple[int, int]]:
    """0-indexed (row, col) for an interior zone, None otherwise."""
    if not isinstance(zone, InteriorZone):
        return None
    if not (1 <= zone.row <= 3 and 1 <= zone.col <= 3):
        return None
    return (zone.row - 1, zone.col - 1)


def row_col_to_zone(row: int, col: int) -> InteriorZone:
    """Interior zone for 0-indexed (row, col), clamped into the grid."""
    return InteriorZone(int(_clamp(row, 0, 2)) + 1, int(_clamp(col, 0, 2)) + 1)


def zone_center(zone: ZoneId, grid: ZoneGrid = DEFAULT_GRID) -> Point2D:
    """Center of a zone's cell in normalized canvas coordinates.

    Edge and unknown zones fall back to the middle of the canvas.
    """
    row_col = zone_to_row_col(zone)
    if row_col is None:
        return (0.5, 0.5)
    row, col = row_col
    cell = grid.span / 3.0
    x = grid.grid_start + (col + 0.5) * cell
    y = grid.grid_end - (row + 0.5) * cell
    return (x, y)


_ZONE_DESCRIPTIONS = {
    "Z11": "High & Inside (to righty)",
    "Z12": "High & Middle",
    "Z13": "High & Away (to righty)",
    "Z21": "Middle-Inside (to righty)",
    "Z22": "Down the Middle",
    "Z23": "Middle-Away (to righty)",
    "Z31": "Low & Inside (to righty)",
    "Z32": "Low & Middle",
    "Z33": "Low & Away (to righty)",
}

_SHORT_ZONE_LABELS = {
    "Z11": "High-In",
    "Z12": "High-Mid",
    "Z13": "High-Away",
    "Z21": "Mid-In",
    "Z22": "Middle",
    "Z23": "Mid-Away",
    "Z31": "Low-In",
    "Z32": "Low-Mid",
    "Z33": "Low-Away",
}


def zone_description(zone: ZoneId) -> str:
    return _ZONE_DESCRIPTIONS.get(zone.code, zone.code)


def short_zone_label(zone: ZoneId) -> str:
    return _SHORT_ZONE_LABELS.get(zone.code, zone.code)


__all__ = [
    "GRID_START",
    "GRID_END",
    "EDGE_MARGIN",
    "ZoneGrid",
    "DEFAULT_GRID",
    "ALL_ZONES",
    "coords_to_zone",
    "zone_to_row_col",
    "row_col_to_zone",
    "zone_center",
    "zone_description",
    "short_zone_label",
]

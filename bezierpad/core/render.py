import math
from dataclasses import dataclass
from typing import Optional

from .math import Point


@dataclass(frozen=True)
class RenderData:
    """
    Point-in-time snapshot for a renderer, everything in normalized space.
      - control_positions: control points in curve order (also the control polygon)
      - curve_positions:   sampled curve, empty with fewer than 2 control points
      - hovered_index / dragged_index: positions in control_positions, or None
    """
    control_positions: tuple[Point, ...] = ()
    curve_positions: tuple[Point, ...] = ()
    hovered_index: Optional[int] = None
    dragged_index: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return not self.control_positions

    def control_polygon(self) -> list[tuple[Point, Point]]:
        pts = self.control_positions
        return list(zip(pts, pts[1:]))


def marker_fan(center: Point, radius: float, aspect: float = 1.0, segments: int = 32) -> list[Point]:
    """
    Triangle-fan vertices of a filled circle in normalized space.

    The center comes first, then `segments + 1` rim points (the first rim
    point is repeated to close the fan). x is divided by `aspect` so the
    marker stays round on a non-square viewport.
    """
    if segments < 3:
        raise ValueError(f"segments must be at least 3, got {segments}")
    cx, cy = center
    out: list[Point] = [(cx, cy)]
    for i in range(segments + 1):
        a = 2.0 * math.pi * i / segments
        out.append((cx + radius * math.cos(a) / aspect, cy + radius * math.sin(a)))
    return out

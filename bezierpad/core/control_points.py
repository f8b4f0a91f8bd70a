from dataclasses import dataclass
from typing import Iterator, Optional

from .math import Point, dist2


@dataclass(frozen=True)
class ControlPoint:
    id: int
    position: Point


class ControlPointStore:
    """
    Ordered control points with stable ids.

      - order: insertion order, which is also the curve parametrization order
               (first point is t=0, last point is t=1).
      - ids:   assigned monotonically, never reused, never renumbered.

    Points are kept in an insertion-ordered dict keyed by id, so nothing
    outside the store ever holds a positional index.
    """

    def __init__(self, capacity: Optional[int] = None):
        self._points: dict[int, Point] = {}
        self._next_id = 0
        self.capacity = capacity

    # ---- mutation ------------------------------------------------------------
    def insert_at_end(self, position: Point) -> int:
        pid = self._next_id
        self._next_id += 1
        self._points[pid] = (float(position[0]), float(position[1]))
        return pid

    def remove(self, pid: int) -> bool:
        if pid not in self._points:
            return False
        del self._points[pid]
        return True

    def update_position(self, pid: int, position: Point) -> bool:
        if pid not in self._points:
            return False
        # assigning an existing key keeps its slot in the dict order
        self._points[pid] = (float(position[0]), float(position[1]))
        return True

    def clear(self) -> None:
        # the id counter is kept: ids stay unique for the whole session
        self._points.clear()

    # ---- queries -------------------------------------------------------------
    def find_nearest(self, position: Point, threshold: float) -> Optional[int]:
        """
        Id of the point closest to `position`, or None.

        Only a point strictly closer than `threshold` qualifies; a point at
        exactly `threshold` does not. Ties go to the earliest inserted point.
        """
        best_id = None
        best_d2 = threshold * threshold
        for pid, p in self._points.items():
            d2 = dist2(p, position)
            # strict < on both: the boundary is excluded and the first of
            # equally distant points wins
            if d2 < best_d2:
                best_d2 = d2
                best_id = pid
        return best_id

    def ordered_positions(self) -> tuple[Point, ...]:
        return tuple(self._points.values())

    def position_of(self, pid: int) -> Optional[Point]:
        return self._points.get(pid)

    def index_of(self, pid: int) -> Optional[int]:
        for i, key in enumerate(self._points):
            if key == pid:
                return i
        return None

    def ids(self) -> tuple[int, ...]:
        return tuple(self._points)

    @property
    def is_full(self) -> bool:
        return self.capacity is not None and len(self._points) >= self.capacity

    def __contains__(self, pid) -> bool:
        return pid in self._points

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[ControlPoint]:
        for pid, p in self._points.items():
            yield ControlPoint(pid, p)

    def __repr__(self):
        return f"ControlPointStore({list(self)!r})"

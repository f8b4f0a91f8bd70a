from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Optional

from .config import EditorConfig
from .control_points import ControlPointStore
from .curves import CurveEvaluator
from .events import Button, Key
from .math import CoordinateMapper, Point
from .render import RenderData

logger = logging.getLogger(__name__)


class State(StrEnum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass
class DragSession:
    """The point being moved, by id, and where the pointer last put it."""
    point_id: int
    position: Point


class EditorSession:
    """
    Interaction state machine for one editing session.

    Owns the control points, the sampled curve and the (optional) drag
    session, and is their only mutator. Every entry point processes one
    event completely (mutation, then recompute) and returns whether the
    render data changed:

      - left press on a point:        start dragging it
      - left press on empty space:    append a point
      - move while dragging:          move the point, committed immediately
      - left release:                 stop dragging (no revert)
      - right press on a point:       delete it
      - clear key press:              delete everything

    Events that find nothing to act on are no-ops, never errors.
    """

    def __init__(self, config: Optional[EditorConfig] = None):
        self.config = config or EditorConfig()
        self.config.validate()

        self.mapper = CoordinateMapper(self.config.viewport_width, self.config.viewport_height)
        self.evaluator = CurveEvaluator(self.config.sample_count)
        self.store = ControlPointStore(capacity=self.config.max_points)

        self._drag: Optional[DragSession] = None
        self._hovered_id: Optional[int] = None
        self._curve: tuple[Point, ...] = ()
        self.revision = 0

        for p in self.config.initial_points:
            self.store.insert_at_end(p)
        self._recompute()
        logger.debug(f"Session created: {self.config}")

    # ---- read-only views -----------------------------------------------------
    @property
    def state(self) -> State:
        return State.IDLE if self._drag is None else State.DRAGGING

    @property
    def drag(self) -> Optional[DragSession]:
        return self._drag

    @property
    def dragged_id(self) -> Optional[int]:
        return None if self._drag is None else self._drag.point_id

    @property
    def hovered_id(self) -> Optional[int]:
        return self._hovered_id

    @property
    def curve(self) -> tuple[Point, ...]:
        """Sampled curve in normalized space."""
        return self._curve

    def render_data(self) -> RenderData:
        return RenderData(
            control_positions=self.mapper.normalize_all(self.store.ordered_positions()),
            curve_positions=self._curve,
            hovered_index=self._index_or_none(self._hovered_id),
            dragged_index=self._index_or_none(self.dragged_id),
        )

    # ---- input entry points --------------------------------------------------
    def on_pointer_down(self, button: Button, x: float, y: float) -> bool:
        changed = self._begin_event()
        pos = (float(x), float(y))

        if button == Button.LEFT:
            if self._drag is not None:
                # press without a release in between: keep the current drag
                return changed
            pid = self.store.find_nearest(pos, self.config.hit_threshold)
            if pid is not None:
                self._drag = DragSession(pid, self.store.position_of(pid))
                logger.debug(f"Dragging point {pid}")
                return True
            if self.store.is_full:
                logger.info(f"Point limit reached ({self.store.capacity}), ignoring press at {pos}")
                return changed
            pid = self.store.insert_at_end(pos)
            self._hovered_id = pid
            logger.debug(f"Inserted point {pid} at {pos}")
            self._mutated()
            return True

        if button == Button.RIGHT:
            pid = self.store.find_nearest(pos, self.config.hit_threshold)
            if pid is None:
                return changed
            self.store.remove(pid)
            if self._hovered_id == pid:
                self._hovered_id = None
            logger.debug(f"Removed point {pid}")
            self._mutated()
            return True

        return changed

    def on_pointer_up(self, button: Button, x: float, y: float) -> bool:
        changed = self._begin_event()
        if button == Button.LEFT and self._drag is not None:
            # already committed by the last move; releasing only ends the gesture
            logger.debug(f"Released point {self._drag.point_id} at {self._drag.position}")
            self._drag = None
            return True
        return changed

    def on_pointer_move(self, x: float, y: float) -> bool:
        changed = self._begin_event()
        pos = (float(x), float(y))

        if self._drag is None:
            hovered = self.store.find_nearest(pos, self.config.hit_threshold)
            if hovered != self._hovered_id:
                self._hovered_id = hovered
                return True
            return changed

        self._drag.position = pos
        if not self.store.update_position(self._drag.point_id, pos):
            self._drop_drag()
            return True
        self._mutated()
        return True

    def on_key(self, key: Key, pressed: bool) -> bool:
        changed = self._begin_event()
        if pressed and key in self.config.clear_keys:
            self.clear()
            return True
        return changed

    def clear(self) -> None:
        n = len(self.store)
        self.store.clear()
        self._drag = None
        self._hovered_id = None
        self._mutated()
        logger.info(f"Cleared {n} control points")

    # ---- internals -----------------------------------------------------------
    def _begin_event(self) -> bool:
        """Drop references to points that no longer exist. True if anything was dropped."""
        changed = False
        if self._drag is not None and self._drag.point_id not in self.store:
            self._drop_drag()
            changed = True
        if self._hovered_id is not None and self._hovered_id not in self.store:
            self._hovered_id = None
            changed = True
        return changed

    def _drop_drag(self) -> None:
        logger.debug(f"Point {self._drag.point_id} is gone, dropping drag session")
        self._drag = None

    def _mutated(self) -> None:
        self._recompute()
        self.revision += 1

    def _recompute(self) -> None:
        samples = self.evaluator(self.store.ordered_positions())
        self._curve = self.mapper.normalize_all(samples)

    def _index_or_none(self, pid: Optional[int]) -> Optional[int]:
        return None if pid is None else self.store.index_of(pid)

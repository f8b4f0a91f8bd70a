from .math import Point, dist2, lerp, to_normalized, from_normalized, CoordinateMapper
from .control_points import ControlPoint, ControlPointStore
from .curves import de_casteljau, evaluate, CurveEvaluator
from .events import Button, Key
from .config import EditorConfig, ConfigurationError
from .render import RenderData, marker_fan
from .session import EditorSession, DragSession, State

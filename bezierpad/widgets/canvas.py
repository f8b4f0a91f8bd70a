from typing import Optional

from PySide6 import QtCore, QtGui, QtWidgets

from bezierpad.core import Button, Key, EditorSession, RenderData, marker_fan
from bezierpad.widgets.utils import normalized_polygon, qpoint_to_point

_BUTTONS = {
    QtCore.Qt.MouseButton.LeftButton: Button.LEFT,
    QtCore.Qt.MouseButton.RightButton: Button.RIGHT,
    QtCore.Qt.MouseButton.MiddleButton: Button.MIDDLE,
}

_KEYS = {
    QtCore.Qt.Key.Key_Return: Key.ENTER,
    QtCore.Qt.Key.Key_Enter: Key.ENTER,
    QtCore.Qt.Key.Key_Space: Key.SPACE,
    QtCore.Qt.Key.Key_Escape: Key.ESCAPE,
    QtCore.Qt.Key.Key_Delete: Key.DELETE,
}

BACKGROUND = QtGui.QColor.fromRgbF(0.1, 0.1, 0.1)
CONTROL_LINE = QtGui.QColor.fromRgbF(0.188, 0.360, 0.992)
CURVE = QtGui.QColor.fromRgbF(0.0, 1.0, 0.3)
CONTROL_POINT = QtGui.QColor.fromRgbF(0.839, 0.0, 0.156)
ACTIVE_POINT = QtGui.QColor.fromRgbF(1.0, 1.0, 0.0)

MARKER_RADIUS = 0.015  # normalized units


class CurveCanvasWidget(QtWidgets.QWidget):
    """
    Qt view/controller for an EditorSession.
    Translates Qt input into session events and paints the session's render data.
    The widget has the session's fixed viewport size.
    """

    pointsChanged = QtCore.Signal()  # emitted whenever an event changed the render data

    def __init__(self, session: EditorSession, parent=None):
        super().__init__(parent)
        self._session = session
        cfg = session.config
        self.setFixedSize(cfg.viewport_width, cfg.viewport_height)
        self.setMouseTracking(True)
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)
        self.setCursor(QtCore.Qt.CursorShape.CrossCursor)

        self.pointsChanged.connect(self.update)

    @property
    def session(self) -> EditorSession:
        return self._session

    # ---------- Qt events ----------
    def mousePressEvent(self, e: QtGui.QMouseEvent):
        button = _BUTTONS.get(e.button())
        if button is None:
            return
        x, y = qpoint_to_point(e.position())
        self._notify(self._session.on_pointer_down(button, x, y))

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        button = _BUTTONS.get(e.button())
        if button is None:
            return
        x, y = qpoint_to_point(e.position())
        self._notify(self._session.on_pointer_up(button, x, y))

    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        x, y = qpoint_to_point(e.position())
        self._notify(self._session.on_pointer_move(x, y))

    def keyPressEvent(self, e: QtGui.QKeyEvent):
        if e.isAutoRepeat():
            return
        self._notify(self._session.on_key(_KEYS.get(e.key(), Key.OTHER), True))

    def keyReleaseEvent(self, e: QtGui.QKeyEvent):
        if e.isAutoRepeat():
            return
        self._notify(self._session.on_key(_KEYS.get(e.key(), Key.OTHER), False))

    def _notify(self, changed: bool):
        s = self._session
        self.setCursor(
            QtCore.Qt.CursorShape.SizeAllCursor if s.hovered_id is not None or s.dragged_id is not None
            else QtCore.Qt.CursorShape.CrossCursor
        )
        if changed:
            self.pointsChanged.emit()

    # ---------- painting ----------
    def _draw_polygon(self, painter: QtGui.QPainter, data: RenderData):
        if len(data.control_positions) < 2:
            return
        painter.setPen(QtGui.QPen(CONTROL_LINE, 1.0))
        painter.drawPolyline(normalized_polygon(self._session.mapper, data.control_positions))

    def _draw_curve(self, painter: QtGui.QPainter, data: RenderData):
        if not data.curve_positions:
            return
        painter.setPen(QtGui.QPen(CURVE, 2.0))
        painter.drawPolyline(normalized_polygon(self._session.mapper, data.curve_positions))

    def _draw_control(self, painter: QtGui.QPainter, data: RenderData):
        mapper = self._session.mapper
        active: set[Optional[int]] = {data.hovered_index, data.dragged_index}
        painter.setPen(QtCore.Qt.PenStyle.NoPen)
        for i, p in enumerate(data.control_positions):
            painter.setBrush(ACTIVE_POINT if i in active else CONTROL_POINT)
            # skip the fan center, the rim alone is the polygon outline
            rim = marker_fan(p, MARKER_RADIUS, mapper.aspect)[1:]
            painter.drawPolygon(normalized_polygon(mapper, rim))

    def paintEvent(self, _):
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        painter.fillRect(self.rect(), BACKGROUND)

        data = self._session.render_data()
        if not data.is_empty:
            self._draw_polygon(painter, data)
            self._draw_curve(painter, data)
            self._draw_control(painter, data)

        painter.end()

    # ---------- helpers ----------
    def clear(self):
        self._session.clear()
        self.pointsChanged.emit()


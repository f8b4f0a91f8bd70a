from PySide6 import QtCore, QtGui

from bezierpad.core import Point, CoordinateMapper


def qpoint_to_point(p: QtCore.QPointF) -> Point:
    return float(p.x()), float(p.y())

def point_to_qpoint(p: Point) -> QtCore.QPointF:
    return QtCore.QPointF(p[0], p[1])

def normalized_to_qpoint(mapper: CoordinateMapper, p: Point) -> QtCore.QPointF:
    return point_to_qpoint(mapper.from_normalized(p))

def normalized_polygon(mapper: CoordinateMapper, pts) -> QtGui.QPolygonF:
    return QtGui.QPolygonF([normalized_to_qpoint(mapper, p) for p in pts])

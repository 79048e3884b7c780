"""
Qt Utilities
Conversion of ticket paths and styles to Qt painting objects.
"""
from __future__ import annotations

import logging
from typing import Iterable

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPainterPath, QPen

from ticketshape.model.container import Color, ContentLayer, FillLayer, Layer, LineCap, LineJoin, StrokeLayer, StrokeStyle
from ticketshape.model.geometry_primitives import ArcTo, LineTo, MoveTo, Path, Point, QuadCurveTo, Rect

logger = logging.getLogger(__name__)

_CAP_STYLES = {
    LineCap.BUTT: Qt.PenCapStyle.FlatCap,
    LineCap.ROUND: Qt.PenCapStyle.RoundCap,
    LineCap.SQUARE: Qt.PenCapStyle.SquareCap,
}

_JOIN_STYLES = {
    LineJoin.MITER: Qt.PenJoinStyle.MiterJoin,
    LineJoin.ROUND: Qt.PenJoinStyle.RoundJoin,
    LineJoin.BEVEL: Qt.PenJoinStyle.BevelJoin,
}


class QtUtils:
    @staticmethod
    def to_qpointf(point: Point) -> QPointF:
        return QPointF(point.x, point.y)

    @staticmethod
    def to_qrectf(rect: Rect) -> QRectF:
        return QRectF(rect.x, rect.y, rect.width, rect.height)

    @staticmethod
    def from_qrectf(rect: QRectF) -> Rect:
        return Rect(rect.x(), rect.y(), rect.width(), rect.height())

    @staticmethod
    def to_qcolor(color: Color) -> QColor:
        return QColor.fromRgbF(color.red, color.green, color.blue, color.alpha)

    @staticmethod
    def to_qpainter_path(path: Path) -> QPainterPath:
        """
        Converts a ticket Path into a QPainterPath.

        Qt measures arc angles counter-clockwise on screen, i.e. with the
        opposite sign of the y-down angles used by ArcTo.
        """
        qpath = QPainterPath()
        for element in path.elements:
            if isinstance(element, MoveTo):
                qpath.moveTo(QtUtils.to_qpointf(element.to))
            elif isinstance(element, LineTo):
                qpath.lineTo(QtUtils.to_qpointf(element.to))
            elif isinstance(element, QuadCurveTo):
                qpath.quadTo(QtUtils.to_qpointf(element.control), QtUtils.to_qpointf(element.to))
            elif isinstance(element, ArcTo):
                if qpath.isEmpty():
                    qpath.moveTo(QtUtils.to_qpointf(element.start_point))
                r = element.radius
                bounds = QRectF(element.center.x - r, element.center.y - r, 2 * r, 2 * r)
                qpath.arcTo(bounds, -element.start_angle, -element.sweep)
            else:
                raise TypeError(f"Unsupported path element: {type(element).__name__}")
        if path.closed:
            qpath.closeSubpath()
        # Setting the fill rule on an empty path inserts a move-to at the origin
        qpath.setFillRule(Qt.FillRule.WindingFill)
        return qpath

    @staticmethod
    def to_qpen(color: Color, stroke: StrokeStyle) -> QPen:
        """
        Builds a QPen for the given stroke style.

        Qt expresses dash lengths in units of the pen width, so the absolute
        dash pattern is divided by the line width. A zero width is a cosmetic
        one-pixel pen, which takes the lengths as they are.
        """
        pen = QPen(QtUtils.to_qcolor(color))
        pen.setWidthF(stroke.line_width)
        pen.setCapStyle(_CAP_STYLES[stroke.line_cap])
        pen.setJoinStyle(_JOIN_STYLES[stroke.line_join])

        if stroke.is_dashed:
            unit = stroke.line_width if stroke.line_width > 0 else 1.0
            dash = list(stroke.dash)
            # Qt needs an even number of entries
            if len(dash) % 2:
                dash = dash * 2
            pen.setDashPattern([d / unit for d in dash])
            pen.setDashOffset(stroke.dash_phase / unit)
        return pen

    @staticmethod
    def paint_layers(painter: QPainter, layers: Iterable[Layer]) -> None:
        """
        Paints composed ticket layers back to front.

        Content layers are painted only when their content is callable as
        `content(painter, rect)`; other content is left to the host.
        """
        painter.save()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        try:
            for layer in layers:
                if isinstance(layer, FillLayer):
                    painter.fillPath(
                        QtUtils.to_qpainter_path(layer.path),
                        QBrush(QtUtils.to_qcolor(layer.color))
                    )
                elif isinstance(layer, StrokeLayer):
                    painter.strokePath(
                        QtUtils.to_qpainter_path(layer.path),
                        QtUtils.to_qpen(layer.color, layer.stroke)
                    )
                elif isinstance(layer, ContentLayer):
                    if callable(layer.content):
                        layer.content(painter, layer.rect)
                    else:
                        logger.debug(f"Content layer {type(layer.content).__name__} left to the host.")
                else:
                    raise TypeError(f"Unsupported layer: {type(layer).__name__}")
        finally:
            painter.restore()

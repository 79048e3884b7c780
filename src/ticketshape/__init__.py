"""
ticketshape: path construction for ticket-shaped outlines.

The outline is a rounded rectangle with inward semi-circular notches on the
left and right edges; a dashed separator line sits just above the notches.
"""
from ticketshape.model.container import (
    Color,
    ContentLayer,
    FillLayer,
    Layer,
    LineCap,
    LineJoin,
    StrokeLayer,
    StrokeStyle,
    TicketContainer,
    compose,
)
from ticketshape.model.geometry_primitives import ArcTo, LineTo, MoveTo, Path, Point, QuadCurveTo, Rect, Vector
from ticketshape.model.shapes import TicketDashedLine, TicketShape, build_line_path, build_outline_path
from ticketshape.model.svg import path_to_svg_d, render_svg

__all__ = [
    "ArcTo",
    "Color",
    "ContentLayer",
    "FillLayer",
    "Layer",
    "LineCap",
    "LineJoin",
    "LineTo",
    "MoveTo",
    "Path",
    "Point",
    "QuadCurveTo",
    "Rect",
    "StrokeLayer",
    "StrokeStyle",
    "TicketContainer",
    "TicketDashedLine",
    "TicketShape",
    "Vector",
    "build_line_path",
    "build_outline_path",
    "compose",
    "path_to_svg_d",
    "render_svg",
]

"""Ticket outline and separator line path builders."""
from __future__ import annotations

from dataclasses import dataclass

from ticketshape.config import (
    DEFAULT_CORNER_RADIUS,
    DEFAULT_CUTOUT_RADIUS,
    DEFAULT_CUTOUT_Y_POSITION,
    DEFAULT_LINE_OFFSET,
    DEFAULT_LINE_Y_POSITION,
)
from ticketshape.model.geometry_primitives import Path, Point, Rect


# ------------------------------------------------------------------------------
# Separator line
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class TicketDashedLine:
    """
    A horizontal separator positioned above the ticket cutouts.

    `y_position` is a fraction of the rectangle height (0.0 top, 1.0 bottom)
    and should match the cutout position of the outline. `offset` is
    subtracted from the resulting y, so positive values move the line up.
    """
    y_position: float = DEFAULT_LINE_Y_POSITION
    offset: float = DEFAULT_LINE_OFFSET

    def path(self, rect: Rect) -> Path:
        """The line spans the full width of `rect`."""
        path = Path()
        y = rect.min_y + rect.height * self.y_position - self.offset
        path.move_to(Point(rect.min_x, y))
        path.line_to(Point(rect.max_x, y))
        return path


# ------------------------------------------------------------------------------
# Ticket outline
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class TicketShape:
    """
    A rounded rectangle with two inward semi-circular notches on its sides.

    Values are not clamped; radii larger than half the rectangle or positions
    outside [0, 1] simply produce overlapping geometry.
    """
    cutout_y_position: float = DEFAULT_CUTOUT_Y_POSITION
    cutout_radius: float = DEFAULT_CUTOUT_RADIUS
    corner_radius: float = DEFAULT_CORNER_RADIUS

    def path(self, rect: Rect) -> Path:
        """Clockwise outline starting at the top edge, closed implicitly."""
        path = Path()
        r = self.corner_radius
        cr = self.cutout_radius
        min_x, min_y, max_x, max_y = rect.min_x, rect.min_y, rect.max_x, rect.max_y

        cutout_y = min_y + rect.height * self.cutout_y_position

        # Top edge with top-right corner
        path.move_to(Point(min_x + r, min_y))
        path.line_to(Point(max_x - r, min_y))
        path.quad_to(Point(max_x, min_y + r), control=Point(max_x, min_y))

        # Right edge with the inward notch
        path.line_to(Point(max_x, cutout_y - cr))
        path.add_arc(Point(max_x, cutout_y), cr, -90.0, 90.0, clockwise=True)
        path.line_to(Point(max_x, max_y - r))

        # Bottom-right corner, bottom edge, bottom-left corner
        path.quad_to(Point(max_x - r, max_y), control=Point(max_x, max_y))
        path.line_to(Point(min_x + r, max_y))
        path.quad_to(Point(min_x, max_y - r), control=Point(min_x, max_y))

        # Left edge with the mirrored notch
        path.line_to(Point(min_x, cutout_y + cr))
        path.add_arc(Point(min_x, cutout_y), cr, 90.0, -90.0, clockwise=True)
        path.line_to(Point(min_x, min_y + r))

        # Top-left corner back to the start
        path.quad_to(Point(min_x + r, min_y), control=Point(min_x, min_y))

        return path


def build_outline_path(rect: Rect, config: TicketShape = TicketShape()) -> Path:
    return config.path(rect)


def build_line_path(rect: Rect, config: TicketDashedLine = TicketDashedLine()) -> Path:
    return config.path(rect)

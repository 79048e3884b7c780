"""
Ticket Container (Composition)
==============================
Combines the ticket outline, the dashed separator and arbitrary host content
into an ordered list of drawable layers.

Classes:
    Color: RGBA color value.
    StrokeStyle: Line width and dash pattern for stroking.
    TicketContainer: Full style configuration of a rendered ticket.
    FillLayer, StrokeLayer, ContentLayer: Back-to-front draw instructions.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum
import logging
import string
from typing import Any, ClassVar, List, Tuple, Union

from ticketshape.config import (
    DEFAULT_CORNER_RADIUS,
    DEFAULT_CUTOUT_RADIUS,
    DEFAULT_CUTOUT_Y_POSITION,
    DEFAULT_DASH,
    DEFAULT_FILL_RGBA,
    DEFAULT_LINE_OFFSET,
    DEFAULT_LINE_RGBA,
    DEFAULT_LINE_WIDTH,
)
from ticketshape.model.geometry_primitives import Path, Rect
from ticketshape.model.shapes import TicketDashedLine, TicketShape

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# Style values
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class Color:
    """An RGBA color with channels in [0, 1]."""
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    GRAY: ClassVar[Color]
    CLEAR: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    ORANGE: ClassVar[Color]
    PURPLE: ClassVar[Color]

    @classmethod
    def from_rgb255(cls, red: int, green: int, blue: int, alpha: float = 1.0) -> Color:
        return cls(red / 255, green / 255, blue / 255, alpha)

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """
        Parse '#RRGGBB' or '#RRGGBBAA' (the leading '#' is optional).

        Raises:
            ValueError: If the string is not a 6 or 8 digit hex color.
        """
        digits = value.strip().removeprefix("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Expected '#RRGGBB' or '#RRGGBBAA', got {value!r}.")
        # int(..., 16) alone would also accept signs, underscores and whitespace
        if not all(c in string.hexdigits for c in digits):
            raise ValueError(f"Invalid hex digits in color {value!r}.")
        channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        alpha = channels[3] / 255 if len(channels) == 4 else 1.0
        return cls.from_rgb255(channels[0], channels[1], channels[2], alpha)

    def with_opacity(self, alpha: float) -> Color:
        return replace(self, alpha=alpha)

    def to_rgba255(self) -> Tuple[int, int, int, int]:
        return tuple(_to_byte(c) for c in (self.red, self.green, self.blue, self.alpha))

    def to_hex(self, include_alpha: bool = False) -> str:
        r, g, b, a = self.to_rgba255()
        text = f"#{r:02x}{g:02x}{b:02x}"
        return f"{text}{a:02x}" if include_alpha else text


def _to_byte(channel: float) -> int:
    return max(0, min(255, round(channel * 255)))


Color.WHITE = Color(1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0)
Color.GRAY = Color(0.5, 0.5, 0.5)
Color.CLEAR = Color(0.0, 0.0, 0.0, 0.0)
Color.RED = Color(1.0, 0.0, 0.0)
Color.GREEN = Color(0.0, 0.5, 0.0)
Color.BLUE = Color(0.0, 0.0, 1.0)
Color.ORANGE = Color(1.0, 0.5, 0.0)
Color.PURPLE = Color(0.5, 0.0, 0.5)


class LineCap(StrEnum):
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


class LineJoin(StrEnum):
    MITER = "miter"
    ROUND = "round"
    BEVEL = "bevel"


@dataclass(frozen=True)
class StrokeStyle:
    """Width and dash pattern used to stroke a path."""
    line_width: float = 1.0
    dash: Tuple[float, ...] = ()
    dash_phase: float = 0.0
    line_cap: LineCap = LineCap.BUTT
    line_join: LineJoin = LineJoin.MITER

    def __post_init__(self) -> None:
        # Keep the style hashable when a list is passed
        object.__setattr__(self, "dash", tuple(self.dash))

    @property
    def is_dashed(self) -> bool:
        return any(d > 0 for d in self.dash)


# ------------------------------------------------------------------------------
# Layers
# ------------------------------------------------------------------------------
# Layers are plain records: they hold a mutable Path and are not hashable.
@dataclass
class FillLayer:
    path: Path
    color: Color


@dataclass
class StrokeLayer:
    path: Path
    color: Color
    stroke: StrokeStyle


@dataclass
class ContentLayer:
    """Host content drawn on top of the ticket background, not clipped to it."""
    content: Any
    rect: Rect


Layer = Union[FillLayer, StrokeLayer, ContentLayer]


# ------------------------------------------------------------------------------
# Container
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class TicketContainer:
    """
    Style configuration of a ticket: fill, separator line and content.

    Every option can be overridden after construction with one of the
    `with_*` methods, which return a new container and leave this one as is.
    """
    fill_color: Color = field(default_factory=lambda: Color(*DEFAULT_FILL_RGBA))
    dashed_line_color: Color = field(default_factory=lambda: Color(*DEFAULT_LINE_RGBA))
    cutout_y_position: float = DEFAULT_CUTOUT_Y_POSITION
    cutout_radius: float = DEFAULT_CUTOUT_RADIUS
    corner_radius: float = DEFAULT_CORNER_RADIUS
    dashed_line_offset: float = DEFAULT_LINE_OFFSET
    dashed_line_stroke: StrokeStyle = field(
        default_factory=lambda: StrokeStyle(line_width=DEFAULT_LINE_WIDTH, dash=DEFAULT_DASH)
    )
    show_dashed_line: bool = True
    content: Any = None

    @property
    def outline_shape(self) -> TicketShape:
        return TicketShape(
            cutout_y_position=self.cutout_y_position,
            cutout_radius=self.cutout_radius,
            corner_radius=self.corner_radius
        )

    @property
    def dashed_line(self) -> TicketDashedLine:
        return TicketDashedLine(y_position=self.cutout_y_position, offset=self.dashed_line_offset)

    # ---- non-mutating updates ----

    def with_fill_color(self, color: Color) -> TicketContainer:
        return replace(self, fill_color=color)

    def with_dashed_line_color(self, color: Color) -> TicketContainer:
        return replace(self, dashed_line_color=color)

    def with_dashed_line_style(self, style: StrokeStyle) -> TicketContainer:
        return replace(self, dashed_line_stroke=style)

    def with_dashed_line(self, show: bool) -> TicketContainer:
        return replace(self, show_dashed_line=show)

    def with_cutout_y_position(self, position: float) -> TicketContainer:
        return replace(self, cutout_y_position=position)

    def with_cutout_radius(self, radius: float) -> TicketContainer:
        return replace(self, cutout_radius=radius)

    def with_corner_radius(self, radius: float) -> TicketContainer:
        return replace(self, corner_radius=radius)

    def with_dashed_line_offset(self, offset: float) -> TicketContainer:
        return replace(self, dashed_line_offset=offset)

    def with_content(self, content: Any) -> TicketContainer:
        return replace(self, content=content)

    def layers(self, rect: Rect) -> List[Layer]:
        return compose(self, rect)


def compose(container: TicketContainer, rect: Rect) -> List[Layer]:
    """
    Build the draw layers for one render pass, back to front.

    1. The outline filled with `fill_color`.
    2. The separator stroked with the dash style, if `show_dashed_line`.
    3. The host content, if any.
    """
    layers: List[Layer] = [FillLayer(container.outline_shape.path(rect), container.fill_color)]

    if container.show_dashed_line:
        layers.append(StrokeLayer(
            path=container.dashed_line.path(rect),
            color=container.dashed_line_color,
            stroke=container.dashed_line_stroke
        ))

    if container.content is not None:
        layers.append(ContentLayer(content=container.content, rect=rect))

    logger.debug(f"Composed {len(layers)} ticket layers for {rect}")
    return layers

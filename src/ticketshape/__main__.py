"""Command-line interface: export a ticket outline as SVG."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from ticketshape.config import (
    DEFAULT_CORNER_RADIUS,
    DEFAULT_CUTOUT_RADIUS,
    DEFAULT_CUTOUT_Y_POSITION,
    DEFAULT_DASH,
    DEFAULT_LINE_OFFSET,
    DEFAULT_LINE_WIDTH,
)
from ticketshape.logging_config import setup_logging
from ticketshape.model.container import Color, StrokeStyle, TicketContainer
from ticketshape.model.geometry_primitives import Rect
from ticketshape.model.svg import render_svg

logger = logging.getLogger("ticketshape.cli")


def _color(value: str) -> Color:
    try:
        return Color.from_hex(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _dash(value: str) -> tuple[float, ...]:
    try:
        return tuple(float(v) for v in value.split(",") if v.strip())
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid dash pattern {value!r}") from e


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="ticketshape", description="Export a ticket outline as SVG.")
    ap.add_argument("--out", help="Output SVG path (default: stdout)")

    # Rectangle
    ap.add_argument("--width", type=float, default=200.0)
    ap.add_argument("--height", type=float, default=300.0)
    ap.add_argument("--padding", type=float, default=0.0)

    # Outline
    ap.add_argument("--cutout-y", type=float, default=DEFAULT_CUTOUT_Y_POSITION)
    ap.add_argument("--cutout-radius", type=float, default=DEFAULT_CUTOUT_RADIUS)
    ap.add_argument("--corner-radius", type=float, default=DEFAULT_CORNER_RADIUS)

    # Separator
    ap.add_argument("--line-offset", type=float, default=DEFAULT_LINE_OFFSET)
    ap.add_argument("--line-width", type=float, default=DEFAULT_LINE_WIDTH)
    ap.add_argument("--dash", type=_dash, default=DEFAULT_DASH, help="Comma separated, e.g. 4,4")
    ap.add_argument("--no-dashed-line", action="store_true")

    # Colors
    ap.add_argument("--fill", type=_color, default=None, help="#RRGGBB or #RRGGBBAA")
    ap.add_argument("--line-color", type=_color, default=None, help="#RRGGBB or #RRGGBBAA")

    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    container = TicketContainer(
        cutout_y_position=args.cutout_y,
        cutout_radius=args.cutout_radius,
        corner_radius=args.corner_radius,
        dashed_line_offset=args.line_offset,
        dashed_line_stroke=StrokeStyle(line_width=args.line_width, dash=args.dash),
        show_dashed_line=not args.no_dashed_line,
    )
    if args.fill is not None:
        container = container.with_fill_color(args.fill)
    if args.line_color is not None:
        container = container.with_dashed_line_color(args.line_color)

    svg = render_svg(container, Rect(0.0, 0.0, args.width, args.height), padding=args.padding)

    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(svg)
        logger.info(f"Wrote ticket SVG to: {args.out}")
    else:
        sys.stdout.write(svg)
    return 0


if __name__ == "__main__":
    sys.exit(main())

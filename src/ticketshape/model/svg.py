"""
SVG export of ticket paths and composed ticket layers.
"""
from __future__ import annotations

import logging
from typing import List

from ticketshape.model.container import ContentLayer, FillLayer, StrokeLayer, TicketContainer, compose
from ticketshape.model.geometry_primitives import ArcTo, LineTo, MoveTo, Path, QuadCurveTo, Rect

logger = logging.getLogger(__name__)


def fmt(n: float) -> str:
    text = f"{n:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def path_to_svg_d(path: Path) -> str:
    """
    Convert a path to SVG path data using M, L, Q and A commands.

    Arcs are written in endpoint form. A straight segment is inserted when the
    current point is not already at the arc start.
    """
    d: List[str] = []
    current = None
    for element in path.elements:
        if isinstance(element, MoveTo):
            d.append(f"M {fmt(element.to.x)} {fmt(element.to.y)}")
            current = element.to
        elif isinstance(element, LineTo):
            d.append(f"L {fmt(element.to.x)} {fmt(element.to.y)}")
            current = element.to
        elif isinstance(element, QuadCurveTo):
            c, p = element.control, element.to
            d.append(f"Q {fmt(c.x)} {fmt(c.y)} {fmt(p.x)} {fmt(p.y)}")
            current = p
        elif isinstance(element, ArcTo):
            start, end = element.start_point, element.end_point
            if current is None:
                d.append(f"M {fmt(start.x)} {fmt(start.y)}")
            elif current.distance_to(start) > 1e-9:
                d.append(f"L {fmt(start.x)} {fmt(start.y)}")
            sweep = element.sweep
            if sweep != 0:
                large_arc = 1 if abs(sweep) > 180 else 0
                sweep_flag = 1 if sweep > 0 else 0
                r = fmt(abs(element.radius))
                d.append(f"A {r} {r} 0 {large_arc} {sweep_flag} {fmt(end.x)} {fmt(end.y)}")
            current = end
        else:
            raise TypeError(f"Unsupported path element: {type(element).__name__}")
    if path.closed:
        d.append("Z")
    return " ".join(d)


def svg_header(view: Rect) -> str:
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="{fmt(view.width)}" height="{fmt(view.height)}" viewBox="{fmt(view.x)} {fmt(view.y)} {fmt(view.width)} {fmt(view.height)}">
"""


def svg_footer() -> str:
    return "</svg>\n"


def render_svg(container: TicketContainer, rect: Rect, *, padding: float = 0.0) -> str:
    """
    Render a ticket as a standalone SVG document.

    Content layers are skipped; SVG output carries only the ticket background.
    """
    view = Rect(rect.x - padding, rect.y - padding, rect.width + 2 * padding, rect.height + 2 * padding)
    out = [svg_header(view)]
    for layer in compose(container, rect):
        if isinstance(layer, FillLayer):
            r, g, b, _ = layer.color.to_rgba255()
            out.append(
                f'  <path id="ticket" d="{path_to_svg_d(layer.path)}" '
                f'fill="rgb({r},{g},{b})" fill-opacity="{fmt(layer.color.alpha)}" stroke="none"/>\n'
            )
        elif isinstance(layer, StrokeLayer):
            r, g, b, _ = layer.color.to_rgba255()
            stroke = layer.stroke
            attrs = [
                f'stroke="rgb({r},{g},{b})"',
                f'stroke-opacity="{fmt(layer.color.alpha)}"',
                f'stroke-width="{fmt(stroke.line_width)}"',
                f'stroke-linecap="{stroke.line_cap}"',
                f'stroke-linejoin="{stroke.line_join}"',
            ]
            if stroke.is_dashed:
                attrs.append(f'stroke-dasharray="{" ".join(fmt(v) for v in stroke.dash)}"')
                attrs.append(f'stroke-dashoffset="{fmt(stroke.dash_phase)}"')
            out.append(f'  <path id="separator" d="{path_to_svg_d(layer.path)}" fill="none" {" ".join(attrs)}/>\n')
        elif isinstance(layer, ContentLayer):
            logger.debug("Skipping content layer in SVG output.")
    out.append(svg_footer())
    return "".join(out)

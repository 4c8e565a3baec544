# DviForge - A DVI Special to SVG Converter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging

from ..core import types as ps
from ..core.tokenizer import Operands
from ..core.xml_node import create_element, format_number
from .color_ops import fill_color
from .graphics_state import dashed_style, dotted_style, stroke_attributes

logger = logging.getLogger(__name__)


def fp(ctxt: ps.Context, gstate: ps.GraphicsState, operands: Operands) -> None:
    """
    - **fp** -


    flushes the path: draws solid lines through all points recorded by **pa**
    since the last terminating directive. If the first and last points
    coincide the path is closed and, when a fill intensity was set, filled.
    A path of a single point is drawn as a dot of pen-width diameter.

    The recorded points and the fill intensity are consumed, the pen width is
    kept.

    **Errors**:     none
    **See Also**:   **ip**, **da**, **dt**, **pa**, **pn**
    """

    draw_lines(ctxt, gstate, stroke=True, fill=gstate.fill_set)


def ip(ctxt: ps.Context, gstate: ps.GraphicsState, operands: Operands) -> None:
    """
    - **ip** -


    like **fp** but draws no outline: the closed path is only filled, with
    the current fill intensity. Without a fill intensity nothing is drawn.

    **Errors**:     none
    **See Also**:   **fp**
    """

    draw_lines(ctxt, gstate, stroke=False, fill=gstate.fill_set)


def da(ctxt: ps.Context, gstate: ps.GraphicsState, operands: Operands) -> None:
    """
    [n] **da** -


    like **fp** but draws dashed lines, with dashes and gaps n inches long
    (default 1).

    **Errors**:     none
    **See Also**:   **dt**, **fp**
    """

    draw_lines(ctxt, gstate, stroke=True, fill=gstate.fill_set, dash=dashed_style(operands))


def dt(ctxt: ps.Context, gstate: ps.GraphicsState, operands: Operands) -> None:
    """
    [n [m]] **dt** -


    like **fp** but draws dotted lines: dots one pen width long, m inches
    apart. m defaults to n, n defaults to 1.

    **Errors**:     none
    **See Also**:   **da**, **fp**
    """

    draw_lines(ctxt, gstate, stroke=True, fill=gstate.fill_set, dash=dotted_style(operands))


def _closed_loop(points: list) -> list | None:
    """Points of the polygon when points form a closed loop, else None."""
    loop = list(points)
    while len(loop) > 1 and loop[-1] == loop[-2]:
        loop.pop()
    if len(loop) > 2 and loop[0] == loop[-1]:
        loop.pop()
        return loop
    return None


def _fill_attribute(fill: bool, gray_level: float) -> str:
    if not fill:
        return "none"
    return fill_color(gray_level).svg_color_string()


def draw_lines(ctxt: ps.Context, gstate: ps.GraphicsState, stroke: bool, fill: bool,
               dash: ps.DashStyle = ps.SOLID) -> None:
    """
    Turn the recorded points into a circle, polyline or polygon element.

    Args:
        ctxt: page context receiving the element and its extent
        gstate: TPic graphics state; its points and gray level are consumed
        stroke: draw the outline (black, pen width, dash)
        fill: fill closed paths with the gray level
        dash: dash style of the outline
    """
    points = list(gstate.points)
    loop = _closed_loop(points)
    dx, dy = ctxt.get_x(), ctxt.get_y()
    pen_width = gstate.pen_width
    stroke = stroke and pen_width > 0
    elem = None
    box = ps.BoundingBox()

    if len(set(points)) == 1:
        if pen_width > 0:
            x = points[0][0] * ps.MI2BP + dx
            y = points[0][1] * ps.MI2BP + dy
            attrs = {"cx": x, "cy": y, "r": pen_width / 2.0}
            if gstate.fill_set:
                color = fill_color(gstate.gray_level)
                if color != ps.BLACK:
                    attrs["fill"] = color.svg_color_string()
            elem = create_element("circle", attrs, ctxt.precision)
            box.embed_point(x, y, pen_width / 2.0)

    elif len(points) > 1:
        if loop is not None:
            points = loop
            tag = "polygon"
            attrs = {"fill": _fill_attribute(fill, gstate.gray_level)}
        else:
            tag = "polyline"
            fill = False
            attrs = {"fill": "none", "stroke-linecap": ps.LINE_CAP_ROUND}

        if stroke:
            attrs.update(stroke_attributes(dash, pen_width, ctxt.precision))

        if stroke or fill:
            coords = []
            for px, py in points:
                x = px * ps.MI2BP + dx
                y = py * ps.MI2BP + dy
                coords.append(f"{format_number(x, ctxt.precision)},{format_number(y, ctxt.precision)}")
                box.embed_point(x, y)
            attrs["points"] = " ".join(coords)
            elem = create_element(tag, attrs, ctxt.precision)

    if elem is not None:
        logger.debug("tpic: %s with %d point(s)", elem.tag, len(points))
        ctxt.append_to_page(elem)
        ctxt.embed(box)

    gstate.clear_path()
    gstate.reset_fill()

# DviForge - A DVI Special to SVG Converter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
import math

from ..core import types as ps
from ..core.tokenizer import Operands
from ..core.xml_node import create_element, format_number
from .color_ops import fill_color
from .graphics_state import stroke_attributes

logger = logging.getLogger(__name__)


def pa(ctxt: ps.Context, gstate: ps.GraphicsState, operands: Operands) -> None:
    """
    x y **pa** -


    adds the point (x, y), given in milli-inches relative to the current
    position, to the path. The points are drawn by the next terminating
    directive (**fp**, **ip**, **da**, **dt** or **sp**) in the order they
    were added.

    **Errors**:     **stackunderflow**
    **See Also**:   **fp**, **sp**
    """

    gstate.points.append((operands[0], operands[1]))


def ar(ctxt: ps.Context, gstate: ps.GraphicsState, operands: Operands) -> None:
    """
    cx cy rx ry a0 a1 **ar** -


    draws the outline of an elliptical arc centered at (cx, cy) with radii
    rx and ry (milli-inches). The arc starts at angle a0 and ends at angle
    a1, both in radians and measured counterclockwise in the TPic coordinate
    system. If the arc spans a full revolution (or more), the complete
    ellipse is drawn.

    **Errors**:     **stackunderflow**
    **See Also**:   **ia**, **pn**
    """

    draw_arc(ctxt, gstate, operands, fill=False)


def ia(ctxt: ps.Context, gstate: ps.GraphicsState, operands: Operands) -> None:
    """
    cx cy rx ry a0 a1 **ia** -


    like **ar** but fills the arc area with the current fill intensity
    (black if none was set) instead of drawing its outline.

    **Errors**:     **stackunderflow**
    **See Also**:   **ar**, **sh**
    """

    draw_arc(ctxt, gstate, operands, fill=True)


def _normalize_angle(angle: float) -> float:
    angle = math.fmod(angle, ps.PI2)
    if angle < 0:
        angle += ps.PI2
    return angle


def arc_sweep(a0: float, a1: float):
    """
    Return the counterclockwise sweep from a0 to a1 in [0, 2pi), or None if
    the two angles describe a full revolution.
    """
    if abs(a1 - a0) >= ps.PI2 - ps.ARC_EPSILON:
        return None
    delta = _normalize_angle(a1 - a0)
    if delta < ps.ARC_EPSILON or delta > ps.PI2 - ps.ARC_EPSILON:
        return None
    return delta


def draw_arc(ctxt: ps.Context, gstate: ps.GraphicsState, operands: Operands, fill: bool) -> None:
    cx = operands[0] * ps.MI2BP + ctxt.get_x()
    cy = operands[1] * ps.MI2BP + ctxt.get_y()
    rx = operands[2] * ps.MI2BP
    ry = operands[3] * ps.MI2BP
    a0 = operands[4]
    a1 = operands[5]
    pen_width = gstate.pen_width

    if fill:
        color = fill_color(gstate.gray_level) if gstate.fill_set else ps.BLACK
        attrs = {"fill": color.svg_color_string()}
    elif pen_width > 0:
        attrs = {"fill": "none"}
        attrs.update(stroke_attributes(ps.SOLID, pen_width, ctxt.precision))
    else:
        gstate.reset_fill()
        return

    delta = arc_sweep(a0, a1)
    if delta is None:
        if abs(rx - ry) < ps.ARC_EPSILON:
            attrs.update(cx=cx, cy=cy, r=rx)
            elem = create_element("circle", attrs, ctxt.precision)
        else:
            attrs.update(cx=cx, cy=cy, rx=rx, ry=ry)
            elem = create_element("ellipse", attrs, ctxt.precision)
        box = ps.BoundingBox(cx - rx, cy - ry, cx + rx, cy + ry)
    else:
        x0 = cx + rx * math.cos(a0)
        y0 = cy + ry * math.sin(a0)
        x1 = cx + rx * math.cos(a1)
        y1 = cy + ry * math.sin(a1)
        path = ps.GraphicsPath()
        path.moveto(x0, y0)
        # TPic angles run counterclockwise with the y axis pointing down,
        # which is the positive-angle direction of SVG
        path.arcto(rx, ry, delta > math.pi, True, x1, y1)
        path.add_arc_extent(cx, cy, rx, ry, a0, delta)
        attrs["d"] = path.svg_data(lambda v: format_number(v, ctxt.precision))
        if not fill:
            attrs["stroke-linecap"] = ps.LINE_CAP_ROUND
        elem = create_element("path", attrs, ctxt.precision)
        box = path.bbox()

    logger.debug("tpic: %s", elem.tag)
    ctxt.append_to_page(elem)
    ctxt.embed(box)
    gstate.reset_fill()

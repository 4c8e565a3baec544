# DviForge - A DVI Special to SVG Converter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
TPic spline synthesis.

A spline through the points P0 ... Pn-1 is drawn as a chain of quadratic
Bezier segments: each interior point Pi becomes the control point of a curve
running from the midpoint of (Pi-1, Pi) to the midpoint of (Pi, Pi+1). The
first and last half edges are straight lines, or the closing segment when the
path is closed. Adjacent curves share their tangent at the midpoints, so the
chain is smooth; this is also why most curves can be written with the SVG
shorthand "T" command.
"""

import logging

import numpy as np

from ..core import types as ps
from ..core.tokenizer import Operands
from ..core.xml_node import create_element, format_number
from .graphics_state import spline_style, stroke_attributes
from .painting import draw_lines

logger = logging.getLogger(__name__)


def sp(ctxt: ps.Context, gstate: ps.GraphicsState, operands: Operands) -> None:
    """
    [n] **sp** -


    draws a smooth curve through the points recorded by **pa**. With n > 0
    the curve is dashed with n-inch dashes, with n < 0 it is dotted with dots
    |n| inches apart, otherwise solid. If the first and last points coincide
    the curve is closed. The curve is never filled.

    Two points give a straight line. The recorded points and the fill
    intensity are consumed, the pen width is kept.

    **Errors**:     none
    **See Also**:   **pa**, **fp**, **da**, **dt**
    """

    dash = spline_style(operands)
    if len(gstate.points) < 3:
        draw_lines(ctxt, gstate, stroke=True, fill=False, dash=dash)
        return

    if gstate.pen_width > 0:
        points = np.asarray(gstate.points, dtype=np.float64) * ps.MI2BP
        points += (ctxt.get_x(), ctxt.get_y())
        closed = bool(np.array_equal(points[0], points[-1]))
        path = build_spline_path(points, closed)

        attrs = {"d": path.svg_data(lambda v: format_number(v, ctxt.precision)), "fill": "none"}
        attrs.update(stroke_attributes(dash, gstate.pen_width, ctxt.precision))
        elem = create_element("path", attrs, ctxt.precision)
        logger.debug("tpic: spline through %d points%s", len(points), " (closed)" if closed else "")
        ctxt.append_to_page(elem)
        ctxt.embed(path.bbox())

    gstate.clear_path()
    gstate.reset_fill()


def build_spline_path(points: np.ndarray, closed: bool) -> ps.GraphicsPath:
    """
    Build the quadratic spline path through points (an n x 2 array, n >= 3).

    Args:
        points: path points in output units
        closed: end with a close marker instead of a line to the last point

    Returns:
        GraphicsPath with the segments M P0, L M0, Q Pi Mi (or T Mi) ..., L Pn-1 | Z
    """
    mids = (points[:-1] + points[1:]) / 2
    path = ps.GraphicsPath()
    path.moveto(*points[0])
    path.lineto(*mids[0])
    for i in range(1, len(points) - 1):
        path.quadto(*points[i], *mids[i])
    if closed:
        path.closepath()
    else:
        path.lineto(*points[-1])
    return path

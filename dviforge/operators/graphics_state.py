# DviForge - A DVI Special to SVG Converter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from ..core import types as ps
from ..core.tokenizer import Operands
from ..core.xml_node import format_number


def pn(ctxt: ps.Context, gstate: ps.GraphicsState, operands: Operands) -> None:
    """
    w **pn** -


    sets the pen width to w milli-inches. The pen width is used for all
    outlines drawn by subsequent directives, and as the diameter of dots
    drawn from single-point paths. It is the only part of the graphics state
    that survives a terminating directive.

    Negative widths are clamped to 0.

    **Errors**:     **stackunderflow**
    **See Also**:   **fp**, **da**, **dt**, **sp**, **ar**
    """

    gstate.pen_width = max(0.0, operands[0] * ps.MI2BP)


# Dash patterns
#
# "da n"  dashes n inches long, separated by gaps of the same length
# "dt n"  dots one pen width long, n inches apart
# "sp n"  n > 0 dashed as "da", n < 0 dotted with 1pt dots, n = 0 solid


def dashed_style(operands: Operands) -> ps.DashStyle:
    return ps.DashStyle.dashed(ps.PPI * operands.get(0, 1.0))


def dotted_style(operands: Operands) -> ps.DashStyle:
    # the second argument is optional and defaults to the first one
    length = operands.get(1, operands.get(0, 1.0))
    return ps.DashStyle.dotted(ps.PPI * length)


def spline_style(operands: Operands) -> ps.DashStyle:
    n = operands.get(0, 0.0)
    if n > 0:
        return ps.DashStyle.dashed(ps.PPI * n)
    if n < 0:
        return ps.DashStyle.dotted(ps.PPI * -n, dot_length=1.0)
    return ps.SOLID


def stroke_dasharray(dash: ps.DashStyle, pen_width: float) -> list[float] | None:
    """Return the SVG dash array values for dash, None for solid lines."""
    if dash.kind == ps.DASH_DASHED:
        return [dash.length]
    if dash.kind == ps.DASH_DOTTED:
        dot = pen_width if dash.dot_length is None else dash.dot_length
        return [dot, dash.length]
    return None


def stroke_attributes(dash: ps.DashStyle, pen_width: float, precision: int = ps.DECIMAL_PLACES) -> dict:
    """Attributes of a black outline of the given width and dash style."""
    attrs = {"stroke": ps.STROKE_COLOR, "stroke-width": pen_width}
    dasharray = stroke_dasharray(dash, pen_width)
    if dasharray:
        attrs["stroke-dasharray"] = " ".join(format_number(v, precision) for v in dasharray)
    return attrs

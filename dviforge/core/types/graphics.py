# DviForge - A DVI Special to SVG Converter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
DviForge Types Graphics Classes Module

This module contains the graphics types shared by the special handlers and
the SVG device: the TPic graphics state, dash styles, colors, bounding boxes
and the path command list used to build SVG path data.
"""

import math
from typing import Optional, Union

from .constants import (
    DASH_DASHED, DASH_DOTTED, DASH_SOLID, DEFAULT_PEN_WIDTH, GRAY_UNSET, PI2
)

Number = Union[int, float]


# GSTATE
class GraphicsState:
    """
    TPic graphics state.

    The pen width survives terminating directives, the gray level and the
    recorded points describe only the directives since the last terminator.
    Points are stored in milli-inches exactly as given by "pa".
    """

    def __init__(self) -> None:
        self.pen_width = DEFAULT_PEN_WIDTH  # PS points
        self.gray_level = GRAY_UNSET       # 0 = white, 1 = black, < 0 = unset
        self.points = []                   # list of (x, y) tuples

    @property
    def fill_set(self) -> bool:
        return self.gray_level >= 0

    def clear_path(self) -> None:
        self.points = []

    def reset_fill(self) -> None:
        self.gray_level = GRAY_UNSET

    def reset(self) -> None:
        """Return to the initial state, used at the end of a page."""
        self.pen_width = DEFAULT_PEN_WIDTH
        self.gray_level = GRAY_UNSET
        self.points = []


class DashStyle:
    """
    Stroke pattern of a single terminating directive.

    Dashed lines use equal dash and gap lengths. Dotted lines draw dots of
    length dot_length (the current pen width if None) separated by length.
    """
    __slots__ = ('kind', 'length', 'dot_length')

    def __init__(self, kind: int = DASH_SOLID, length: float = 0.0,
                 dot_length: Optional[float] = None) -> None:
        self.kind = kind
        self.length = length
        self.dot_length = dot_length

    @classmethod
    def dashed(cls, length: float) -> "DashStyle":
        return cls(DASH_DASHED, length)

    @classmethod
    def dotted(cls, length: float, dot_length: Optional[float] = None) -> "DashStyle":
        return cls(DASH_DOTTED, length, dot_length)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DashStyle):
            return NotImplemented
        return (self.kind, self.length, self.dot_length) == (other.kind, other.length, other.dot_length)

    def __repr__(self) -> str:
        return f"DashStyle(kind={self.kind}, length={self.length}, dot_length={self.dot_length})"


SOLID = DashStyle()


class Color:
    """RGB color with 8-bit components."""
    __slots__ = ('r', 'g', 'b')

    def __init__(self, r: int = 0, g: int = 0, b: int = 0) -> None:
        self.r = r
        self.g = g
        self.b = b

    @classmethod
    def from_gray(cls, gray: float) -> "Color":
        """Create a gray color from an intensity (0 = black, 1 = white)."""
        v = int(max(0.0, min(1.0, gray)) * 255 + 0.5)
        return cls(v, v, v)

    def svg_color_string(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self.r, self.g, self.b) == (other.r, other.g, other.b)

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))

    def __repr__(self) -> str:
        return f"Color({self.svg_color_string()})"


BLACK = Color(0, 0, 0)


class BoundingBox:
    """Axis-aligned extent, empty until the first embed."""

    def __init__(self, min_x: Optional[Number] = None, min_y: Optional[Number] = None,
                 max_x: Optional[Number] = None, max_y: Optional[Number] = None) -> None:
        self.valid = min_x is not None
        if self.valid:
            self.min_x = min(min_x, max_x)
            self.min_y = min(min_y, max_y)
            self.max_x = max(min_x, max_x)
            self.max_y = max(min_y, max_y)
        else:
            self.min_x = self.min_y = self.max_x = self.max_y = 0.0

    def clear(self) -> None:
        self.valid = False
        self.min_x = self.min_y = self.max_x = self.max_y = 0.0

    def embed(self, other: "BoundingBox") -> None:
        if not other.valid:
            return
        if not self.valid:
            self.min_x, self.min_y = other.min_x, other.min_y
            self.max_x, self.max_y = other.max_x, other.max_y
            self.valid = True
            return
        self.min_x = min(self.min_x, other.min_x)
        self.min_y = min(self.min_y, other.min_y)
        self.max_x = max(self.max_x, other.max_x)
        self.max_y = max(self.max_y, other.max_y)

    def embed_point(self, x: Number, y: Number, radius: Number = 0) -> None:
        self.embed(BoundingBox(x - radius, y - radius, x + radius, y + radius))

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def to_svg_viewbox(self, fmt=str) -> str:
        return " ".join(fmt(v) for v in (self.min_x, self.min_y, self.width, self.height))

    def __repr__(self) -> str:
        if not self.valid:
            return "BoundingBox()"
        return f"BoundingBox({self.min_x}, {self.min_y}, {self.max_x}, {self.max_y})"


# Path Elements
class Point(object):
    __slots__ = ('x', 'y')

    def __init__(self, x: Number, y: Number) -> None:
        self.x = x
        self.y = y

    def reflect(self, center: "Point") -> "Point":
        """Mirror this point about center."""
        return Point(2 * center.x - self.x, 2 * center.y - self.y)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y})"


class MoveTo(object):
    CMD = "M"

    def __init__(self, p: Point) -> None:
        self.p = p

    def params(self):
        return (self.p.x, self.p.y)


class LineTo(object):
    CMD = "L"

    def __init__(self, p: Point) -> None:
        self.p = p

    def params(self):
        return (self.p.x, self.p.y)


class QuadTo(object):
    CMD = "Q"

    def __init__(self, p1: Point, p2: Point) -> None:
        self.p1 = p1  # control point
        self.p2 = p2  # end point

    def params(self):
        return (self.p1.x, self.p1.y, self.p2.x, self.p2.y)


class SmoothQuadTo(object):
    """Quadratic segment whose control point is the reflection of the previous one."""
    CMD = "T"

    def __init__(self, p1: Point, p2: Point) -> None:
        self.p1 = p1  # implied control point, kept for the next reflection
        self.p2 = p2

    def params(self):
        return (self.p2.x, self.p2.y)


class ArcTo(object):
    CMD = "A"

    def __init__(self, rx: Number, ry: Number, large_arc: bool, sweep: bool, p: Point,
                 rotation: Number = 0) -> None:
        self.rx = rx
        self.ry = ry
        self.rotation = rotation
        self.large_arc = large_arc
        self.sweep = sweep
        self.p = p

    def params(self):
        return (self.rx, self.ry, self.rotation, int(self.large_arc), int(self.sweep), self.p.x, self.p.y)


class ClosePath(object):
    CMD = "Z"

    def params(self):
        return ()


def _quad_extreme_params(p0: float, p1: float, p2: float):
    """Yield the parameter t in (0,1) where one coordinate of a quadratic Bezier peaks."""
    denom = p0 - 2 * p1 + p2
    if denom != 0:
        t = (p0 - p1) / denom
        if 0 < t < 1:
            yield t


def _quad_point(p0: Point, p1: Point, p2: Point, t: float) -> Point:
    s = 1 - t
    return Point(s * s * p0.x + 2 * t * s * p1.x + t * t * p2.x,
                 s * s * p0.y + 2 * t * s * p1.y + t * t * p2.y)


class GraphicsPath(list):
    """
    A list of path commands that serializes to SVG path data.

    quadto() picks the shorthand form itself whenever the control point is
    exactly the reflection of the previous quadratic control point.
    """

    def __init__(self) -> None:
        super().__init__()
        self.arcs = []  # (cx, cy, rx, ry, a0, delta) for bounding boxes

    def moveto(self, x: Number, y: Number) -> None:
        self.append(MoveTo(Point(x, y)))

    def lineto(self, x: Number, y: Number) -> None:
        self.append(LineTo(Point(x, y)))

    def quadto(self, cx: Number, cy: Number, x: Number, y: Number) -> None:
        control = Point(cx, cy)
        end = Point(x, y)
        if self and isinstance(self[-1], (QuadTo, SmoothQuadTo)):
            if self[-1].p1.reflect(self[-1].p2) == control:
                self.append(SmoothQuadTo(control, end))
                return
        self.append(QuadTo(control, end))

    def arcto(self, rx: Number, ry: Number, large_arc: bool, sweep: bool, x: Number, y: Number) -> None:
        self.append(ArcTo(rx, ry, large_arc, sweep, Point(x, y)))

    def closepath(self) -> None:
        self.append(ClosePath())

    def svg_data(self, fmt=str) -> str:
        """Serialize to the compact absolute-command SVG syntax ("M0 0L36 36Q...")."""
        return "".join(cmd.CMD + " ".join(fmt(v) for v in cmd.params()) for cmd in self)

    def add_arc_extent(self, cx: float, cy: float, rx: float, ry: float, a0: float, delta: float) -> None:
        """Record the ellipse parameters of an ArcTo so bbox() can include its extremes."""
        self.arcs.append((cx, cy, rx, ry, a0, delta))

    def bbox(self) -> BoundingBox:
        box = BoundingBox()
        current = None
        for cmd in self:
            if isinstance(cmd, ClosePath):
                continue
            if isinstance(cmd, (QuadTo, SmoothQuadTo)) and current is not None:
                for t in (*_quad_extreme_params(current.x, cmd.p1.x, cmd.p2.x),
                          *_quad_extreme_params(current.y, cmd.p1.y, cmd.p2.y)):
                    p = _quad_point(current, cmd.p1, cmd.p2, t)
                    box.embed_point(p.x, p.y)
            current = cmd.p if hasattr(cmd, 'p') else cmd.p2
            box.embed_point(current.x, current.y)
        for cx, cy, rx, ry, a0, delta in self.arcs:
            box.embed(arc_bbox(cx, cy, rx, ry, a0, delta))
        return box


def arc_bbox(cx: float, cy: float, rx: float, ry: float, a0: float, delta: float) -> BoundingBox:
    """Bounding box of the elliptical arc starting at angle a0 and sweeping delta radians."""
    box = BoundingBox()
    box.embed_point(cx + rx * math.cos(a0), cy + ry * math.sin(a0))
    box.embed_point(cx + rx * math.cos(a0 + delta), cy + ry * math.sin(a0 + delta))
    start = a0 % PI2
    for k in range(4):
        angle = k * math.pi / 2
        if (angle - start) % PI2 <= delta:
            box.embed_point(cx + rx * math.cos(angle), cy + ry * math.sin(angle))
    return box

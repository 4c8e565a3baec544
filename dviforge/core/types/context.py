# DviForge - A DVI Special to SVG Converter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
DviForge Types Context Module

This module contains the page context the special handlers draw into. It
plays the part of the DVI reader's action object: it owns the page group
elements of the output document, the page bounding box, the cursor position,
the current color and transformation, and the log of special errors.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Any, Dict, Optional

from .constants import DECIMAL_PLACES
from .graphics import BLACK, BoundingBox, Color

logger = logging.getLogger(__name__)

IDENTITY_MATRIX = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


class Context:
    """
    Output and cursor state of one conversion job.

    A context is not shared between jobs; every job (and every thread that
    converts pages) creates its own.
    """

    def __init__(self, system_params: Optional[Dict[str, Any]] = None) -> None:
        self.system_params = system_params or {}
        self.precision = self.system_params.get("Precision", DECIMAL_PLACES)

        self.special_manager = None  # set by create_context

        self.pages = []          # list of (page group element, BoundingBox)
        self.page = None         # current page group element
        self.bbox = BoundingBox()
        self.page_count = 0

        self.x = 0.0             # cursor position in PS points
        self.y = 0.0
        self.color = BLACK
        self.matrix = IDENTITY_MATRIX

        self.errors = []         # SpecialError instances recorded by error.e()

    # cursor and style hooks

    def get_x(self) -> float:
        return self.x

    def get_y(self) -> float:
        return self.y

    def set_x(self, x: float) -> None:
        self.x = float(x)

    def set_y(self, y: float) -> None:
        self.y = float(y)

    def get_color(self) -> Color:
        return self.color

    def set_color(self, color: Color) -> None:
        self.color = color

    def get_matrix(self):
        return self.matrix

    # page lifecycle

    def begin_page(self) -> ET.Element:
        """Open a new page group and clear the bounding box."""
        if self.page is not None:
            self.end_page()
        self.page_count += 1
        self.page = ET.Element("g")
        self.page.set("id", f"page{self.page_count}")
        self.bbox = BoundingBox()
        self.x = self.y = 0.0
        self.pages.append((self.page, self.bbox))
        return self.page

    def end_page(self) -> None:
        if self.page is None:
            return
        if self.special_manager is not None:
            self.special_manager.notify_end_page(self)
        if self.matrix != IDENTITY_MATRIX:
            # late import: xml_node imports the types package
            from ..xml_node import format_number
            values = " ".join(format_number(v, self.precision) for v in self.matrix)
            self.page.set("transform", f"matrix({values})")
        logger.debug("page %d finished with %d elements", self.page_count, len(self.page))
        self.page = None

    # drawing sinks

    def append_to_page(self, node: ET.Element) -> None:
        if self.page is None:
            self.begin_page()
        self.page.append(node)

    def embed(self, box: BoundingBox) -> None:
        self.bbox.embed(box)

    def embed_point(self, x: float, y: float, radius: float = 0) -> None:
        self.bbox.embed_point(x, y, radius)

    def clear(self) -> None:
        """Drop the content of the current page, keeping the page open."""
        if self.page is not None:
            for child in list(self.page):
                self.page.remove(child)
        self.bbox.clear()

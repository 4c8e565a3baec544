# DviForge - A DVI Special to SVG Converter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
XML element helpers for the SVG output.

Elements are plain xml.etree.ElementTree elements. Numeric attribute values
are converted to text when they are set, using a fixed number of fractional
digits with trailing zeros removed. The serializer writes attributes in
sorted order and quotes them with apostrophes so that the output of a page
is stable and byte comparable. ET.tostring keeps insertion order and uses
double quotes, so it cannot give that guarantee.
"""

from __future__ import annotations

import numbers
import xml.etree.ElementTree as ET
from typing import Any, Mapping
from xml.sax.saxutils import escape

from .types.constants import DECIMAL_PLACES

_ATTR_ENTITIES = {"'": "&apos;", "\n": "&#10;", "\t": "&#9;"}


def format_number(value: float, places: int = DECIMAL_PLACES) -> str:
    """
    Format a number with at most ``places`` fractional digits.

    >>> format_number(50.911688245431421)
    '50.91'
    >>> format_number(72.0)
    '72'
    """
    if isinstance(value, numbers.Integral):
        return str(int(value))
    s = f"{float(value):.{places}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s == "-0":
        s = "0"
    return s


def format_attribute(value: Any, places: int = DECIMAL_PLACES) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, numbers.Real):
        return format_number(value, places)
    return str(value)


def create_element(tag: str, attrs: Mapping[str, Any] | None = None,
                   precision: int = DECIMAL_PLACES) -> ET.Element:
    """Create an element, formatting numeric attribute values with precision digits."""
    elem = ET.Element(tag)
    if attrs:
        for name, value in attrs.items():
            if value is None:
                continue
            elem.set(name, format_attribute(value, precision))
    return elem


def _write(node: ET.Element, parts: list[str]) -> None:
    parts.append("<" + node.tag)
    for name in sorted(node.attrib):
        parts.append(f" {name}='{escape(node.attrib[name], _ATTR_ENTITIES)}'")
    if len(node) or node.text:
        parts.append(">")
        if node.text:
            parts.append(escape(node.text))
        for child in node:
            _write(child, parts)
        parts.append(f"</{node.tag}>")
    else:
        parts.append("/>")
    if node.tail:
        parts.append(escape(node.tail))


def serialize(node: ET.Element) -> str:
    """Serialize node and its descendants."""
    parts: list[str] = []
    _write(node, parts)
    return "".join(parts)


def serialize_children(node: ET.Element) -> str:
    """Serialize the children of node without node itself."""
    parts: list[str] = []
    for child in node:
        _write(child, parts)
    return "".join(parts)

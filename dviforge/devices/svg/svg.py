# DviForge - A DVI Special to SVG Converter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
SVG Output Device

Collects the page groups of a context into one SVG document and writes it
to the output directory. The document's viewBox is the union of the
bounding boxes of the written pages; width and height are given in pt.
"""

import logging
import os
import xml.etree.ElementTree as ET

from ...core import types as ps
from ...core.xml_node import create_element, format_number, serialize

logger = logging.getLogger(__name__)

# SVG namespace
_SVG_NS = 'http://www.w3.org/2000/svg'
_SVG_VERSION = '1.1'
_XML_DECLARATION = "<?xml version='1.0' encoding='UTF-8'?>\n"


def selected_pages(ctxt: ps.Context) -> list:
    """Return the (group, bbox) pairs of the pages passing the page filter."""
    page_filter = ctxt.system_params.get("PageFilter")
    if not page_filter:
        return list(ctxt.pages)
    return [page for num, page in enumerate(ctxt.pages, start=1) if num in page_filter]


def build_document(ctxt: ps.Context) -> ET.Element:
    """
    Build the SVG root element holding the selected page groups.

    An open page is finished first so that the handlers see its end.
    """
    ctxt.end_page()
    pages = selected_pages(ctxt)

    bbox = ps.BoundingBox()
    for _, page_bbox in pages:
        bbox.embed(page_bbox)

    def fmt(v):
        return format_number(v, ctxt.precision)

    root = create_element("svg", {
        "xmlns": _SVG_NS,
        "version": _SVG_VERSION,
        "width": f"{fmt(bbox.width)}pt",
        "height": f"{fmt(bbox.height)}pt",
        "viewBox": bbox.to_svg_viewbox(fmt),
    }, ctxt.precision)
    for group, _ in pages:
        root.append(group)
    return root


def to_svg_string(ctxt: ps.Context) -> str:
    root = build_document(ctxt)
    ET.indent(root)
    return _XML_DECLARATION + serialize(root) + "\n"


def write_document(ctxt: ps.Context, base_name: str = None) -> str:
    """
    Write the document to <OutputDirectory>/<base_name>.svg.

    Args:
        ctxt: context holding the converted pages
        base_name: output file name without extension, defaults to the
            OutputBaseName system parameter

    Returns:
        str: path of the written file
    """
    if base_name is None:
        base_name = ctxt.system_params.get("OutputBaseName", "page")
    output_dir = ctxt.system_params.get("OutputDirectory", ps.OUTPUT_DIRECTORY)
    os.makedirs(output_dir, exist_ok=True)

    output_file = os.path.join(output_dir, f"{base_name}.svg")
    svg_text = to_svg_string(ctxt)
    with open(output_file, 'w', encoding='utf-8') as f:
        f.write(svg_text)
    logger.info("wrote %s (%d page(s))", output_file, len(selected_pages(ctxt)))
    return output_file

# DviForge - A DVI Special to SVG Converter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CLI argument parsing for DviForge.

Handles command-line argument definition, parsing, page range specifications,
and output file naming.
"""

from __future__ import annotations

import argparse
import os
from importlib import metadata

from .core.types.constants import DECIMAL_PLACES, OUTPUT_DIRECTORY


def _parse_page_ranges(spec: str) -> set[int]:
    """Parse a page range specification into a set of page numbers.

    Supports single pages (``3``), ranges (``1-5``), and comma-separated
    combinations (``1-3,7,10-12``).  Page numbers are 1-based.

    Args:
        spec: Page range string, e.g. ``"1-5,8,10-12"``

    Returns:
        Set of integer page numbers.

    Raises:
        ValueError: If the specification is malformed.
    """
    pages: set[int] = set()
    for part in spec.split(","):
        part = part.strip()
        if not part:
            continue
        first, sep, last = part.partition("-")
        try:
            start = int(first)
            end = int(last) if sep else start
        except ValueError:
            raise ValueError(f"Invalid page range: '{part}'") from None
        if start < 1 or end < 1:
            raise ValueError(f"Page numbers must be positive: '{part}'")
        if start > end:
            raise ValueError(f"Invalid page range (start > end): '{part}'")
        pages.update(range(start, end + 1))
    if not pages:
        raise ValueError("Empty page range specification")
    return pages


def get_output_base_name(outputfile: str | None, inputfile: str | None) -> str:
    """
    Derive the output base name of one input.

    Args:
        outputfile: The -o argument value (or None)
        inputfile: Input file name, "-" for stdin (or None)

    Returns:
        Base name for the output file (without extension)
    """
    if outputfile:
        return os.path.splitext(os.path.basename(outputfile))[0]
    if inputfile and inputfile != "-":
        return os.path.splitext(os.path.basename(inputfile))[0]
    if inputfile == "-":
        return "stdin"
    return "page"


def _get_version() -> str:
    try:
        return metadata.version("dviforge")
    except metadata.PackageNotFoundError:
        return "unknown"


def build_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the DviForge argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="dviforge",
        description="DviForge - converts TPic special scripts to SVG",
        epilog="Use '-' as input file to read a script from stdin.",
    )

    parser.add_argument(
        "-V", "--version", action="version",
        version=f"DviForge {_get_version()}"
    )
    parser.add_argument("inputfiles", nargs="+", help="special script files to convert (each to its own SVG file)")
    parser.add_argument(
        "-o", "--output", dest="outputfile", help="Specify output filename (single input only)"
    )
    parser.add_argument(
        "--output-dir", dest="output_dir", default=OUTPUT_DIRECTORY,
        help=f"Specify output directory (default: {OUTPUT_DIRECTORY})"
    )
    parser.add_argument(
        "--precision", type=int, default=DECIMAL_PLACES,
        help=f"Number of fractional digits of SVG numbers (default: {DECIMAL_PLACES})"
    )
    parser.add_argument(
        "--no-specials", dest="no_specials", nargs="?", const="*", default=None,
        metavar="LIST",
        help="Ignore the specials of the listed handlers, or all specials if no list is given"
    )
    parser.add_argument(
        "--pages",
        help="Page range to output (e.g., 1-5, 3, 1-3,7,10-12)"
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true", help="Only report errors"
    )

    return parser

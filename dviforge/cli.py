#!/usr/bin/env python3
# DviForge - A DVI Special to SVG Converter
# Copyright (c) 2025-2026 Scott Bowman
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
DviForge - DVI Special to SVG Converter

This is the main entry point for DviForge. It reads "special scripts", text
files that list the \\special bodies of a DVI file one per line, runs them
through the special handlers and writes one SVG document per script.

Script Format:
    pa 1000 0           a special, here a TPic directive
    % comment           ignored, as are blank lines
    %%Page              starts a new page
    %%MoveTo 72 36      moves the cursor to (72pt, 36pt)

Usage:
    dviforge drawing.tps
    dviforge -o figure.svg --output-dir out drawing.tps
    cat drawing.tps | dviforge -
"""

import logging
import sys
from typing import Iterable

from .cli_args import _parse_page_ranges, build_argument_parser, get_output_base_name
from .core import types as ps
from .core.context_init import create_context, init_system_params
from .devices.svg import svg as svg_device

logger = logging.getLogger(__name__)

PAGE_COMMAND = "%%Page"
MOVETO_COMMAND = "%%MoveTo"


def run_script(ctxt: ps.Context, lines: Iterable[str]) -> int:
    """
    Execute the lines of a special script.

    Args:
        ctxt: context receiving the pages
        lines: script lines

    Returns:
        int: number of specials that no handler took
    """
    unhandled = 0
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue

        words = line.split()
        if words[0] == PAGE_COMMAND:
            ctxt.begin_page()
            continue
        if line.startswith("%") and words[0] != MOVETO_COMMAND:
            continue

        # content before the first %%Page goes to an implicit first page
        if ctxt.page is None:
            ctxt.begin_page()

        if words[0] == MOVETO_COMMAND:
            try:
                x, y = (float(v) for v in words[1:3])
            except ValueError:
                logger.warning("line %d: %s expects two numbers", lineno, MOVETO_COMMAND)
                continue
            ctxt.set_x(x)
            ctxt.set_y(y)
        elif ctxt.special_manager is not None:
            if not ctxt.special_manager.process(line, ctxt):
                unhandled += 1
    return unhandled


def convert(system_params: dict, lines: Iterable[str]) -> ps.Context:
    """Run one script in a fresh context and write its SVG document."""
    ctxt, err = create_context(system_params)
    if ctxt is None:
        raise ValueError(err)
    unhandled = run_script(ctxt, lines)
    svg_device.write_document(ctxt)
    if unhandled:
        logger.info("%d special(s) ignored", unhandled)
    if ctxt.errors:
        logger.warning("%d special(s) failed", len(ctxt.errors))
    return ctxt


def _configure_logging(args) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def main(argv=None) -> int:
    """
    Main entry point for DviForge.

    Returns:
        Exit code: 0 for success, 1 for error
    """

    parser = build_argument_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    # Validate --pages format early
    page_filter = None
    if args.pages:
        try:
            page_filter = _parse_page_ranges(args.pages)
        except ValueError as e:
            print(f"DviForge Error: {e}", file=sys.stderr)
            print("Expected format: 1-5, 3, 1-3,7,10-12", file=sys.stderr)
            return 1

    if args.outputfile and len(args.inputfiles) > 1:
        print("DviForge Error: -o can only be used with a single input file.", file=sys.stderr)
        return 1

    for inputfile in args.inputfiles:
        system_params = init_system_params(
            Precision=args.precision,
            IgnoreSpecials=args.no_specials,
            OutputDirectory=args.output_dir,
            OutputBaseName=get_output_base_name(args.outputfile, inputfile),
            PageFilter=page_filter,
        )
        try:
            if inputfile == "-":
                convert(system_params, sys.stdin)
            else:
                with open(inputfile, "r", encoding="utf-8") as f:
                    convert(system_params, f)
        except (OSError, ValueError) as e:
            print(f"DviForge Error: {inputfile}: {e}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

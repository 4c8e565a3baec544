# DviForge - A DVI Special to SVG Converter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Conversion context initialization.

Creates the system parameters of a conversion job and the page context
with its special manager and handlers.
"""

from typing import Any, Dict, Optional, Tuple

from . import types as ps
from .special_manager import SpecialManager, ignores_all
from .tpic_handler import TpicSpecialHandler


def init_system_params(**overrides: Any) -> Dict[str, Any]:
    """
    Initialize the system parameters of a conversion job.

    Keyword arguments replace the defaults of the same name.

    Returns:
        Dict[str, Any]: System parameters dictionary containing:
            - Precision: number of fractional digits of SVG numbers
            - IgnoreSpecials: names of special handlers to disable, "*" for all
            - OutputDirectory: directory the SVG files are written to
            - OutputBaseName: file name (without extension) for stdin input
            - PageFilter: set of 1-based page numbers to keep, None for all
    """

    params = {
        "Precision": ps.DECIMAL_PLACES,
        "IgnoreSpecials": None,
        "OutputDirectory": ps.OUTPUT_DIRECTORY,
        "OutputBaseName": "page",
        "PageFilter": None,
    }
    unknown = set(overrides) - set(params)
    if unknown:
        raise KeyError(f"unknown system parameter(s): {', '.join(sorted(unknown))}")
    params.update(overrides)
    return params


def create_context(
    system_params: Dict[str, Any],
) -> Tuple[Optional[ps.Context], Optional[str]]:
    """
    Create the page context of a conversion job.

    Args:
        system_params: Dictionary from init_system_params()

    Returns:
        Tuple[Optional[ps.Context], Optional[str]]: Success/failure result
            - Success: (Context object, None)
            - Failure: (None, error_description)
    """

    precision = system_params.get("Precision", ps.DECIMAL_PLACES)
    if not isinstance(precision, int) or isinstance(precision, bool) or not 0 <= precision <= 15:
        return None, f"invalid precision {precision!r}, expected an integer between 0 and 15"

    ctxt = ps.Context(system_params)

    ignorelist = system_params.get("IgnoreSpecials")
    if not ignores_all(ignorelist):
        manager = SpecialManager()
        manager.register_handler(TpicSpecialHandler(), ignorelist)
        ctxt.special_manager = manager

    return ctxt, None

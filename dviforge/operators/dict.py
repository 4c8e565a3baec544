# DviForge - A DVI Special to SVG Converter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from typing import Callable, Dict, Tuple

from . import color_ops as ps_color_ops
from . import graphics_state as ps_gstate
from . import painting as ps_painting
from . import path as ps_path
from . import spline as ps_spline

# command code -> (operator, number of required numeric arguments)
OperatorTable = Dict[str, Tuple[Callable, int]]


def create_tpic_dict() -> OperatorTable:
    ops = [
        # graphics state
        ("pn", ps_gstate.pn, 1),
        # path construction
        ("pa", ps_path.pa, 2),
        # fill intensity
        ("bk", ps_color_ops.bk, 0),
        ("wh", ps_color_ops.wh, 0),
        ("sh", ps_color_ops.sh, 0),
        ("tx", ps_color_ops.tx, 0),
        # painting
        ("fp", ps_painting.fp, 0),
        ("ip", ps_painting.ip, 0),
        ("da", ps_painting.da, 0),
        ("dt", ps_painting.dt, 0),
        ("sp", ps_spline.sp, 0),
        # arcs and ellipses
        ("ar", ps_path.ar, 6),
        ("ia", ps_path.ia, 6),
    ]

    return {name: (func, nargs) for name, func, nargs in ops}

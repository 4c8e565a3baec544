# DviForge - A DVI Special to SVG Converter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
TPic special handler.

TPic specials are two-letter drawing directives (``pn``, ``pa``, ``fp``,
``sp``, ``ar``, ...). The handler owns the TPic graphics state of one
conversion job and runs each directive through the operator table built by
``operators.dict``.
"""

from __future__ import annotations

import logging

from . import error as ps_error
from . import types as ps
from .special_manager import SpecialHandler
from .tokenizer import is_command_code, tokenize_operands
from ..operators.dict import create_tpic_dict

logger = logging.getLogger(__name__)


class TpicSpecialHandler(SpecialHandler):

    name = "tpic"

    def __init__(self) -> None:
        self.gstate = ps.GraphicsState()
        self._ops = create_tpic_dict()

    def prefixes(self) -> tuple[str, ...]:
        return tuple(self._ops)

    @property
    def pen_width(self) -> float:
        return self.gstate.pen_width

    @property
    def gray_level(self) -> float:
        return self.gstate.gray_level

    def process(self, prefix: str, params: str, ctxt: ps.Context) -> bool:
        """
        Execute the TPic directive prefix with parameter text params.

        Returns False for anything that is not a TPic directive, so other
        handlers may try it. A directive with too few numeric arguments is
        reported through the context's error log and leaves the graphics
        state untouched; it still counts as handled.
        """
        if not is_command_code(prefix) or prefix not in self._ops:
            return False

        func, nargs = self._ops[prefix]
        operands = tokenize_operands(params)
        if len(operands) < nargs:
            ps_error.e(ctxt, ps_error.STACKUNDERFLOW, prefix)
            return True

        logger.debug("tpic: %s %s", prefix, operands.numbers)
        func(ctxt, self.gstate, operands)
        return True

    def notify_end_page(self, ctxt: ps.Context) -> None:
        self.gstate.reset()

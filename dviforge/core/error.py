# DviForge - A DVI Special to SVG Converter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

import logging

from . import types as ps

logger = logging.getLogger(__name__)

# error types
STACKUNDERFLOW = 0

error_names = (
    "stackunderflow",
)

_descriptions = {
    STACKUNDERFLOW: "missing numeric argument",
}


class SpecialError(Exception):
    """A directive that could not be applied. Recorded, never raised past a handler."""

    def __init__(self, code: int, command: str, message: str | None = None) -> None:
        self.code = code
        self.command = command
        self.message = message or _descriptions.get(code, "error")
        super().__init__(f"error in special '{command}': {self.message}")

    @property
    def name(self) -> str:
        return error_names[self.code] if 0 <= self.code < len(error_names) else f"error#{self.code}"


def e(ctxt: ps.Context, error_code: int, func_name: str, message: str | None = None) -> None:
    """
    Report a failed directive.

    The error is appended to ctxt.errors and logged; the directive itself has
    already left the graphics state untouched. Returns None so operators can
    write ``return ps_error.e(...)``.
    """
    if func_name.startswith("ps_"):
        func_name = func_name[3:]

    err = SpecialError(error_code, func_name, message)
    if ctxt is not None:
        ctxt.errors.append(err)
    logger.warning("%s (/%s)", err, err.name)

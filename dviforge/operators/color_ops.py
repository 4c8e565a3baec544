# DviForge - A DVI Special to SVG Converter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from ..core import types as ps
from ..core.tokenizer import Operands, white_space

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def bk(ctxt: ps.Context, gstate: ps.GraphicsState, operands: Operands) -> None:
    """
    - **bk** -


    sets the fill intensity of the next shape to black (gray level 1).

    **Errors**:     none
    **See Also**:   **wh**, **sh**, **tx**
    """

    gstate.gray_level = 1.0


def wh(ctxt: ps.Context, gstate: ps.GraphicsState, operands: Operands) -> None:
    """
    - **wh** -


    sets the fill intensity of the next shape to white (gray level 0).

    **Errors**:     none
    **See Also**:   **bk**, **sh**, **tx**
    """

    gstate.gray_level = 0.0


def sh(ctxt: ps.Context, gstate: ps.GraphicsState, operands: Operands) -> None:
    """
    [s] **sh** -


    shades the next shape with gray level s, where 0 is white and 1 is
    black. Values outside [0, 1] are clamped; without an argument the level
    is 0.5.

    **Errors**:     none
    **See Also**:   **bk**, **wh**, **tx**
    """

    level = operands.get(0, ps.GRAY_DEFAULT_SHADE)
    gstate.gray_level = max(0.0, min(1.0, level))


def tx(ctxt: ps.Context, gstate: ps.GraphicsState, operands: Operands) -> None:
    """
    hex-pattern **tx** -


    sets the fill texture of the next shape. Textures are approximated by a
    gray level: the darker the bit pattern, the darker the gray.

    **Errors**:     none
    **See Also**:   **sh**
    """

    gstate.gray_level = decode_bit_pattern(operands.text)


def decode_bit_pattern(text: str) -> float:
    """
    Map a hexadecimal bit pattern to a gray level.

    White space is skipped and scanning ends at the first character that is
    neither white space nor a hex digit. The result is the fraction of unset
    bits, so an all-ones pattern is white (0). No digits at all gives black (1).

    >>> decode_bit_pattern("1248")
    0.75
    """
    set_bits = 0
    digits = 0
    for c in text or "":
        if c in white_space:
            continue
        if c not in _HEX_DIGITS:
            break
        set_bits += bin(int(c, 16)).count("1")
        digits += 1
    if digits == 0:
        return 1.0
    return 1.0 - set_bits / (4.0 * digits)


def fill_color(gray_level: float) -> ps.Color:
    """Color of a fill with the given TPic gray level (1 = black)."""
    return ps.Color.from_gray(1.0 - gray_level)

# DviForge - A DVI Special to SVG Converter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Directive tokenizer.

A special such as ``pa 1000 -250`` consists of a command word followed by a
parameter text. TPic parameters are whitespace separated decimal numbers
(signed, optionally with a fraction and an exponent). Anything that does not
scan as a finite number ends the numeric list; the raw text stays available
to directives that parse their parameters themselves ("tx").
"""

from __future__ import annotations

import math
import re

# White-space characters
white_space = frozenset(" \t\n\r\f\v\0")

_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_PREFIX_RE = re.compile(r"[A-Za-z0-9_]+")
_COMMAND_RE = re.compile(r"[a-z]{2}\Z")


class Operands:
    """Numeric arguments of one directive plus its raw parameter text."""
    __slots__ = ("numbers", "text")

    def __init__(self, numbers: list[float], text: str) -> None:
        self.numbers = numbers
        self.text = text

    def __len__(self) -> int:
        return len(self.numbers)

    def __getitem__(self, index: int) -> float:
        return self.numbers[index]

    def get(self, index: int, default: float | None = None) -> float | None:
        """Return the argument at index, or default when it was not given."""
        if index < len(self.numbers):
            return self.numbers[index]
        return default

    def __repr__(self) -> str:
        return f"Operands({self.numbers!r}, text={self.text!r})"


def _skip_white_space(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in white_space:
        pos += 1
    return pos


def read_numbers(text: str) -> list[float]:
    """
    Scan whitespace separated numbers from the start of text.

    Scanning stops at the first token that is not a number. Values that
    overflow to infinity stop it too.
    """
    numbers: list[float] = []
    pos = _skip_white_space(text, 0)
    while pos < len(text):
        m = _NUMBER_RE.match(text, pos)
        if m is None:
            break
        end = m.end()
        # "12abc" is not a number followed by a word
        if end < len(text) and text[end] not in white_space:
            break
        value = float(m.group())
        if not math.isfinite(value):
            break
        numbers.append(value)
        pos = _skip_white_space(text, end)
    return numbers


def tokenize_operands(text: str | None) -> Operands:
    text = text or ""
    return Operands(read_numbers(text), text)


def is_command_code(cmd: str | None) -> bool:
    """True for a syntactically valid TPic command code (two lowercase letters)."""
    return bool(cmd) and _COMMAND_RE.match(cmd) is not None


def split_special(special: str) -> tuple[str, str]:
    """
    Split special text into its prefix word and parameter text.

    ``"pa 100 200"`` gives ``("pa", "100 200")``; ``"em:line 1,2"`` gives
    ``("em", ":line 1,2")``. Leading white space is ignored.
    """
    pos = _skip_white_space(special, 0)
    m = _PREFIX_RE.match(special, pos)
    if m is None:
        return "", special[pos:]
    rest = special[m.end():]
    if rest and rest[0] in white_space:
        rest = rest[1:]
    return m.group(), rest

# DviForge - A DVI Special to SVG Converter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Special dispatch.

Every special handler announces the prefixes (leading words of a special)
it understands. The manager splits an incoming special into prefix and
parameter text and hands it to the handler registered for the prefix. A
special nobody takes is not an error; it is logged and skipped.
"""

from __future__ import annotations

import logging
import re

from . import types as ps
from .tokenizer import split_special

logger = logging.getLogger(__name__)

_IGNORE_SPLIT_RE = re.compile(r"[^A-Za-z0-9]+")


class SpecialHandler:
    """Base class of the special handlers."""

    name = ""

    def prefixes(self) -> tuple[str, ...]:
        return ()

    def process(self, prefix: str, params: str, ctxt: ps.Context) -> bool:
        raise NotImplementedError

    def notify_end_page(self, ctxt: ps.Context) -> None:
        pass


def parse_ignore_list(ignorelist: str | None) -> set[str]:
    """
    Return the handler names listed in ignorelist.

    Names are separated by any run of characters other than letters and
    digits, so "color, em;ps" names three handlers.
    """
    if not ignorelist:
        return set()
    return {name for name in _IGNORE_SPLIT_RE.split(ignorelist) if name}


def ignores_all(ignorelist: str | None) -> bool:
    return ignorelist is not None and ignorelist.strip() == "*"


class SpecialManager:
    """Registry of special handlers keyed by prefix."""

    def __init__(self) -> None:
        self.handlers: list[SpecialHandler] = []
        self._by_prefix: dict[str, SpecialHandler] = {}

    def register_handler(self, handler: SpecialHandler, ignorelist: str | None = None) -> bool:
        """
        Register handler unless its name is in ignorelist.

        Returns:
            bool: True if the handler was registered
        """
        if handler.name in parse_ignore_list(ignorelist):
            logger.debug("special handler '%s' disabled", handler.name)
            return False
        self.handlers.append(handler)
        for prefix in handler.prefixes():
            self._by_prefix[prefix] = handler
        return True

    def find_handler(self, prefix: str) -> SpecialHandler | None:
        return self._by_prefix.get(prefix)

    def process(self, special: str, ctxt: ps.Context) -> bool:
        """
        Execute a special.

        Returns:
            bool: False if no registered handler took the special
        """
        prefix, params = split_special(special)
        handler = self.find_handler(prefix)
        if handler is None or not handler.process(prefix, params, ctxt):
            logger.debug("ignoring unsupported special '%s'", special.strip())
            return False
        return True

    def notify_end_page(self, ctxt: ps.Context) -> None:
        for handler in self.handlers:
            handler.notify_end_page(ctxt)

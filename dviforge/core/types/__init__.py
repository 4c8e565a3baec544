# DviForge - A DVI Special to SVG Converter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
DviForge Types Package - Public API

This package provides the unified types interface for the DviForge special
interpreter. All types, constants, and classes are available through this
single namespace to support the standard import pattern:
`from ..core import types as ps`

**Internal Module Organization:**
- constants.py: unit conversions, tolerances and identifiers
- graphics.py: graphics state, dash styles, colors, bounding boxes, paths
- context.py: the page context special handlers draw into

**Usage:**
```python
from ..core import types as ps

ctxt = ps.Context(params)
gs = ps.GraphicsState()
box = ps.BoundingBox(0, 0, 72, 72)
```
"""

from .constants import *
from .graphics import *
from .context import *

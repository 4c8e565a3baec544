# DviForge - A DVI Special to SVG Converter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
DviForge Types Constants Module

This module contains the constants used throughout the DviForge special
interpreter. These constants define the unit conversions, numeric tolerances
and identifiers that control how directives are turned into SVG elements.
"""

import math

# points per inch
PPI = 72.0

# TPic coordinates are given in milli-inches, SVG output is in PS points (1/72 in)
MI2BP = 0.072

# number of fractional digits written for SVG numbers
DECIMAL_PLACES = 2

# gray levels below zero mean "no fill color set"
GRAY_UNSET = -1.0

# default gray level of "sh" without argument
GRAY_DEFAULT_SHADE = 0.5

# default pen width in PS points
DEFAULT_PEN_WIDTH = 1.0

# full circle in radians
PI2 = 2.0 * math.pi

# tolerance used to detect full ellipses and circles
ARC_EPSILON = 1e-7

# dash kinds
DASH_SOLID = 0
DASH_DASHED = 1
DASH_DOTTED = 2

# line cap names
LINE_CAP_ROUND = "round"

# the color used for all TPic outlines
STROKE_COLOR = "#000000"

# the output directory
OUTPUT_DIRECTORY = "df_output"

# Copyright (c) 2026 Wireframe
# SPDX-License-Identifier: MIT

"""
Color math for Wireframe.

Parsing of CSS color literals plus the WCAG luminance and contrast
decisions used to color placeholder boxes.
"""

from wireframe.color.colorspace import Color, ColorParseError
from wireframe.color.contrast import (
    contrast_ratio,
    derive_background_from_selector,
    derive_colors,
    luminance,
)

__all__ = [
    "Color",
    "ColorParseError",
    "luminance",
    "contrast_ratio",
    "derive_colors",
    "derive_background_from_selector",
]

# Copyright (c) 2026 Wireframe
# SPDX-License-Identifier: MIT

"""
Wireframe -- accessible placeholder boxes from a single at-rule.

Expands ``@wireframe [color|auto] [outline]`` into concrete declarations:
a background with black or white text chosen for WCAG contrast, an optional
outline border, and shared boilerplate styles.

Quick start::

    from wireframe import process

    css = process(".card { @wireframe auto outline; }")

    from wireframe import expand
    expand("red outline", ".box")   # Declarations only, no document
"""

from __future__ import annotations

__version__ = "1.0.0"

from wireframe.color import (
    Color,
    ColorParseError,
    contrast_ratio,
    derive_background_from_selector,
    derive_colors,
    luminance,
)
from wireframe.expand import WireframeConfig, expand, parse_intent
from wireframe.runtime import (
    BoilerplateNotFoundError,
    ProcessingContext,
    process,
    process_stylesheet,
)
from wireframe.schema import ColorTrio, Declaration, MixinIntent

__all__ = [
    # Core API
    "process",
    "process_stylesheet",
    "expand",
    "parse_intent",
    # Color engine
    "luminance",
    "contrast_ratio",
    "derive_colors",
    "derive_background_from_selector",
    # Types (commonly needed)
    "Color",
    "ColorTrio",
    "Declaration",
    "MixinIntent",
    "WireframeConfig",
    "ProcessingContext",
    # Errors
    "ColorParseError",
    "BoilerplateNotFoundError",
    # Version
    "__version__",
]

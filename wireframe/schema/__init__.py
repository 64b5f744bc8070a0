# Copyright (c) 2026 Wireframe
# SPDX-License-Identifier: MIT

"""
Schema definitions for wireframe expansion.

All types in this module are immutable (frozen dataclasses).
"""

from wireframe.schema.declarations import (
    TEXT_COLORS,
    BackgroundKind,
    ColorTrio,
    Declaration,
    MixinIntent,
)

__all__ = [
    "TEXT_COLORS",
    "Declaration",
    "ColorTrio",
    "BackgroundKind",
    "MixinIntent",
]

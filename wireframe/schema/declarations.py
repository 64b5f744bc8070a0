# Copyright (c) 2026 Wireframe
# SPDX-License-Identifier: MIT

"""
Value types passed between the mixin parser, the color engine and the
stylesheet.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same at-rule → same declarations
- Plain values: Nothing here knows about document traversal
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# =============================================================================
# Declarations
# =============================================================================


@dataclass(frozen=True, slots=True)
class Declaration:
    """
    A single CSS property/value pair.

    Order matters in a declaration list: later declarations override earlier
    ones in the same rule.
    """
    prop: str
    value: str

    def __post_init__(self) -> None:
        if not self.prop or not self.prop.strip():
            raise ValueError("Declaration property cannot be empty")

    def to_css(self) -> str:
        return f"{self.prop}: {self.value};"


# =============================================================================
# Color Trio
# =============================================================================

TEXT_COLORS = ("black", "white")


@dataclass(frozen=True, slots=True)
class ColorTrio:
    """
    Colors for one placeholder box.

    Attributes:
        background: The background literal as given (or as computed for auto)
        foreground: Text color, always "black" or "white"
        border: Hex border color derived from the background, or None
    """
    background: str
    foreground: str
    border: Optional[str] = None

    def __post_init__(self) -> None:
        if self.foreground not in TEXT_COLORS:
            raise ValueError(
                f"Foreground must be one of {TEXT_COLORS}, got {self.foreground!r}"
            )


# =============================================================================
# Mixin Intent
# =============================================================================


class BackgroundKind(Enum):
    """Where the placeholder background comes from."""

    NONE = "none"
    AUTO = "auto"          # Derived from the enclosing selector
    LITERAL = "literal"    # First at-rule token, taken verbatim


@dataclass(frozen=True, slots=True)
class MixinIntent:
    """
    Parsed ``@wireframe`` parameters.

    Attributes:
        kind: Background source
        literal: Background literal when kind is LITERAL, else None
        outline: True if an ``outline`` token was present
    """
    kind: BackgroundKind = BackgroundKind.NONE
    literal: Optional[str] = None
    outline: bool = False

    def __post_init__(self) -> None:
        if (self.kind is BackgroundKind.LITERAL) != (self.literal is not None):
            raise ValueError("A literal is required exactly when kind is LITERAL")

    @property
    def has_background(self) -> bool:
        return self.kind is not BackgroundKind.NONE

# Copyright (c) 2026 Wireframe
# SPDX-License-Identifier: MIT

"""Configuration for at-rule expansion."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class WireframeConfig:
    """Configuration for ``@wireframe`` expansion."""

    # At-rule name to expand (without the "@")
    at_rule_name: str = "wireframe"

    # Branding declaration emitted first in every expansion
    font_family: str = "Comic Neue"

    # Padding for boxes with a background or an outline
    padding: str = "1rem"

    # Outline border width
    border_width: str = "2px"

    # Border color when no usable background is in play
    fallback_border: str = "#aaa"

    # Black text is used when its contrast ratio reaches this value
    # 4.5 = WCAG AA for normal text
    contrast_threshold: float = 4.5

    # HSL lightness step between background and border
    border_shift: float = 0.3

    # Boilerplate stylesheet; None = the packaged wireframe.css
    boilerplate_path: Optional[Path] = None

    def __post_init__(self) -> None:
        if not self.at_rule_name:
            raise ValueError("at_rule_name cannot be empty")
        if self.contrast_threshold < 1.0:
            raise ValueError(
                f"contrast_threshold must be >= 1, got {self.contrast_threshold}"
            )
        if not 0.0 <= self.border_shift <= 1.0:
            raise ValueError(f"border_shift must be 0-1, got {self.border_shift}")

# Copyright (c) 2026 Wireframe
# SPDX-License-Identifier: MIT

"""
Contrast decisions for wireframe placeholders.

Given a background, pick black or white text that clears the WCAG AA
threshold and a border one lightness step darker or lighter. Given only a
selector, pick a stable grey background first.

All functions are pure: same input → same output.
"""

from __future__ import annotations

import ctypes
from typing import Optional, Union

import numpy as np

from wireframe.color.colorspace import Color, ColorParseError, srgb_to_linear
from wireframe.schema import ColorTrio


# WCAG 2.0 luminance weights, as published in the 2008 recommendation.
LUMINANCE_WEIGHTS = np.array([0.2125, 0.7152, 0.0722], dtype=np.float64)

# WCAG "AA" minimum for normal-size text
AA_NORMAL_TEXT = 4.5

# HSL lightness step between background and border
BORDER_SHIFT = 0.3

ColorLike = Union[str, Color]


def _as_color(value: ColorLike) -> Color:
    if isinstance(value, Color):
        return value
    return Color.parse(value)


def luminance(color: ColorLike) -> float:
    """
    Relative luminance of a color, in [0, 1].

    Uses the WCAG 2.0 definition: linearize each sRGB channel, then weight
    R, G, B by 0.2125, 0.7152, 0.0722.

    Raises:
        ColorParseError: If ``color`` is a string that is not a color.
    """
    color = _as_color(color)
    return float(np.dot(srgb_to_linear(color.rgb), LUMINANCE_WEIGHTS))


def contrast_ratio(background: ColorLike, foreground: ColorLike) -> float:
    """
    WCAG contrast ratio between two colors, in [1, 21].

    Lighter luminance over darker luminance, each offset by 0.05.

    Raises:
        ColorParseError: If either side is not a color.
    """
    l1 = luminance(_as_color(background)) + 0.05
    l2 = luminance(_as_color(foreground)) + 0.05
    ratio = l1 / l2

    if l2 > l1:
        ratio = 1 / ratio

    return ratio


def derive_colors(
    background: ColorLike,
    *,
    threshold: float = AA_NORMAL_TEXT,
    shift: float = BORDER_SHIFT,
) -> Optional[ColorTrio]:
    """
    Derive text and border colors for a background.

    If black text reaches ``threshold`` against the background, text is black
    and the border is ``shift`` darker; otherwise text is white and the border
    is ``shift`` lighter. White contrast is never measured: for real-world
    backgrounds one of the two clears 4.5:1.

    Args:
        background: Background literal (kept verbatim in the result) or Color
        threshold: Minimum black-text contrast ratio
        shift: HSL lightness step for the border

    Returns:
        ColorTrio, or None if the background is not a usable color.
    """
    try:
        color = _as_color(background)
    except ColorParseError:
        return None

    literal = background if isinstance(background, str) else color.to_rgba()
    lightness = color.lightness()

    if contrast_ratio(color, "black") >= threshold:
        return ColorTrio(
            background=literal,
            foreground="black",
            border=color.with_lightness(max(lightness - shift, 0.0)).to_hex(),
        )

    return ColorTrio(
        background=literal,
        foreground="white",
        border=color.with_lightness(min(lightness + shift, 1.0)).to_hex(),
    )


def _to_int32(value: int) -> int:
    """Truncate to a signed 32-bit integer, wrapping on overflow."""
    return ctypes.c_int32(value).value


def _utf16_units(text: str) -> list[int]:
    raw = text.encode("utf-16-le")
    return [int.from_bytes(raw[i:i + 2], "little") for i in range(0, len(raw), 2)]


def selector_hash(selector: str) -> int:
    """
    Signed 32-bit string hash (``h = h * 31 + unit``) over UTF-16 code units.

    Matches the classic ``(h << 5) - h`` browser-side hash, so a selector
    hashes the same here as in a browser.
    """
    h = 0
    for unit in _utf16_units(selector):
        h = _to_int32((h << 5) - h + unit)
    return h


def derive_background_from_selector(selector: str, *, alpha: float = 0.8) -> str:
    """
    Stable grey background for a selector.

    Returns:
        ``rgba(c, c, c, 0.8)`` with ``100 <= c <= 199``. Identical selectors
        always give identical strings; distinct selectors usually differ.
    """
    # Python's % is a floored modulo: negative hashes still land in [0, 99].
    c = 100 + selector_hash(selector) % 100
    return f"rgba({c}, {c}, {c}, {alpha:g})"

# Copyright (c) 2026 Wireframe
# SPDX-License-Identifier: MIT

"""
Color values and conversions.

Conversion chain: CSS literal → sRGB [0,1] → Linear RGB (WCAG 2.0)
                                        ↘ HSL lightness

References:
- WCAG 2.0 relative luminance:
  http://www.w3.org/TR/2008/REC-WCAG20-20081211/#relativeluminancedef
- CSS color literals: https://www.w3.org/TR/css-color-3/

Channel math is NumPy; named colors and hex come from webcolors.
"""

from __future__ import annotations

import colorsys
import re
from dataclasses import dataclass, replace

import numpy as np
import webcolors
from numpy.typing import NDArray


class ColorParseError(ValueError):
    """Raised when a string cannot be interpreted as a CSS color."""

    def __init__(self, literal: str, reason: str = "unrecognized color") -> None:
        super().__init__(f"Cannot parse color {literal!r}: {reason}")
        self.literal = literal


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================

# WCAG 2.0 uses 0.03928 as the sRGB linear-segment cutoff (not 0.04045).
WCAG_LINEAR_CUTOFF = 0.03928


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB as WCAG 2.0 defines it.

    - For values < 0.03928: value/12.92
    - Otherwise: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb < WCAG_LINEAR_CUTOFF,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )


# =============================================================================
# CSS literal parsing
# =============================================================================

_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)"
_FUNC_RE = re.compile(r"^(rgba?|hsla?)\((.*)\)$", re.IGNORECASE | re.DOTALL)
_ARG_RE = re.compile(rf"^({_NUMBER})(%?)$")
_HEX_RE = re.compile(r"[0-9a-fA-F]{3,8}")

# CSS Color 4 additions missing from webcolors' CSS3 table
_CSS4_NAMES = {"rebeccapurple": "#663399"}


def _split_args(body: str) -> list[str]:
    # Accept both the comma form and the space/slash form.
    if "," in body:
        return [part.strip() for part in body.split(",")]
    return [part for part in re.split(r"[\s/]+", body.strip()) if part]


def _number(literal: str, arg: str) -> tuple[float, bool]:
    m = _ARG_RE.match(arg)
    if not m:
        raise ColorParseError(literal, f"bad component {arg!r}")
    return float(m.group(1)), m.group(2) == "%"


def _clip(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def _parse_hex(literal: str) -> tuple[float, ...]:
    digits = literal.strip()[1:]
    if not _HEX_RE.fullmatch(digits):
        raise ColorParseError(literal, "bad hex value")
    alpha = 1.0
    # #rgba and #rrggbbaa carry a trailing alpha component.
    if len(digits) in (4, 8):
        size = len(digits) // 4
        digits, alpha_digits = digits[:-size], digits[-size:]
        alpha = int(alpha_digits * (3 - size), 16) / 255.0
    try:
        r, g, b = webcolors.hex_to_rgb(f"#{digits}")
    except ValueError as e:
        raise ColorParseError(literal, "bad hex value") from e
    return r / 255.0, g / 255.0, b / 255.0, alpha


def _parse_alpha(literal: str, arg: str) -> float:
    value, percent = _number(literal, arg)
    return _clip(value / 100.0 if percent else value)


def _parse_rgb_function(literal: str, args: list[str]) -> tuple[float, ...]:
    if len(args) not in (3, 4):
        raise ColorParseError(literal, "rgb() takes 3 or 4 components")
    parsed = [_number(literal, arg) for arg in args[:3]]
    if len({percent for _, percent in parsed}) != 1:
        raise ColorParseError(literal, "cannot mix numbers and percentages")
    if parsed[0][1]:
        rgb = webcolors.rgb_percent_to_rgb(
            webcolors.PercentRGB(*(f"{_clip(v / 100.0) * 100:.4f}%" for v, _ in parsed))
        )
        channels = [c / 255.0 for c in rgb]
    else:
        channels = [_clip(v / 255.0) for v, _ in parsed]
    alpha = _parse_alpha(literal, args[3]) if len(args) == 4 else 1.0
    return (*channels, alpha)


def _parse_hsl_function(literal: str, args: list[str]) -> tuple[float, ...]:
    if len(args) not in (3, 4):
        raise ColorParseError(literal, "hsl() takes 3 or 4 components")
    hue_arg = re.sub(r"deg$", "", args[0], flags=re.IGNORECASE)
    hue, hue_percent = _number(literal, hue_arg)
    sat, sat_percent = _number(literal, args[1])
    light, light_percent = _number(literal, args[2])
    if hue_percent or not (sat_percent and light_percent):
        raise ColorParseError(literal, "hsl() needs a hue and two percentages")
    r, g, b = colorsys.hls_to_rgb(
        (hue % 360.0) / 360.0, _clip(light / 100.0), _clip(sat / 100.0)
    )
    alpha = _parse_alpha(literal, args[3]) if len(args) == 4 else 1.0
    return r, g, b, alpha


# =============================================================================
# Color
# =============================================================================


@dataclass(frozen=True, slots=True)
class Color:
    """
    An immutable sRGB color.

    Attributes:
        red, green, blue: Channels normalized to [0, 1]
        alpha: Opacity in [0, 1]

    Every adjustment returns a new Color.
    """
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be 0-1, got {value}")

    @classmethod
    def parse(cls, literal: str) -> Color:
        """
        Parse a CSS color literal.

        Accepts named colors, ``#rgb``/``#rgba``/``#rrggbb``/``#rrggbbaa``,
        ``rgb()``/``rgba()``, ``hsl()``/``hsla()`` and ``transparent``.

        Raises:
            ColorParseError: If the literal is not a color.
        """
        if not isinstance(literal, str):
            raise ColorParseError(repr(literal), "not a string")
        text = literal.strip()
        if not text:
            raise ColorParseError(literal, "empty")

        if text.lower() == "transparent":
            return cls(0.0, 0.0, 0.0, 0.0)

        if text.startswith("#"):
            return cls(*_parse_hex(text))

        m = _FUNC_RE.match(text)
        if m:
            func = m.group(1).lower()
            args = _split_args(m.group(2))
            if func.startswith("rgb"):
                return cls(*_parse_rgb_function(literal, args))
            return cls(*_parse_hsl_function(literal, args))

        if text.lower() in _CSS4_NAMES:
            return cls(*_parse_hex(_CSS4_NAMES[text.lower()]))

        try:
            rgb = webcolors.name_to_rgb(text)
        except ValueError as e:
            raise ColorParseError(literal) from e
        return cls.from_rgb255(*rgb)

    @classmethod
    def from_rgb255(cls, r: int, g: int, b: int, alpha: float = 1.0) -> Color:
        """Build a Color from 0-255 integer channels."""
        return cls(r / 255.0, g / 255.0, b / 255.0, alpha)

    def channel(self, name: str) -> float:
        """Normalized channel value for ``"r"``, ``"g"`` or ``"b"``."""
        try:
            return {"r": self.red, "g": self.green, "b": self.blue}[name]
        except KeyError:
            raise ValueError(f"Unknown channel {name!r}") from None

    @property
    def rgb(self) -> NDArray[np.float64]:
        """Channels as an array of shape (3,)."""
        return np.array([self.red, self.green, self.blue], dtype=np.float64)

    def lightness(self) -> float:
        """HSL lightness in [0, 1]."""
        _, light, _ = colorsys.rgb_to_hls(self.red, self.green, self.blue)
        return light

    def with_lightness(self, value: float) -> Color:
        """Return a copy with its HSL lightness set to ``value`` (clipped)."""
        hue, _, sat = colorsys.rgb_to_hls(self.red, self.green, self.blue)
        r, g, b = colorsys.hls_to_rgb(hue, _clip(value), sat)
        return replace(self, red=_clip(r), green=_clip(g), blue=_clip(b))

    def to_rgb255(self) -> tuple[int, int, int]:
        r, g, b = np.round(self.rgb * 255).astype(int)
        return int(r), int(g), int(b)

    def to_hex(self) -> str:
        """
        Hex color string, alpha dropped.

        Returns:
            Lowercase hex string like "#3941c8"
        """
        return webcolors.rgb_to_hex(self.to_rgb255())

    def to_rgba(self) -> str:
        """``rgba(r, g, b, a)`` string."""
        r, g, b = self.to_rgb255()
        return f"rgba({r}, {g}, {b}, {self.alpha:g})"

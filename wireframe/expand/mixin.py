# Copyright (c) 2026 Wireframe
# SPDX-License-Identifier: MIT

"""
``@wireframe`` parameter parsing and declaration assembly.

Grammar (whitespace separated)::

    @wireframe [<color> | auto] [outline]

Only the first token can be a background; ``outline`` is recognized at any
position; anything else is ignored.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from wireframe.color.contrast import derive_background_from_selector, derive_colors
from wireframe.expand.config import WireframeConfig
from wireframe.schema import BackgroundKind, Declaration, MixinIntent

logger = logging.getLogger(__name__)

AUTO_TOKEN = "auto"
OUTLINE_TOKEN = "outline"

_WHITESPACE_RE = re.compile(r"\s+")


def parse_intent(params: str) -> MixinIntent:
    """
    Parse raw at-rule parameters.

    Args:
        params: Parameter text after the at-rule name, e.g. ``"red outline"``

    Returns:
        MixinIntent. Unknown tokens never raise.
    """
    tokens = [t for t in _WHITESPACE_RE.split(params.strip()) if t]

    kind = BackgroundKind.NONE
    literal = None
    outline = False

    for i, token in enumerate(tokens):
        if i == 0 and token == AUTO_TOKEN:
            kind = BackgroundKind.AUTO
        elif token == OUTLINE_TOKEN:
            outline = True
        elif i == 0:
            kind = BackgroundKind.LITERAL
            literal = token

    return MixinIntent(kind=kind, literal=literal, outline=outline)


def resolve_background(intent: MixinIntent, enclosing_selector: str) -> Optional[str]:
    """Background literal for an intent, or None when none was requested."""
    if not intent.has_background:
        return None
    if intent.kind is BackgroundKind.AUTO:
        return derive_background_from_selector(enclosing_selector)
    if intent.kind is BackgroundKind.LITERAL:
        return intent.literal
    raise ValueError(f"Unknown background kind {intent.kind!r}")


def expand(
    params: str,
    enclosing_selector: str = "",
    config: Optional[WireframeConfig] = None,
) -> tuple[Declaration, ...]:
    """
    Expand one ``@wireframe`` at-rule into declarations.

    Emission order:
    1. font-family
    2. background-color, color, padding (usable background only)
    3. border, then padding if no background supplied one (outline only)

    An unparseable background color produces the same output as no
    background at all.

    Args:
        params: Raw at-rule parameters
        enclosing_selector: Selector of the rule containing the at-rule,
            used by ``auto``
        config: Expansion settings (uses defaults if None)

    Returns:
        Declarations in emission order.

    Example:
        >>> expand("outline")
        (Declaration(prop='font-family', value='Comic Neue'),
         Declaration(prop='border', value='2px solid #aaa'),
         Declaration(prop='padding', value='1rem'))
    """
    config = config or WireframeConfig()
    declarations = [Declaration("font-family", config.font_family)]

    intent = parse_intent(params)
    background = resolve_background(intent, enclosing_selector)

    trio = None
    if background is not None:
        trio = derive_colors(
            background,
            threshold=config.contrast_threshold,
            shift=config.border_shift,
        )
        if trio is None:
            logger.debug(
                "Ignoring unparseable wireframe background %r in %r",
                background, enclosing_selector,
            )

    if trio is not None:
        declarations.append(Declaration("background-color", trio.background))
        declarations.append(Declaration("color", trio.foreground))
        declarations.append(Declaration("padding", config.padding))
        border = trio.border
    else:
        border = config.fallback_border

    if intent.outline:
        declarations.append(
            Declaration("border", f"{config.border_width} solid {border}")
        )
        if trio is None:
            declarations.append(Declaration("padding", config.padding))

    return tuple(declarations)

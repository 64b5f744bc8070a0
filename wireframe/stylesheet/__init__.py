# Copyright (c) 2026 Wireframe
# SPDX-License-Identifier: MIT

"""
Minimal stylesheet document: model, parser and serializer.

Just enough structure to find at-rules, replace them with declarations and
write the result back out. Not a general CSS parser.
"""

from wireframe.schema import Declaration
from wireframe.stylesheet.model import (
    AtRule,
    Comment,
    Container,
    Rule,
    Stylesheet,
    enclosing_selector,
)
from wireframe.stylesheet.parser import StylesheetSyntaxError, parse_stylesheet
from wireframe.stylesheet.serializer import to_css

__all__ = [
    "Stylesheet",
    "Rule",
    "AtRule",
    "Declaration",
    "Comment",
    "Container",
    "enclosing_selector",
    "parse_stylesheet",
    "to_css",
    "StylesheetSyntaxError",
]

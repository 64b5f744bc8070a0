# Copyright (c) 2026 Wireframe
# SPDX-License-Identifier: MIT

"""
At-rule expansion for Wireframe.

Turns ``@wireframe`` parameters into an ordered declaration list.
Nothing here touches a document.
"""

from wireframe.expand.config import WireframeConfig
from wireframe.expand.mixin import expand, parse_intent

__all__ = ["WireframeConfig", "expand", "parse_intent"]

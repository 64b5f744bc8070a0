# Copyright (c) 2026 Wireframe
# SPDX-License-Identifier: MIT

"""
Document runtime for Wireframe.

Walks a stylesheet, inserts the shared boilerplate once per document and
replaces each ``@wireframe`` at-rule with its declarations.

The runtime never decides colors; that is the color engine's job.
"""

from wireframe.runtime.process import (
    BOILERPLATE_PATH,
    BoilerplateNotFoundError,
    ProcessingContext,
    load_boilerplate,
    process,
    process_stylesheet,
)

__all__ = [
    "process",
    "process_stylesheet",
    "ProcessingContext",
    "load_boilerplate",
    "BoilerplateNotFoundError",
    "BOILERPLATE_PATH",
]

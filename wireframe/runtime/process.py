# Copyright (c) 2026 Wireframe
# SPDX-License-Identifier: MIT

"""
Document processing: find ``@wireframe`` at-rules and expand them in place.

This is the primary entry point for Wireframe.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from wireframe.expand import WireframeConfig, expand
from wireframe.stylesheet import (
    AtRule,
    Comment,
    Stylesheet,
    enclosing_selector,
    parse_stylesheet,
    to_css,
)

logger = logging.getLogger(__name__)

BOILERPLATE_PATH = Path(__file__).parent / "wireframe.css"


class BoilerplateNotFoundError(FileNotFoundError):
    """Raised when the shared boilerplate stylesheet cannot be read."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Wireframe boilerplate not found: {path}")
        self.path = path


def load_boilerplate(path: Optional[Union[str, Path]] = None) -> Stylesheet:
    """
    Read and parse the shared boilerplate stylesheet.

    Args:
        path: Stylesheet to load (default: the packaged wireframe.css)

    Raises:
        BoilerplateNotFoundError: If the file does not exist.
    """
    path = Path(path) if path is not None else BOILERPLATE_PATH
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise BoilerplateNotFoundError(path) from e
    return parse_stylesheet(text)


@dataclass
class ProcessingContext:
    """
    Per-document state.

    Attributes:
        config: Expansion settings
        common_emitted: Set once the boilerplate has been inserted
        expanded: Number of at-rules replaced so far
    """
    config: WireframeConfig = field(default_factory=WireframeConfig)
    common_emitted: bool = False
    expanded: int = 0

    def ensure_common(self, sheet: Stylesheet) -> None:
        """Insert the boilerplate into ``sheet`` unless already done."""
        if self.common_emitted:
            return
        boilerplate = load_boilerplate(self.config.boilerplate_path)
        sheet.insert(_head_end(sheet), boilerplate.nodes)
        self.common_emitted = True


# Must stay ahead of every rule in a stylesheet
_HEAD_AT_RULES = ("charset", "import")


def _head_end(sheet: Stylesheet) -> int:
    """Index just past the leading ``@charset``/``@import`` block."""
    end = 0
    for i, node in enumerate(sheet.nodes):
        if isinstance(node, AtRule) and node.name.lower() in _HEAD_AT_RULES:
            end = i + 1
        elif not isinstance(node, Comment):
            break
    return end


def process_stylesheet(
    sheet: Stylesheet,
    config: Optional[WireframeConfig] = None,
    context: Optional[ProcessingContext] = None,
) -> Stylesheet:
    """
    Expand every wireframe at-rule in ``sheet``, in place.

    At-rules are found at any depth (inside rules, ``@media`` blocks, or at
    the root). Before the first expansion the boilerplate is inserted at the
    top of the root, after any leading ``@charset``/``@import`` at-rules; a
    document with no wireframe at-rules is left untouched.

    Args:
        sheet: Parsed stylesheet, modified in place
        config: Expansion settings (uses defaults if None); ignored when a
            context is given
        context: Per-document state; a fresh one is created if None

    Returns:
        The same ``sheet``.

    Raises:
        BoilerplateNotFoundError: If the boilerplate cannot be read.
    """
    if context is None:
        context = ProcessingContext(config=config or WireframeConfig())
    name = context.config.at_rule_name

    # Collect first: inserting and replacing both edit child lists.
    targets = [
        (node, ancestors)
        for node, ancestors in sheet.walk()
        if isinstance(node, AtRule) and node.name == name
    ]
    if not targets:
        return sheet

    context.ensure_common(sheet)

    for at_rule, ancestors in targets:
        declarations = expand(
            at_rule.params,
            enclosing_selector(ancestors),
            context.config,
        )
        ancestors[-1].replace(at_rule, declarations)
        context.expanded += 1

    logger.debug("Expanded %d @%s at-rule(s)", context.expanded, name)
    return sheet


def process(css: str, config: Optional[WireframeConfig] = None) -> str:
    """
    Expand ``@wireframe`` at-rules in stylesheet text.

    Example:
        >>> from wireframe import process
        >>> print(process(".box { @wireframe outline; }"))  # doctest: +SKIP
        /* Shared wireframe styles */
        ...
        .box {
            font-family: Comic Neue;
            border: 2px solid #aaa;
            padding: 1rem;
        }
    """
    sheet = parse_stylesheet(css)
    return to_css(process_stylesheet(sheet, config))

# Copyright (c) 2026 Wireframe
# SPDX-License-Identifier: MIT

"""
Stylesheet document model.

Containers (Stylesheet, Rule, block AtRule) are mutable so the processor can
replace at-rules in place. Leaves (Declaration, Comment) are frozen.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Union

from wireframe.schema import Declaration


@dataclass(frozen=True, slots=True)
class Comment:
    """A ``/* ... */`` comment, text without the delimiters."""
    text: str


Node = Union["Rule", "AtRule", Declaration, Comment]


@dataclass
class Container:
    """Base for nodes holding an ordered list of child nodes."""

    nodes: Optional[list] = field(default_factory=list)

    def walk(
        self, _path: Optional[list[Container]] = None,
    ) -> Iterator[tuple[Node, list[Container]]]:
        """
        Yield ``(node, ancestors)`` depth first, in document order.

        ``ancestors[0]`` is the container walk was called on and
        ``ancestors[-1]`` is the node's parent. The child list is copied
        before iterating, so callers may edit it between steps.
        """
        path = (_path or []) + [self]
        for node in list(self.nodes or ()):
            yield node, path
            if isinstance(node, Container):
                yield from node.walk(path)

    def index(self, node: Node) -> int:
        # Identity, not equality: two identical at-rules are distinct nodes.
        for i, child in enumerate(self.nodes or ()):
            if child is node:
                return i
        raise ValueError(f"{node!r} is not a child of this container")

    def replace(self, node: Node, replacements: Iterable[Node]) -> None:
        """Splice ``replacements`` in place of ``node``."""
        i = self.index(node)
        self.nodes[i:i + 1] = list(replacements)

    def insert(self, index: int, nodes: Iterable[Node]) -> None:
        """Insert ``nodes`` before position ``index``."""
        self.nodes[index:index] = list(nodes)


@dataclass
class Stylesheet(Container):
    """Document root."""


@dataclass
class Rule(Container):
    """A style rule: ``selector { ... }``."""

    selector: str = ""


@dataclass
class AtRule(Container):
    """
    An at-rule.

    ``nodes`` is None for statement at-rules (``@import "x";``) and a list for
    block at-rules (``@media print { ... }``).
    """

    nodes: Optional[list] = None
    name: str = ""
    params: str = ""

    @property
    def has_block(self) -> bool:
        return self.nodes is not None


def enclosing_selector(ancestors: list[Container]) -> str:
    """Selector of the innermost Rule among ``ancestors``, or "" if none."""
    for ancestor in reversed(ancestors):
        if isinstance(ancestor, Rule):
            return ancestor.selector
    return ""

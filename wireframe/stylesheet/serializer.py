# Copyright (c) 2026 Wireframe
# SPDX-License-Identifier: MIT

"""
Stylesheet serializer.

Output is deterministic: one node per line, nested blocks indented, and a
trailing newline. Parsing the output gives back an equal tree.
"""

from __future__ import annotations

from wireframe.schema import Declaration
from wireframe.stylesheet.model import AtRule, Comment, Container, Rule


def to_css(sheet: Container, *, indent: str = "    ") -> str:
    """Serialize a stylesheet (or any container's children) to text.

    Example::

        .box {
            font-family: Comic Neue;
            border: 2px solid #aaa;
        }
    """
    lines: list[str] = []
    _render(sheet.nodes or [], 0, indent, lines)
    return "\n".join(lines) + "\n" if lines else ""


def _render(nodes: list, depth: int, indent: str, lines: list[str]) -> None:
    pad = indent * depth
    for node in nodes:
        if isinstance(node, Comment):
            lines.append(f"{pad}/*{node.text}*/")
        elif isinstance(node, Declaration):
            lines.append(pad + node.to_css())
        elif isinstance(node, Rule):
            _render_block(node.selector, node.nodes or [], depth, indent, lines)
        elif isinstance(node, AtRule):
            head = f"@{node.name} {node.params}" if node.params else f"@{node.name}"
            if node.has_block:
                _render_block(head, node.nodes, depth, indent, lines)
            else:
                lines.append(f"{pad}{head};")
        else:
            raise TypeError(f"Cannot serialize node of type {type(node).__name__}")


def _render_block(
    head: str, nodes: list, depth: int, indent: str, lines: list[str],
) -> None:
    pad = indent * depth
    lines.append(f"{pad}{head} {{")
    _render(nodes, depth + 1, indent, lines)
    lines.append(f"{pad}}}")

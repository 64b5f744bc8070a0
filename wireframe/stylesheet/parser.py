# Copyright (c) 2026 Wireframe
# SPDX-License-Identifier: MIT

"""
Block-level stylesheet parser.

Splits text into comments, rules, at-rules and declarations. Selectors,
at-rule params and declaration values are kept as raw text; they are never
tokenized further.
"""

from __future__ import annotations

import re

from wireframe.schema import Declaration
from wireframe.stylesheet.model import AtRule, Comment, Rule, Stylesheet


class StylesheetSyntaxError(ValueError):
    """Raised when the block structure of a stylesheet is broken."""

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"{message} at offset {offset}")
        self.offset = offset


_AT_RULE_RE = re.compile(r"@([-\w]+)(.*)", re.DOTALL)


def parse_stylesheet(text: str) -> Stylesheet:
    """
    Parse stylesheet text.

    Raises:
        StylesheetSyntaxError: On unclosed blocks, strings or comments, a
            stray ``}``, or a declaration without a colon.
    """
    return _Parser(text).parse()


class _Parser:

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def parse(self) -> Stylesheet:
        return Stylesheet(nodes=self._parse_block(top_level=True))

    def _parse_block(self, top_level: bool) -> list:
        nodes = []
        text = self.text

        while True:
            self._skip_whitespace()

            if self.pos >= len(text):
                if not top_level:
                    raise StylesheetSyntaxError("Unclosed block", self.pos)
                return nodes

            if text.startswith("/*", self.pos):
                nodes.append(Comment(self._read_comment()))
                continue

            if text[self.pos] == "}":
                if top_level:
                    raise StylesheetSyntaxError("Unexpected '}'", self.pos)
                self.pos += 1
                return nodes

            start = self.pos
            chunk, terminator = self._read_statement()

            if terminator == "{":
                self.pos += 1
                nodes.append(self._open_block(chunk.strip(), start))
                continue

            if terminator == ";":
                self.pos += 1
            statement = chunk.strip()
            if statement:
                nodes.append(self._statement(statement, start))

    def _skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def _read_comment(self) -> str:
        end = self.text.find("*/", self.pos + 2)
        if end < 0:
            raise StylesheetSyntaxError("Unclosed comment", self.pos)
        body = self.text[self.pos + 2:end]
        self.pos = end + 2
        return body

    def _read_statement(self) -> tuple[str, str]:
        """
        Scan to the next top-level ``;``, ``{`` or ``}``.

        Returns the scanned text with comments removed, and the terminator
        ("" at end of input). ``self.pos`` is left on the terminator.
        """
        text = self.text
        start = self.pos
        pieces = []
        depth = 0

        while self.pos < len(text):
            ch = text[self.pos]
            if ch in "\"'":
                self._skip_string(ch)
                continue
            if text.startswith("/*", self.pos):
                pieces.append(text[start:self.pos])
                self._read_comment()
                start = self.pos
                continue
            if ch == "(":
                depth += 1
            elif ch == ")":
                depth = max(depth - 1, 0)
            elif depth == 0 and ch in ";{}":
                pieces.append(text[start:self.pos])
                return "".join(pieces), ch
            self.pos += 1

        pieces.append(text[start:])
        return "".join(pieces), ""

    def _skip_string(self, quote: str) -> None:
        start = self.pos
        self.pos += 1
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            if ch == "\\":
                self.pos += 2
                continue
            self.pos += 1
            if ch == quote:
                return
        raise StylesheetSyntaxError("Unclosed string", start)

    def _open_block(self, header: str, offset: int):
        if not header:
            raise StylesheetSyntaxError("Missing selector", offset)
        if header.startswith("@"):
            name, params = self._at_rule_head(header, offset)
            return AtRule(name=name, params=params, nodes=self._parse_block(False))
        return Rule(selector=header, nodes=self._parse_block(False))

    def _statement(self, statement: str, offset: int):
        if statement.startswith("@"):
            name, params = self._at_rule_head(statement, offset)
            return AtRule(name=name, params=params)

        prop, sep, value = statement.partition(":")
        if not sep:
            raise StylesheetSyntaxError(
                f"Expected ':' in declaration {statement!r}", offset
            )
        if not prop.strip():
            raise StylesheetSyntaxError("Missing property name", offset)
        return Declaration(prop.strip(), value.strip())

    @staticmethod
    def _at_rule_head(header: str, offset: int) -> tuple[str, str]:
        m = _AT_RULE_RE.fullmatch(header)
        if not m:
            raise StylesheetSyntaxError(f"Bad at-rule {header!r}", offset)
        return m.group(1), m.group(2).strip()

# Copyright (c) 2026 Wireframe
# SPDX-License-Identifier: MIT

"""Tests for the stylesheet model, parser and serializer."""

import pytest

from wireframe.stylesheet import (
    AtRule,
    Comment,
    Declaration,
    Rule,
    Stylesheet,
    StylesheetSyntaxError,
    enclosing_selector,
    parse_stylesheet,
    to_css,
)


SAMPLE = """
/* header */
@import url("base.css");
.box {
    color: red;
    @wireframe red outline;
}
@media (min-width: 40em) {
    .card:hover, .card:focus {
        background: url("data:image/png;base64,AAAA");
        @wireframe auto;
    }
}
"""


class TestParse:
    """Block parsing into rules, at-rules, declarations and comments."""

    def test_top_level_structure(self):
        sheet = parse_stylesheet(SAMPLE)
        kinds = [type(node) for node in sheet.nodes]
        assert kinds == [Comment, AtRule, Rule, AtRule]

    def test_comment_text(self):
        sheet = parse_stylesheet("/* hi */")
        assert sheet.nodes == [Comment(" hi ")]

    def test_statement_at_rule(self):
        at_rule = parse_stylesheet(SAMPLE).nodes[1]
        assert at_rule.name == "import"
        assert at_rule.params == 'url("base.css")'
        assert not at_rule.has_block

    def test_rule_children(self):
        rule = parse_stylesheet(SAMPLE).nodes[2]
        assert rule.selector == ".box"
        assert rule.nodes == [
            Declaration("color", "red"),
            AtRule(name="wireframe", params="red outline"),
        ]

    def test_block_at_rule(self):
        media = parse_stylesheet(SAMPLE).nodes[3]
        assert media.name == "media"
        assert media.params == "(min-width: 40em)"
        assert media.has_block
        assert media.nodes[0].selector == ".card:hover, .card:focus"

    def test_semicolon_inside_string_and_parens(self):
        rule = parse_stylesheet(SAMPLE).nodes[3].nodes[0]
        assert rule.nodes[0] == Declaration(
            "background", 'url("data:image/png;base64,AAAA")'
        )

    def test_last_declaration_without_semicolon(self):
        rule = parse_stylesheet("a { color: red }").nodes[0]
        assert rule.nodes == [Declaration("color", "red")]

    def test_at_rule_without_params(self):
        rule = parse_stylesheet(".x { @wireframe; }").nodes[0]
        assert rule.nodes == [AtRule(name="wireframe", params="")]

    def test_value_with_colon(self):
        rule = parse_stylesheet("a { background: url(http://x/y.png); }").nodes[0]
        assert rule.nodes[0].value == "url(http://x/y.png)"

    def test_comment_in_at_rule_params_dropped(self):
        rule = parse_stylesheet(".a { @wireframe /* c */ red outline; }").nodes[0]
        assert rule.nodes == [AtRule(name="wireframe", params="red outline")]

    def test_comment_in_selector_dropped(self):
        rule = parse_stylesheet(".a /* x */ { color: red; }").nodes[0]
        assert rule.selector == ".a"

    def test_comment_in_value_dropped(self):
        rule = parse_stylesheet("a { color: /* old: blue */ red; }").nodes[0]
        assert rule.nodes == [Declaration("color", "red")]

    def test_comment_inside_string_kept(self):
        rule = parse_stylesheet('a { content: "/* x */"; }').nodes[0]
        assert rule.nodes == [Declaration("content", '"/* x */"')]

    def test_empty_input(self):
        assert parse_stylesheet("") == Stylesheet()

    @pytest.mark.parametrize("text", [
        ".box { color: red;",
        ".box { color: red; } }",
        ".box { color red; }",
        "/* never closed",
        '.box { content: "open; }',
        "{ color: red; }",
        ".box { : red; }",
    ])
    def test_syntax_errors(self, text):
        with pytest.raises(StylesheetSyntaxError):
            parse_stylesheet(text)

    def test_error_reports_offset(self):
        with pytest.raises(StylesheetSyntaxError) as info:
            parse_stylesheet("a {} }")
        assert info.value.offset == 5


class TestSerialize:
    """Serialized output is deterministic and re-parses to the same tree."""

    def test_declarations_indented(self):
        sheet = Stylesheet(nodes=[
            Rule(selector=".box", nodes=[
                Declaration("font-family", "Comic Neue"),
                Declaration("border", "2px solid #aaa"),
            ]),
        ])
        assert to_css(sheet) == (
            ".box {\n"
            "    font-family: Comic Neue;\n"
            "    border: 2px solid #aaa;\n"
            "}\n"
        )

    def test_custom_indent(self):
        sheet = parse_stylesheet("@media print { a { color: red; } }")
        assert to_css(sheet, indent="  ") == (
            "@media print {\n"
            "  a {\n"
            "    color: red;\n"
            "  }\n"
            "}\n"
        )

    def test_empty_sheet(self):
        assert to_css(Stylesheet()) == ""

    def test_roundtrip(self):
        sheet = parse_stylesheet(SAMPLE)
        assert parse_stylesheet(to_css(sheet)) == sheet

    def test_output_is_stable(self):
        once = to_css(parse_stylesheet(SAMPLE))
        assert to_css(parse_stylesheet(once)) == once

    def test_unknown_node_rejected(self):
        with pytest.raises(TypeError):
            to_css(Stylesheet(nodes=[object()]))


class TestTraversal:
    """Depth-first walks and in-place edits of container children."""

    def test_walk_order_and_ancestors(self):
        sheet = parse_stylesheet(SAMPLE)
        wireframes = [
            (node, ancestors)
            for node, ancestors in sheet.walk()
            if isinstance(node, AtRule) and node.name == "wireframe"
        ]
        assert [node.params for node, _ in wireframes] == ["red outline", "auto"]
        assert enclosing_selector(wireframes[0][1]) == ".box"
        assert enclosing_selector(wireframes[1][1]) == ".card:hover, .card:focus"

    def test_enclosing_selector_at_root(self):
        sheet = parse_stylesheet("@wireframe red;")
        (node, ancestors), = list(sheet.walk())
        assert enclosing_selector(ancestors) == ""

    def test_replace_by_identity(self):
        first = AtRule(name="wireframe", params="red")
        second = AtRule(name="wireframe", params="red")
        rule = Rule(selector=".x", nodes=[first, second])
        rule.replace(second, [Declaration("color", "red"), Declaration("padding", "0")])
        assert rule.nodes[0] is first
        assert rule.nodes[1:] == [Declaration("color", "red"), Declaration("padding", "0")]

    def test_replace_missing_node(self):
        with pytest.raises(ValueError):
            Rule(selector=".x").replace(Comment("x"), [])

    def test_insert_at_start(self):
        sheet = Stylesheet(nodes=[Comment("b")])
        sheet.insert(0, [Comment("a")])
        assert sheet.nodes == [Comment("a"), Comment("b")]

    def test_insert_in_middle(self):
        sheet = Stylesheet(nodes=[Comment("a"), Comment("d")])
        sheet.insert(1, [Comment("b"), Comment("c")])
        assert sheet.nodes == [Comment("a"), Comment("b"), Comment("c"), Comment("d")]

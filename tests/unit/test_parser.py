#!/usr/bin/env python3
"""
Tests for the pattern parser and AST builder: node layout, repeat operators,
alternative boundaries and rejection of malformed patterns.
"""

import pytest
from juliusgram.frontend.builder import PatternBuilder
from juliusgram.shared.errors import InvalidPatternSyntax
from juliusgram.shared.nodes import NodeKind, Repeat, RepeatKind


def top_nodes(tree):
    return [tree[i] for i in tree.top_level() if not tree[i].is_placeholder]


def child_nodes(tree, node):
    return [tree.arena[i] for i in tree.arena.siblings(node.child)]


class TestLeaves:
    """Literals and symbol references"""

    def test_single_literal(self, parser):
        tree = parser.parse('"hello"')
        (node,) = top_nodes(tree)
        assert node.content == "hello"
        assert node.kind is NodeKind.LITERAL
        assert node.is_leaf and not node.is_group
        assert node.repeat == Repeat.none()

    def test_single_quotes_and_escapes(self, parser):
        tree = parser.parse(r"'it\'s' " + r'"say \"hi\""')
        assert [n.content for n in top_nodes(tree)] == ["it's", 'say "hi"']

    def test_symbol_reference(self, parser):
        tree = parser.parse("<num_1-x>")
        (node,) = top_nodes(tree)
        assert node.content == "num_1-x"
        assert node.kind is NodeKind.SYMBOL

    def test_sequence_is_sibling_chain(self, parser):
        tree = parser.parse('"a" <b> "c"')
        nodes = top_nodes(tree)
        assert [(n.content, n.kind) for n in nodes] == [
            ("a", NodeKind.LITERAL), ("b", NodeKind.SYMBOL), ("c", NodeKind.LITERAL),
        ]
        assert all(n.parent is None for n in nodes)

    def test_whitespace_is_ignored(self, parser):
        spaced = parser.parse(' ( "a" | < b > ) + ')
        compact = parser.parse('("a"|<b>)+')
        assert [(n.content, n.kind) for n in spaced.arena.nodes] == \
            [(n.content, n.kind) for n in compact.arena.nodes]

    def test_locations_are_columns(self, parser):
        tree = parser.parse('"a"  "b"')
        a, b = top_nodes(tree)
        assert a.location.column == 1
        assert b.location.column == 6


class TestRepeat:
    """Repeat operators attach to the preceding item"""

    @pytest.mark.parametrize("suffix,expected", [
        ("{2,4}", Repeat(RepeatKind.RANGE, 2, 4)),
        ("{3}", Repeat(RepeatKind.RANGE, 3, 3)),
        ("{0,0}", Repeat(RepeatKind.RANGE, 0, 0)),
        ("?", Repeat(RepeatKind.RANGE, 0, 1)),
        ("+", Repeat(RepeatKind.ONE_OR_MORE)),
        ("*", Repeat(RepeatKind.ZERO_OR_MORE)),
    ])
    def test_operators(self, parser, suffix, expected):
        (node,) = top_nodes(parser.parse('"x"' + suffix))
        assert node.repeat == expected

    def test_repeat_on_group_applies_to_group(self, parser):
        tree = parser.parse('("a" "b")+')
        (group,) = top_nodes(tree)
        assert group.is_group
        assert group.repeat.kind is RepeatKind.ONE_OR_MORE
        assert all(c.repeat.kind is RepeatKind.NONE for c in child_nodes(tree, group))

    def test_repeat_only_on_its_item(self, parser):
        a, b = top_nodes(parser.parse('"a"* "b"'))
        assert a.repeat.kind is RepeatKind.ZERO_OR_MORE
        assert b.repeat.kind is RepeatKind.NONE


class TestGroups:
    """Groups, nesting and alternative boundaries"""

    def test_group_owns_child_chain(self, parser):
        tree = parser.parse('("a" "b")')
        (group,) = top_nodes(tree)
        assert group.content == ""
        children = child_nodes(tree, group)
        assert [c.content for c in children] == ["a", "b"]
        group_index = next(tree.top_level())
        assert all(c.parent == group_index for c in children)

    def test_alt_boundary_is_on_node_before_separator(self, parser):
        tree = parser.parse('("a" "b" | "c")')
        (group,) = top_nodes(tree)
        a, b, c = child_nodes(tree, group)
        assert (a.alt_boundary, b.alt_boundary, c.alt_boundary) == (False, True, False)

    def test_alt_after_nested_group_flags_the_group(self, parser):
        tree = parser.parse('(("a") | "b")')
        (outer,) = top_nodes(tree)
        inner, b = child_nodes(tree, outer)
        assert inner.is_group and inner.alt_boundary
        assert b.content == "b" and not b.alt_boundary

    def test_nested_group_at_start_has_no_placeholder(self, parser):
        tree = parser.parse('(("a"))')
        (outer,) = top_nodes(tree)
        (inner,) = child_nodes(tree, outer)
        assert [c.content for c in child_nodes(tree, inner)] == ["a"]

    def test_group_after_leaf_becomes_sibling(self, parser):
        tree = parser.parse('"a" ("b" | "c") "d"')
        a, group, d = top_nodes(tree)
        assert a.content == "a" and group.is_group and d.content == "d"

    def test_every_node_is_leaf_or_group(self, parser):
        tree = parser.parse('"a" ((<b>|"c"){1,2} "d")*')
        for node in tree.arena.nodes:
            assert node.is_leaf != node.is_group


class TestBuilder:
    """Builder events without the lark front end"""

    def test_cursor_rules(self):
        builder = PatternBuilder()
        builder.literal("a")
        builder.enter_group()
        builder.symbol("n")
        builder.alternative()
        builder.literal("b")
        builder.exit_group()
        builder.repeat(Repeat.optional())
        tree = builder.finish()

        a, group = top_nodes(tree)
        assert a.content == "a"
        assert group.repeat == Repeat.optional()
        n, b = child_nodes(tree, group)
        assert n.alt_boundary and n.kind is NodeKind.SYMBOL
        assert b.content == "b"

    def test_unbalanced_finish_is_a_bug(self):
        builder = PatternBuilder()
        builder.enter_group()
        builder.literal("a")
        with pytest.raises(RuntimeError):
            builder.finish()


class TestSyntaxErrors:
    """Malformed or partially matching patterns"""

    @pytest.mark.parametrize("pattern", [
        "",
        "   ",
        '"a',
        'a',
        '"a" )',
        '("a"',
        '("a" |)',
        '(| "a")',
        '()',
        '"a"{}',
        '"a"{1,}',
        '"a"++',
        '"a"{2}?',
        '+',
        '<>',
        '<a b>',
        '<a.b>',
        '"a" | "b"',
        '"a\tb"',
        '"a\nb"',
        '"a\rb"',
        "'a\nb'",
        '"a\\\tb"',
    ])
    def test_rejected(self, parser, pattern):
        with pytest.raises(InvalidPatternSyntax):
            parser.parse(pattern)

    def test_inverted_range(self, parser):
        with pytest.raises(InvalidPatternSyntax) as info:
            parser.parse('"a"{3,1}')
        assert info.value.error_code == "E0002"

    def test_empty_literal(self, parser):
        with pytest.raises(InvalidPatternSyntax):
            parser.parse('"a" ""')

    def test_error_location_points_at_offending_column(self, parser):
        with pytest.raises(InvalidPatternSyntax) as info:
            parser.parse('"a" $')
        assert info.value.location.column == 5
        assert info.value.pattern == '"a" $'

    def test_error_at_end_of_input(self, parser):
        with pytest.raises(InvalidPatternSyntax) as info:
            parser.parse('("a"')
        assert info.value.location.column == 5

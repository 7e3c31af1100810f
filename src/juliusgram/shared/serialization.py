"""
Pattern AST Serialization to S-Expressions
==========================================

Converts a parsed pattern to a canonical S-expression for testing and
debugging. Groups list their alternatives as `(alt ...)` forms, so the
placement of `alt_boundary` flags is visible without reading the arena.

    "a" ("b" | <num>)+

becomes

    (pattern (literal "a") (group (alt (literal "b")) (alt (symbol "num")) :repeat (one-or-more)))
"""

from typing import Any, List, Optional

import sexpdata

from .nodes import NodeArena, NodeKind, PatternTree, RepeatKind, Repeat
from .errors import InternalCompilerError


def _sym(s: str) -> sexpdata.Symbol:
    return sexpdata.Symbol(s)


class PatternSerializer:
    """Build nested lists of sexpdata symbols from a PatternTree."""

    def __init__(self, arena: NodeArena):
        self.arena = arena

    def serialize_chain(self, first: Optional[int]) -> List[Any]:
        return [
            self.serialize_node(index)
            for index in self.arena.siblings(first)
            if not self.arena[index].is_placeholder
        ]

    def serialize_node(self, index: int) -> List[Any]:
        node = self.arena[index]
        if node.is_group:
            core = [_sym("group")] + [
                [_sym("alt")] + alternative for alternative in self._alternatives(index)
            ]
        elif node.kind is NodeKind.LITERAL:
            core = [_sym("literal"), node.content]
        elif node.kind is NodeKind.SYMBOL:
            core = [_sym("symbol"), node.content]
        else:
            raise InternalCompilerError(f"unknown node kind {node.kind!r}")
        if node.repeat.kind is not RepeatKind.NONE:
            core += [_sym(":repeat"), self._serialize_repeat(node.repeat)]
        return core

    def _alternatives(self, index: int) -> List[List[Any]]:
        alternatives: List[List[Any]] = [[]]
        for child in self.arena.children(index):
            node = self.arena[child]
            if node.is_placeholder:
                continue
            alternatives[-1].append(self.serialize_node(child))
            if node.alt_boundary:
                alternatives.append([])
        return [alt for alt in alternatives if alt]

    def _serialize_repeat(self, repeat: Repeat) -> List[Any]:
        if repeat.kind is RepeatKind.RANGE:
            return [_sym("range"), repeat.minimum, repeat.maximum]
        if repeat.kind is RepeatKind.ZERO_OR_MORE:
            return [_sym("zero-or-more")]
        if repeat.kind is RepeatKind.ONE_OR_MORE:
            return [_sym("one-or-more")]
        raise InternalCompilerError(f"unknown repeat kind {repeat.kind!r}")


def serialize_pattern(tree: PatternTree) -> str:
    """Render a parsed pattern as a single-line S-expression."""
    serializer = PatternSerializer(tree.arena)
    sexpr = [_sym("pattern")] + serializer.serialize_chain(tree.first)
    return sexpdata.dumps(sexpr)

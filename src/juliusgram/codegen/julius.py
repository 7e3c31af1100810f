"""
Julius grammar/voca code generation

Lowers a PatternTree into `.grammar` production lines and `.voca` blocks.
The generator is pure: it reads the arena, threads the identifier counter
explicitly and returns the text together with the next free id.

Identifiers:
- top level nodes are `WORD_<n>`, each wrapped by `ROOT_<n> : WORD_<n>` and
  chained in one `S : NS_B ROOT_<n> ... NS_E` rule
- nodes nested under `P` are `P_<n>`, with `n` restarting at 0 per chain
- a repeated node keeps its id for the repeat productions and continues as
  `<id>_LOOP`
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..shared.nodes import NodeArena, NodeKind, PatternNode, PatternTree, RepeatKind
from ..shared.errors import InternalCompilerError
from ..transliteration.base import Transliterator
from ..utils.config import (
    START_SYMBOL, SILENCE_BEGIN, SILENCE_END, NOISE,
    ROOT_PREFIX, WORD_PREFIX, LOOP_SUFFIX,
    GRAMMAR_SEPARATOR, VOCA_SECTION_PREFIX, VOCA_SEPARATOR,
)

logger = logging.getLogger(__name__)


def grammar_line(name: str, symbols: List[str]) -> str:
    return f"{name}{GRAMMAR_SEPARATOR}{' '.join(symbols)}\n"


def voca_block(section: str, entries: List[tuple]) -> str:
    lines = [f"{VOCA_SECTION_PREFIX}{section}\n"]
    lines += [f"{literal}{VOCA_SEPARATOR}{phonetic}\n" for literal, phonetic in entries]
    return "".join(lines)


@dataclass(frozen=True)
class GeneratedText:
    """Output of one generate() call."""
    grammar: str
    vocabulary: str
    next_id: int


class JuliusCodeGenerator:
    """Recursive lowering of one pattern's arena."""

    def __init__(self, arena: NodeArena, transliterator: Transliterator):
        self.arena = arena
        self.transliterator = transliterator

    def generate(self, start_id: int, first: Optional[int], parent_id: Optional[str] = None) -> GeneratedText:
        num = start_id
        grammar: List[str] = []
        vocabulary: List[str] = []

        if parent_id is None:
            grammar.extend(self._root_rules(start_id, first))

        for index in self.arena.siblings(first):
            node = self.arena[index]
            if node.is_placeholder:
                continue

            if parent_id is None:
                node_id = f"{WORD_PREFIX}_{num}"
            else:
                node_id = f"{parent_id}_{num}"

            node_id = self._lower_repeat(node, node_id, grammar)

            if node.is_group:
                for alternative in self._alternatives(index, node_id):
                    grammar.append(grammar_line(node_id, alternative))
                nested = self.generate(0, node.child, node_id)
                grammar.append(nested.grammar)
                vocabulary.append(nested.vocabulary)
            elif node.kind is NodeKind.LITERAL:
                phonetic = self.transliterator.phonetic(node.content)
                vocabulary.append(voca_block(node_id, [(node.content, phonetic)]))
            elif node.kind is NodeKind.SYMBOL:
                grammar.append(grammar_line(node_id, [node.content]))
            else:
                raise InternalCompilerError(f"unknown node kind {node.kind!r} for {node_id}")
            num += 1

        return GeneratedText("".join(grammar), "".join(vocabulary), num)

    def _root_rules(self, start_id: int, first: Optional[int]) -> List[str]:
        """`S : NS_B ROOT_n ... NS_E` followed by `ROOT_n : WORD_n` lines."""
        roots = []
        n = start_id
        for index in self.arena.siblings(first):
            if self.arena[index].is_placeholder:
                continue
            roots.append(n)
            n += 1
        top = grammar_line(
            START_SYMBOL,
            [SILENCE_BEGIN] + [f"{ROOT_PREFIX}_{n}" for n in roots] + [SILENCE_END],
        )
        return [top] + [grammar_line(f"{ROOT_PREFIX}_{n}", [f"{WORD_PREFIX}_{n}"]) for n in roots]

    def _lower_repeat(self, node: PatternNode, node_id: str, grammar: List[str]) -> str:
        """Emit repeat productions for `node_id`; return the id the node continues as."""
        repeat = node.repeat
        loop_id = node_id + LOOP_SUFFIX
        if repeat.kind is RepeatKind.NONE:
            return node_id
        if repeat.kind is RepeatKind.RANGE:
            for count in range(repeat.minimum, repeat.maximum + 1):
                if count == 0:
                    grammar.append(grammar_line(node_id, [NOISE]))
                else:
                    grammar.append(grammar_line(node_id, [loop_id] * count))
        elif repeat.kind is RepeatKind.ZERO_OR_MORE:
            grammar.append(grammar_line(node_id, [NOISE]))
            grammar.append(grammar_line(node_id, [loop_id]))
            grammar.append(grammar_line(node_id, [node_id, loop_id]))
        elif repeat.kind is RepeatKind.ONE_OR_MORE:
            grammar.append(grammar_line(node_id, [loop_id]))
            grammar.append(grammar_line(node_id, [node_id, loop_id]))
        else:
            raise InternalCompilerError(f"unknown repeat kind {repeat.kind!r} for {node_id}")
        return loop_id

    def _alternatives(self, index: int, node_id: str) -> List[List[str]]:
        """Child ids of a group, split after every child flagged alt_boundary."""
        alternatives: List[List[str]] = [[]]
        m = 0
        for child in self.arena.children(index):
            child_node = self.arena[child]
            if child_node.is_placeholder:
                continue
            alternatives[-1].append(f"{node_id}_{m}")
            m += 1
            if child_node.alt_boundary:
                alternatives.append([])
        return [alternative for alternative in alternatives if alternative]


def generate(
    tree: PatternTree,
    start_id: int,
    transliterator: Transliterator,
) -> GeneratedText:
    """Lower a parsed pattern starting at identifier `start_id`."""
    result = JuliusCodeGenerator(tree.arena, transliterator).generate(start_id, tree.first)
    line_count = result.grammar.count("\n")
    logger.debug(f"Generated ids {start_id}..{result.next_id - 1}: {line_count} grammar line(s)")
    return result

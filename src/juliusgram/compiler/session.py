"""
Compilation Session

Accumulates grammar and vocabulary text over repeated `add`/`add_symbol`
calls. The identifier counter only ever grows, so every nonterminal emitted
during the session's lifetime is unique, even across `reset()`.

A session is not safe for concurrent mutation; use one per grammar build.
"""

import logging
import re
from typing import Iterable, Optional

from ..codegen.julius import generate, voca_block
from ..frontend.parser import Parser
from ..shared.errors import InvalidSymbolName
from ..shared.nodes import PatternTree
from ..shared.serialization import serialize_pattern
from ..transliteration.base import Transliterator
from ..transliteration.kana import KanaTransliterator
from ..utils.config import (
    DEFAULT_GRAMMAR_TEXT, DEFAULT_VOCABULARY_TEXT, PATTERN_SOURCE_NAME, SYMBOL_NAME_PATTERN,
)

logger = logging.getLogger(__name__)

_SYMBOL_NAME = re.compile(SYMBOL_NAME_PATTERN)


class CompilationSession:
    """
    Julius grammar being built from patterns and symbol groups.

    Every mutating method computes its full output before touching state, so
    a failing call (bad pattern, bad symbol name, untransliterable literal)
    leaves the session exactly as it was.
    """

    DEFAULT_GRAMMAR = DEFAULT_GRAMMAR_TEXT
    DEFAULT_VOCABULARY = DEFAULT_VOCABULARY_TEXT

    def __init__(self, transliterator: Optional[Transliterator] = None, parser: Optional[Parser] = None):
        self.transliterator: Transliterator = transliterator or KanaTransliterator()
        self.parser: Parser = parser or Parser()
        self.next_id: int = 0
        self.grammar: str = self.DEFAULT_GRAMMAR
        self.vocabulary: str = self.DEFAULT_VOCABULARY

    def parse(self, pattern: str, source_file: str = PATTERN_SOURCE_NAME, line: int = 1) -> PatternTree:
        return self.parser.parse(pattern, source_file, line)

    def add(self, pattern: str, source_file: str = PATTERN_SOURCE_NAME, line: int = 1) -> None:
        """Compile `pattern` and append it as one more top-level sentence."""
        tree = self.parse(pattern, source_file, line)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"AST for {pattern!r}: {serialize_pattern(tree)}")
        result = generate(tree, self.next_id, self.transliterator)
        self.grammar += result.grammar
        self.vocabulary += result.vocabulary
        self.next_id = result.next_id

    def add_symbol(self, name: str, values: Iterable) -> None:
        """Append a vocabulary section `name` listing every value."""
        if not isinstance(name, str) or not _SYMBOL_NAME.fullmatch(name):
            raise InvalidSymbolName(str(name))
        entries = []
        for value in values:
            text = str(value)
            entries.append((text, self.transliterator.phonetic(text)))
        self.vocabulary += voca_block(name, entries)
        logger.debug(f"Added symbol {name} with {len(entries)} value(s)")

    def reset(self) -> None:
        """Drop all accumulated text; the identifier counter keeps counting."""
        self.grammar = self.DEFAULT_GRAMMAR
        self.vocabulary = self.DEFAULT_VOCABULARY

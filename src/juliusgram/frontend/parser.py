"""
Pattern Parser

Parses a pattern with lark (LALR, cached) and replays the parse tree into a
PatternBuilder, so the AST is built by the same cursor rules whatever the
shape of the lark tree.
"""

import re
from pathlib import Path
from typing import Optional
import logging

from lark import Lark, Token, Tree
from lark.visitors import Interpreter
from lark.exceptions import (
    UnexpectedToken, UnexpectedCharacters, UnexpectedEOF, ParseError as LarkParseError,
)

from .builder import PatternBuilder
from ..shared.nodes import PatternTree, Repeat
from ..shared.errors import InvalidPatternSyntax
from ..shared.source_location import SourceLocation
from ..utils.config import DEFAULT_PARSER_CACHE_FILE, PATTERN_SOURCE_NAME

logger = logging.getLogger(__name__)

_ESCAPE = re.compile(r"\\(.)")


class PatternInterpreter(Interpreter):
    """Walks the lark tree top-down, emitting builder events in source order."""

    def __init__(self, builder: PatternBuilder, source_file: str, line: int = 1):
        super().__init__()
        self.builder = builder
        self.source_file = source_file
        self.line = line

    def _location(self, token: Token) -> SourceLocation:
        return SourceLocation(
            file=self.source_file,
            line=self.line,
            column=token.column or 0,
            end_column=token.end_column or 0,
        )

    def item(self, tree: Tree) -> None:
        for child in tree.children:
            self.visit(child)

    def group(self, tree: Tree) -> None:
        self.builder.enter_group(self._tree_location(tree))
        for index, expr in enumerate(tree.children):
            if index:
                self.builder.alternative()
            self.visit(expr)
        self.builder.exit_group()

    def symbol(self, tree: Tree) -> None:
        token = tree.children[0]
        self.builder.symbol(str(token), self._location(token))

    def string(self, tree: Tree) -> None:
        token = tree.children[0]
        text = _ESCAPE.sub(r"\1", str(token)[1:-1])
        if not text:
            raise InvalidPatternSyntax(
                "invalid pattern syntax: empty string literal",
                self.builder.source,
                self._location(token),
                label="literal has no text",
            )
        self.builder.literal(text, self._location(token))

    def range_repeat(self, tree: Tree) -> None:
        minimum, maximum = (int(t) for t in tree.children)
        if minimum > maximum:
            raise InvalidPatternSyntax(
                f"invalid pattern syntax: repeat range {{{minimum},{maximum}}} is empty",
                self.builder.source,
                self._location(tree.children[0]),
                error_code="E0002",
                help="write the smaller count first",
            )
        self.builder.repeat(Repeat.range(minimum, maximum))

    def exact_repeat(self, tree: Tree) -> None:
        self.builder.repeat(Repeat.exactly(int(tree.children[0])))

    def one_or_more(self, tree: Tree) -> None:
        self.builder.repeat(Repeat.one_or_more())

    def zero_or_more(self, tree: Tree) -> None:
        self.builder.repeat(Repeat.zero_or_more())

    def optional(self, tree: Tree) -> None:
        self.builder.repeat(Repeat.optional())

    def _tree_location(self, tree: Tree) -> Optional[SourceLocation]:
        meta = tree.meta
        if getattr(meta, "empty", True):
            return None
        return SourceLocation(file=self.source_file, line=self.line, column=meta.column)


class Parser:
    """
    Pattern parser.

    - Takes a pattern string, returns a PatternTree
    - The whole input must match; anything else is InvalidPatternSyntax
    - Uses Lark LALR with its native cache
    """

    def __init__(self, cache_file: str = DEFAULT_PARSER_CACHE_FILE):
        grammar_path = Path(__file__).parent / "grammar.lark"
        self.parser = Lark.open(
            str(grammar_path),
            start='start',
            parser='lalr',              # Required for caching
            cache=cache_file,
            propagate_positions=True,   # Column tracking for diagnostics
            maybe_placeholders=False,
        )

    def parse(self, pattern: str, source_file: str = PATTERN_SOURCE_NAME, line: int = 1) -> PatternTree:
        """Parse a pattern to its AST."""
        try:
            tree = self.parser.parse(pattern)
        except (UnexpectedToken, UnexpectedCharacters, UnexpectedEOF, LarkParseError) as e:
            location = None
            column = getattr(e, "column", None)
            if isinstance(e, UnexpectedEOF) or getattr(getattr(e, "token", None), "type", None) == "$END":
                location = SourceLocation(file=source_file, line=line, column=len(pattern) + 1)
            elif isinstance(column, int) and column > 0:
                location = SourceLocation(file=source_file, line=line, column=column)
            raise InvalidPatternSyntax(
                f"invalid pattern syntax: {_describe(e, pattern)}",
                pattern,
                location,
            ) from e

        builder = PatternBuilder(pattern)
        PatternInterpreter(builder, source_file, line).visit(tree)
        logger.debug(f"Parsed pattern {pattern!r}")
        return builder.finish()


def _describe(error: Exception, pattern: str) -> str:
    """Short, single-line reason for a lark failure."""
    if isinstance(error, UnexpectedCharacters):
        return f"unexpected character {error.char!r}"
    if isinstance(error, UnexpectedEOF) or not pattern.strip():
        return "unexpected end of pattern"
    token = getattr(error, "token", None)
    if token is not None:
        if token.type == "$END":
            return "unexpected end of pattern"
        return f"unexpected {str(token)!r}"
    return "pattern does not match"


_default_parser: Optional[Parser] = None


def parse(pattern: str, source_file: str = PATTERN_SOURCE_NAME, line: int = 1) -> PatternTree:
    """Parse with a lazily created module-wide Parser."""
    global _default_parser
    if _default_parser is None:
        _default_parser = Parser()
    return _default_parser.parse(pattern, source_file, line)

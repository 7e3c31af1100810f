"""
Pattern AST Definitions

The tree is stored in an arena: every node lives in `NodeArena.nodes` and
refers to its parent, first child and next sibling by index. A group node
owns a sibling chain through `child`; the chain is split into alternatives
by `alt_boundary` flags, which sit on the node *before* each `|`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

from .source_location import SourceLocation


class NodeKind(Enum):
    """Meaning of a leaf's content"""
    LITERAL = "literal"  # quoted text, emitted as a vocabulary entry
    SYMBOL = "symbol"    # <name>, emitted as a grammar reference


class RepeatKind(Enum):
    """Repetition policy attached to a node"""
    NONE = "none"
    RANGE = "range"                # {m,n}, {n} and ?
    ZERO_OR_MORE = "zero_or_more"  # *
    ONE_OR_MORE = "one_or_more"    # +


@dataclass(frozen=True)
class Repeat:
    """Repeat operator; `minimum`/`maximum` are only meaningful for RANGE."""
    kind: RepeatKind = RepeatKind.NONE
    minimum: int = 0
    maximum: int = 0

    @classmethod
    def none(cls) -> Repeat:
        return cls(RepeatKind.NONE)

    @classmethod
    def range(cls, minimum: int, maximum: int) -> Repeat:
        return cls(RepeatKind.RANGE, minimum, maximum)

    @classmethod
    def exactly(cls, count: int) -> Repeat:
        return cls(RepeatKind.RANGE, count, count)

    @classmethod
    def optional(cls) -> Repeat:
        return cls(RepeatKind.RANGE, 0, 1)

    @classmethod
    def zero_or_more(cls) -> Repeat:
        return cls(RepeatKind.ZERO_OR_MORE)

    @classmethod
    def one_or_more(cls) -> Repeat:
        return cls(RepeatKind.ONE_OR_MORE)


@dataclass
class PatternNode:
    """
    One unit of a pattern: a leaf (literal/symbol) or a group.

    A leaf has non-empty `content` and no `child`; a group has empty
    `content` and a `child`. A node with neither is a placeholder that the
    builder has not filled yet.
    """
    content: str = ""
    kind: NodeKind = NodeKind.LITERAL
    repeat: Repeat = field(default_factory=Repeat.none)
    child: Optional[int] = None
    next: Optional[int] = None
    parent: Optional[int] = None
    alt_boundary: bool = False
    location: Optional[SourceLocation] = None

    @property
    def is_group(self) -> bool:
        return self.child is not None

    @property
    def is_leaf(self) -> bool:
        return self.child is None and self.content != ""

    @property
    def is_placeholder(self) -> bool:
        return self.child is None and self.content == ""

    @property
    def is_occupied(self) -> bool:
        return not self.is_placeholder


class NodeArena:
    """Owner of all nodes built for one pattern."""

    def __init__(self) -> None:
        self.nodes: List[PatternNode] = []

    def new_node(self, parent: Optional[int] = None) -> int:
        self.nodes.append(PatternNode(parent=parent))
        return len(self.nodes) - 1

    def __getitem__(self, index: int) -> PatternNode:
        return self.nodes[index]

    def __len__(self) -> int:
        return len(self.nodes)

    def siblings(self, first: Optional[int]) -> Iterator[int]:
        """Indices of `first` and every node after it in its chain."""
        index = first
        while index is not None:
            yield index
            index = self.nodes[index].next

    def children(self, index: int) -> Iterator[int]:
        return self.siblings(self.nodes[index].child)


@dataclass
class PatternTree:
    """Result of parsing one pattern: the arena plus its top-level chain."""
    arena: NodeArena
    first: int
    source: str = ""

    def top_level(self) -> Iterator[int]:
        return self.arena.siblings(self.first)

    def __getitem__(self, index: int) -> PatternNode:
        return self.arena[index]

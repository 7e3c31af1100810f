"""
Pattern AST Builder

Builds the node arena from parse events in source order. The builder keeps a
cursor on the "current" node and a stack of open group indices:

- a literal or symbol fills the cursor node in place when it is still a
  placeholder, otherwise it becomes a new sibling of the cursor
- `(` turns the cursor (or a new sibling) into a group and descends into a
  fresh child placeholder
- `)` pops back to the group node
- `|` flags the cursor node: the *next* sibling starts a new alternative
- repeat operators apply to the cursor node
"""

import logging
from typing import List, Optional

from ..shared.nodes import NodeArena, NodeKind, PatternTree, Repeat
from ..shared.source_location import SourceLocation

logger = logging.getLogger(__name__)


class PatternBuilder:
    """Cursor-driven AST builder for a single pattern."""

    def __init__(self, source: str = "") -> None:
        self.source = source
        self.arena = NodeArena()
        self.first: int = self.arena.new_node()
        self.cursor: int = self.first
        self._groups: List[int] = []

    def _current_parent(self) -> Optional[int]:
        return self._groups[-1] if self._groups else None

    def _advance(self) -> int:
        """Return the node to write into, creating a sibling if needed."""
        node = self.arena[self.cursor]
        if node.is_occupied:
            sibling = self.arena.new_node(parent=self._current_parent())
            node.next = sibling
            self.cursor = sibling
        return self.cursor

    def literal(self, text: str, location: Optional[SourceLocation] = None) -> None:
        node = self.arena[self._advance()]
        node.content = text
        node.kind = NodeKind.LITERAL
        node.location = location

    def symbol(self, name: str, location: Optional[SourceLocation] = None) -> None:
        node = self.arena[self._advance()]
        node.content = name
        node.kind = NodeKind.SYMBOL
        node.location = location

    def enter_group(self, location: Optional[SourceLocation] = None) -> None:
        group = self._advance()
        self.arena[group].location = location
        child = self.arena.new_node(parent=group)
        self.arena[group].child = child
        self._groups.append(group)
        self.cursor = child

    def exit_group(self) -> None:
        self.cursor = self._groups.pop()

    def alternative(self) -> None:
        self.arena[self.cursor].alt_boundary = True

    def repeat(self, repeat: Repeat) -> None:
        self.arena[self.cursor].repeat = repeat

    def finish(self) -> PatternTree:
        if self._groups:
            raise RuntimeError(f"Builder bug: {len(self._groups)} group(s) left open")
        logger.debug(f"Built pattern tree with {len(self.arena)} node(s)")
        return PatternTree(arena=self.arena, first=self.first, source=self.source)

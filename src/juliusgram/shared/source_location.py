"""
Source Location (Span) inside a pattern
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """
    Position of a token in a pattern.

    - File (or `<pattern>` for patterns passed directly), line, column
    - Columns are 1-based, matching lark token positions
    - Immutable (frozen) for hashability
    """
    file: str
    line: int
    column: int
    end_column: int = 0

    def __str__(self) -> str:
        """Format as file:line:column"""
        return f"{self.file}:{self.line}:{self.column}"

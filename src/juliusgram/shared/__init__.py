"""
Shared components: AST nodes, source locations, errors and serialization.
"""

from .source_location import SourceLocation
from .errors import (
    Error, ErrorReporter, JuliusGramError, InvalidPatternSyntax, InvalidSymbolName,
    TransliterationError, InternalCompilerError,
)
from .nodes import (
    NodeKind, RepeatKind, Repeat, PatternNode, NodeArena, PatternTree,
)
from .serialization import serialize_pattern

"""
Frontend: pattern grammar, parser and AST builder.
"""

from .builder import PatternBuilder
from .parser import Parser, parse

__all__ = ["PatternBuilder", "Parser", "parse"]

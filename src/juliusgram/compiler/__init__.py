"""
Compiler: session, patterns-file driver and Julius toolchain.
"""

from .session import CompilationSession
from .driver import CompilerDriver, CompilationResult
from .toolchain import GrammarToolchain, ToolResult, ToolRunner, SubprocessToolRunner

__all__ = [
    "CompilationSession", "CompilerDriver", "CompilationResult",
    "GrammarToolchain", "ToolResult", "ToolRunner", "SubprocessToolRunner",
]

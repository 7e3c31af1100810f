"""
juliusgram: compile utterance patterns into Julius grammar/voca files.

    session = CompilationSession()
    session.add('"コーヒー" ("ください" | "おねがい")?')
    session.grammar, session.vocabulary
"""

from .compiler.session import CompilationSession
from .compiler.driver import CompilerDriver, CompilationResult
from .compiler.toolchain import GrammarToolchain, ToolResult, ToolRunner, SubprocessToolRunner
from .codegen.julius import GeneratedText, generate
from .frontend.parser import Parser, parse
from .shared.errors import (
    JuliusGramError, InvalidPatternSyntax, InvalidSymbolName, TransliterationError,
    InternalCompilerError,
)
from .transliteration import Transliterator, CallableTransliterator, KanaTransliterator

__version__ = "0.1.0"

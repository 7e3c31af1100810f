"""
Compiler Driver

Compiles a whole patterns file into a session: one pattern per line, blank
lines and `#` comments skipped. Bad lines are reported (all of them, with
file/line/column) instead of stopping at the first one.
"""

from pathlib import Path
from typing import Optional, Union
import logging

from .session import CompilationSession
from ..shared.errors import ErrorReporter, JuliusGramError
from ..shared.source_location import SourceLocation
from ..utils.config import DEFAULT_FILE_ENCODING
from ..utils.io_utils import iter_pattern_lines, read_source_file

logger = logging.getLogger(__name__)


class CompilationResult:
    """Compilation result"""
    def __init__(
        self,
        session: CompilationSession,
        reporter: ErrorReporter,
        compiled: int = 0,
    ):
        self.session = session
        self.reporter = reporter
        self.compiled = compiled

    @property
    def success(self) -> bool:
        return not self.reporter.has_errors()

    def has_errors(self) -> bool:
        return self.reporter.has_errors()

    def get_errors(self) -> list:
        if self.reporter.has_errors():
            return [self.reporter.format_all_errors(color=False)]
        return []


class CompilerDriver:
    """Feeds patterns files through a CompilationSession."""

    def __init__(self, session: Optional[CompilationSession] = None):
        self.session = session or CompilationSession()

    def compile_patterns(self, source: str, source_file: str = "<patterns>") -> CompilationResult:
        """
        Add every pattern line of `source` to the session.

        Lines that compile are committed even when other lines fail.
        """
        reporter = ErrorReporter({source_file: source})
        compiled = 0
        for line_number, pattern in iter_pattern_lines(source):
            try:
                self.session.add(pattern, source_file, line_number)
            except JuliusGramError as e:
                reporter.report(e, SourceLocation(file=source_file, line=line_number, column=1))
                continue
            compiled += 1
        logger.debug(f"{source_file}: {compiled} pattern(s) compiled, {len(reporter.errors)} error(s)")
        return CompilationResult(self.session, reporter, compiled)

    def compile_file(self, path: Union[Path, str], encoding: str = DEFAULT_FILE_ENCODING) -> CompilationResult:
        return self.compile_patterns(read_source_file(path, encoding), str(path))

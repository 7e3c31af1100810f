"""
Julius toolchain: writing `.voca`/`.grammar` files and running `mkdfa` and
`generate` on them.

Process invocation sits behind ToolRunner so tests (and callers with their
own sandboxing) can substitute it; a tool that cannot be started is reported
as a failed ToolResult rather than an exception.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .session import CompilationSession
from ..utils.config import (
    DEFAULT_OUTPUT_BASENAME, DEFAULT_MKDFA_COMMAND, DEFAULT_GENERATE_COMMAND,
    GRAMMAR_FILE_EXTENSION, VOCA_FILE_EXTENSION, GENERATED_FILE_EXTENSIONS,
    DEFAULT_FILE_ENCODING,
)
from ..utils.io_utils import write_output_file

logger = logging.getLogger(__name__)


@dataclass
class ToolResult:
    """Outcome of one external tool run."""
    args: List[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ToolRunner(ABC):
    """Runs an external command to completion."""

    @abstractmethod
    def run(self, args: Sequence[str]) -> ToolResult:
        raise NotImplementedError


class SubprocessToolRunner(ToolRunner):
    """ToolRunner backed by subprocess.run."""

    def __init__(self, cwd: Optional[Path] = None, timeout: Optional[float] = 300):
        self.cwd = cwd
        self.timeout = timeout

    def run(self, args: Sequence[str]) -> ToolResult:
        args = [str(a) for a in args]
        logger.debug(f"Running {' '.join(args)}")
        try:
            completed = subprocess.run(
                args, capture_output=True, text=True, cwd=self.cwd, timeout=self.timeout,
            )
        except FileNotFoundError as e:
            return ToolResult(args, 127, stderr=f"{args[0]}: command not found ({e})")
        except subprocess.TimeoutExpired:
            return ToolResult(args, 124, stderr=f"{args[0]}: timed out after {self.timeout}s")
        return ToolResult(args, completed.returncode, completed.stdout or "", completed.stderr or "")


class GrammarToolchain:
    """
    Output files for one grammar base name.

    `<base>.voca` and `<base>.grammar` are written from a session; mkdfa turns
    them into `<base>.dfa`, `<base>.dict` and `<base>.term`.
    """

    def __init__(
        self,
        base_name: Union[str, Path] = DEFAULT_OUTPUT_BASENAME,
        runner: Optional[ToolRunner] = None,
        mkdfa_command: str = DEFAULT_MKDFA_COMMAND,
        generate_command: str = DEFAULT_GENERATE_COMMAND,
        encoding: str = DEFAULT_FILE_ENCODING,
    ):
        self.base_name = Path(base_name)
        self.runner = runner or SubprocessToolRunner()
        self.mkdfa_command = mkdfa_command
        self.generate_command = generate_command
        self.encoding = encoding

    def set_file_name(self, base_name: Union[str, Path]) -> None:
        self.base_name = Path(base_name)

    def path_for(self, extension: str) -> Path:
        return self.base_name.with_name(self.base_name.name + extension)

    def write_files(self, session: CompilationSession) -> List[Path]:
        """Write the session's vocabulary and grammar, voca first."""
        return [
            write_output_file(self.path_for(VOCA_FILE_EXTENSION), session.vocabulary, self.encoding),
            write_output_file(self.path_for(GRAMMAR_FILE_EXTENSION), session.grammar, self.encoding),
        ]

    def mkdfa(self, session: CompilationSession) -> ToolResult:
        """Write both files and compile them into a DFA."""
        self.write_files(session)
        result = self.runner.run([self.mkdfa_command, str(self.base_name)])
        if not result.ok:
            logger.debug(f"mkdfa failed with exit status {result.returncode}")
        return result

    def test(self) -> ToolResult:
        """Generate sample sentences from the compiled DFA."""
        return self.runner.run([self.generate_command, str(self.base_name)])

    def delete_files(self) -> List[Path]:
        """Remove every generated file that exists; return the removed paths."""
        removed = []
        for extension in GENERATED_FILE_EXTENSIONS:
            path = self.path_for(extension)
            if path.exists():
                path.unlink()
                removed.append(path)
        return removed

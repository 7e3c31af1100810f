"""
Centralized file I/O utilities.

- Single place for encoding handling
- Use Path.read_text()/write_text() consistently (no raw open/read)
"""

from pathlib import Path
from typing import List, Tuple, Union

from .config import DEFAULT_FILE_ENCODING, COMMENT_PREFIX


def read_source_file(path: Union[Path, str], encoding: str = DEFAULT_FILE_ENCODING) -> str:
    """Read a patterns file with standard encoding."""
    p = Path(path) if not isinstance(path, Path) else path
    return p.read_text(encoding=encoding)


def write_output_file(path: Union[Path, str], text: str, encoding: str = DEFAULT_FILE_ENCODING) -> Path:
    """Write generated grammar/voca text, returning the written path."""
    p = Path(path) if not isinstance(path, Path) else path
    p.write_text(text, encoding=encoding)
    return p


def iter_pattern_lines(text: str) -> List[Tuple[int, str]]:
    """(line_number, pattern) pairs, skipping blank lines and comments."""
    result = []
    for number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue
        result.append((number, line))
    return result

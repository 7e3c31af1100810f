"""
Error Reporting

Diagnostics for patterns are rendered rustc style: a header with the error
code, a `-->` arrow with file:line:column, the offending pattern line and a
caret under the failing column.
"""

import os
import sys
from dataclasses import dataclass
from typing import Optional, List, Dict
from .source_location import SourceLocation
from ..utils.config import ERROR_POINTER_CHAR


# ---------------------------------------------------------------------------
# ANSI color helpers (disabled when NO_COLOR is set)
# ---------------------------------------------------------------------------

def _use_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    explicit = os.environ.get("JULIUSGRAM_COLOR", "").lower()
    if explicit in ("0", "false", "no", "never"):
        return False
    return True

_BOLD   = "\033[1m"
_RED    = "\033[31m"
_BLUE   = "\033[34m"
_CYAN   = "\033[36m"
_RESET  = "\033[0m"

def _style(text: str, *codes: str, color: bool = True) -> str:
    if not color:
        return text
    prefix = "".join(codes)
    return f"{prefix}{text}{_RESET}" if prefix else text


# ---------------------------------------------------------------------------
# Error dataclass
# ---------------------------------------------------------------------------

@dataclass
class Error:
    """A single reported diagnostic."""
    message: str
    location: Optional[SourceLocation]
    code: Optional[str] = None
    help: Optional[str] = None
    note: Optional[str] = None
    label: Optional[str] = None


# ---------------------------------------------------------------------------
# Formatting engine
# ---------------------------------------------------------------------------

def _format_diagnostic(
    error: Error,
    source_files: Dict[str, str],
    color: bool = False,
) -> str:
    """
    Render a single diagnostic.

    Example output (plain, no color)::

        error[E0001]: invalid pattern syntax: unexpected character '}'
         --> <pattern>:1:4
          |
        1 | "a"}
          |    ^
    """
    out: List[str] = []

    code_str = f"[{error.code}]" if error.code else ""
    out.append(
        _style(f"error{code_str}", _BOLD, _RED, color=color)
        + _style(f": {error.message}", _BOLD, color=color)
    )

    if error.location is None:
        out.append(_style(" --> ", _BOLD, _BLUE, color=color) + "<unknown location>")
        _append_annotations(out, error, 1, color)
        return "\n".join(out)

    loc = error.location
    source = source_files.get(loc.file)
    src_lines = source.split("\n") if source is not None else []
    idx = loc.line - 1
    if source is None or not 0 <= idx < len(src_lines):
        out.append(
            _style(" --> ", _BOLD, _BLUE, color=color)
            + f"{loc.file}:{loc.line}:{loc.column}"
        )
        _append_annotations(out, error, 1, color)
        return "\n".join(out)

    code_line = src_lines[idx]
    gw = max(len(str(loc.line)), 1)
    out.append(_style(" " * gw + "--> ", _BOLD, _BLUE, color=color) + f"{loc.file}:{loc.line}:{loc.column}")
    out.append(_style(" " * (gw + 1) + "|", _BOLD, _BLUE, color=color))
    out.append(_style(str(loc.line).rjust(gw) + " | ", _BOLD, _BLUE, color=color) + code_line)

    col_start = max(loc.column, 1) - 1
    span_len = max(1, loc.end_column - loc.column) if loc.end_column > loc.column else 1
    carets = " " * col_start + ERROR_POINTER_CHAR * span_len
    label_suffix = f" {error.label}" if error.label else ""
    out.append(
        _style(" " * (gw + 1) + "| ", _BOLD, _BLUE, color=color)
        + _style(carets + label_suffix, _BOLD, _RED, color=color)
    )

    _append_annotations(out, error, gw, color)
    return "\n".join(out)


def _append_annotations(
    out: List[str],
    error: Error,
    gw: int,
    color: bool,
) -> None:
    if not (error.help or error.note):
        return
    out.append(_style(" " * (gw + 1) + "|", _BOLD, _BLUE, color=color))
    pad = " " * (gw + 1)
    if error.help:
        out.append(
            _style(f"{pad}= ", _BOLD, _CYAN, color=color)
            + _style("help: ", _BOLD, color=color)
            + error.help
        )
    if error.note:
        out.append(
            _style(f"{pad}= ", _BOLD, _CYAN, color=color)
            + _style("note: ", _BOLD, color=color)
            + error.note
        )


# ---------------------------------------------------------------------------
# ErrorReporter
# ---------------------------------------------------------------------------

class ErrorReporter:
    """Collects diagnostics (e.g. one per bad line of a patterns file)."""

    def __init__(self, source_files: Dict[str, str]):
        self.source_files = source_files
        self.errors: List[Error] = []

    def report_error(
        self,
        message: str,
        location: Optional[SourceLocation],
        code: Optional[str] = None,
        help: Optional[str] = None,
        note: Optional[str] = None,
        label: Optional[str] = None,
    ) -> None:
        self.errors.append(Error(
            message=message,
            location=location,
            code=code,
            help=help,
            note=note,
            label=label,
        ))

    def report(self, exc: "JuliusGramError", location: Optional[SourceLocation] = None) -> None:
        """Record a raised error; `location` is used when the error has none."""
        self.report_error(
            exc.message,
            exc.location or location,
            code=exc.error_code,
            help=getattr(exc, "help_text", None),
            label=getattr(exc, "label_text", None),
        )

    def format_error(self, error: Error, color: Optional[bool] = None) -> str:
        use_color = color if color is not None else _use_color()
        return _format_diagnostic(error, self.source_files, color=use_color)

    def format_all_errors(self, color: Optional[bool] = None) -> str:
        parts = [self.format_error(e, color=color) for e in self.errors]
        use_color = color if color is not None else _use_color()
        count = len(self.errors)
        summary = f"aborting due to {count} previous error{'s' if count != 1 else ''}"
        parts.append(
            _style("error", _BOLD, _RED, color=use_color)
            + _style(f": {summary}", _BOLD, color=use_color)
        )
        return "\n\n".join(parts)

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def print_errors(self) -> None:
        if self.errors:
            print(self.format_all_errors(color=_use_color()), file=sys.stderr)


# ============================================================================
# Exception Classes
# ============================================================================

class JuliusGramError(Exception):
    """Base exception for all user-facing juliusgram errors"""
    error_code = "E0000"

    def __init__(self, message: str, location: Optional[SourceLocation] = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def __str__(self):
        if self.location:
            return f"error[{self.error_code}]: {self.message}\n --> {self.location}"
        return self.message


class InvalidPatternSyntax(JuliusGramError):
    """
    Pattern does not match the pattern grammar, or matches only partially.

    Carries the pattern text so the diagnostic can point at the column.
    """
    error_code = "E0001"

    def __init__(self,
                 message: str,
                 pattern: str,
                 location: Optional[SourceLocation] = None,
                 error_code: Optional[str] = None,
                 help: Optional[str] = None,
                 label: Optional[str] = None):
        super().__init__(message, location)
        self.pattern = pattern
        if error_code is not None:
            self.error_code = error_code
        self.help_text = help
        self.label_text = label

    def __str__(self):
        source_files: Dict[str, str] = {}
        if self.location:
            source_files[self.location.file] = "\n" * (self.location.line - 1) + self.pattern
        err = Error(
            message=self.message,
            location=self.location,
            code=self.error_code,
            help=self.help_text,
            label=self.label_text,
        )
        return _format_diagnostic(err, source_files, color=False)


class InvalidSymbolName(JuliusGramError):
    """Symbol name contains characters outside [A-Za-z0-9_-]."""
    error_code = "E0101"

    def __init__(self, name: str):
        super().__init__(f"invalid symbol name {name!r}: expected [A-Za-z0-9_-]+")
        self.name = name


class TransliterationError(JuliusGramError):
    """The transliterator has no phonetic form for some part of a literal."""
    error_code = "E0201"

    def __init__(self, text: str, position: int):
        super().__init__(
            f"cannot transliterate {text[position]!r} at offset {position} of {text!r}"
        )
        self.text = text
        self.position = position


class InternalCompilerError(Exception):
    """
    Parser and generator are out of sync (unknown repeat or node kind).

    Never raised for user input; use the JuliusGramError family for those.
    """
    def __init__(self, message: str, error_code: str = "E9999"):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self):
        return f"[{self.error_code}] {self.message}"

"""
Configuration constants to replace magic strings throughout juliusgram
"""

import os
import tempfile

# Parser configuration constants (cache under temp dir to avoid cluttering project root)
DEFAULT_PARSER_CACHE_FILE = os.path.join(tempfile.gettempdir(), "juliusgram_parser.cache")
PATTERN_SOURCE_NAME = "<pattern>"

# Reserved nonterminals of the emitted grammar
START_SYMBOL = "S"
SILENCE_BEGIN = "NS_B"
SILENCE_END = "NS_E"
NOISE = "NOISE"
ROOT_PREFIX = "ROOT"
WORD_PREFIX = "WORD"
LOOP_SUFFIX = "_LOOP"

# Output line formats
GRAMMAR_SEPARATOR = "\t: "
VOCA_SECTION_PREFIX = "% "
VOCA_SEPARATOR = "\t"

# Default preamble (silence begin/end and noise filler)
DEFAULT_GRAMMAR_TEXT = f"{START_SYMBOL}\t: {SILENCE_BEGIN} {NOISE} {SILENCE_END}\n"
DEFAULT_VOCABULARY_TEXT = (
    f"% {SILENCE_BEGIN}\n<s>\tsilB\n"
    f"% {SILENCE_END}\n<s>\tsilE\n"
    f"% {NOISE}\n<sp>\tsp\n"
)

# Symbol names (addSymbol sections and <ref> tokens)
SYMBOL_NAME_PATTERN = r"[A-Za-z0-9_-]+"

# Generated files
GRAMMAR_FILE_EXTENSION = ".grammar"
VOCA_FILE_EXTENSION = ".voca"
GENERATED_FILE_EXTENSIONS = (".voca", ".grammar", ".dfa", ".dict", ".term")
DEFAULT_OUTPUT_BASENAME = "tmp"

# External tools (overridable from the environment)
DEFAULT_MKDFA_COMMAND = os.environ.get("JULIUSGRAM_MKDFA", "mkdfa.pl")
DEFAULT_GENERATE_COMMAND = os.environ.get("JULIUSGRAM_GENERATE", "generate")

# Patterns files
COMMENT_PREFIX = "#"

# File encoding constants
DEFAULT_FILE_ENCODING = "utf-8"

# Error reporting constants
ERROR_POINTER_CHAR = "^"

"""CLI entry point: run `juliusgram patterns.txt` or `python -m juliusgram patterns.txt`."""

import logging
import sys
from pathlib import Path
from typing import List, Optional


def _parse_symbol(spec: str):
    name, sep, values = spec.partition("=")
    if not sep:
        raise ValueError(f"expected NAME=value1,value2,... but got {spec!r}")
    return name, [v for v in values.split(",") if v]


def main(argv: Optional[List[str]] = None) -> int:
    import argparse
    from .compiler.driver import CompilerDriver
    from .compiler.session import CompilationSession
    from .compiler.toolchain import GrammarToolchain
    from .shared.errors import JuliusGramError
    from .shared.serialization import serialize_pattern
    from .utils.config import DEFAULT_OUTPUT_BASENAME, DEFAULT_FILE_ENCODING
    from .utils.io_utils import iter_pattern_lines, read_source_file

    parser = argparse.ArgumentParser(
        prog="juliusgram",
        description="Compile utterance patterns into Julius .grammar/.voca files.",
    )
    parser.add_argument("file", type=Path, help="Patterns file, one pattern per line")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT_BASENAME,
                        help="Output base name (default: %(default)s)")
    parser.add_argument("--symbol", action="append", default=[], metavar="NAME=V1,V2",
                        help="Define a symbol group usable as <NAME> (repeatable)")
    parser.add_argument("--mkdfa", action="store_true", help="Run mkdfa on the written files")
    parser.add_argument("--test", action="store_true", help="Run generate after mkdfa")
    parser.add_argument("--dump-ast", action="store_true", help="Print each pattern's AST and exit")
    parser.add_argument("--encoding", default=DEFAULT_FILE_ENCODING,
                        help="Encoding of input and output files (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    path = args.file
    if not path.is_file():
        sys.stderr.write(f"juliusgram: error: file not found: {path}\n")
        return 1
    try:
        source = read_source_file(path, args.encoding)
    except (OSError, UnicodeDecodeError) as e:
        sys.stderr.write(f"juliusgram: error: could not read file: {e}\n")
        return 1

    session = CompilationSession()

    if args.dump_ast:
        status = 0
        for line_number, pattern in iter_pattern_lines(source):
            try:
                print(serialize_pattern(session.parse(pattern, str(path), line_number)))
            except JuliusGramError as e:
                sys.stderr.write(f"{e}\n")
                status = 1
        return status

    try:
        for spec in args.symbol:
            name, values = _parse_symbol(spec)
            session.add_symbol(name, values)
    except (ValueError, JuliusGramError) as e:
        sys.stderr.write(f"juliusgram: error: {e}\n")
        return 1

    result = CompilerDriver(session).compile_patterns(source, str(path))
    if not result.success:
        result.reporter.print_errors()
        return 1

    toolchain = GrammarToolchain(args.output, encoding=args.encoding)
    if not (args.mkdfa or args.test):
        for written in toolchain.write_files(session):
            print(written)
        return 0

    tool_result = toolchain.mkdfa(session)
    sys.stdout.write(tool_result.stdout)
    if not tool_result.ok:
        sys.stderr.write(tool_result.stderr)
        return 1
    if args.test:
        tool_result = toolchain.test()
        sys.stdout.write(tool_result.stdout)
        if not tool_result.ok:
            sys.stderr.write(tool_result.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

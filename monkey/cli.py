#!/usr/bin/env python3
"""
Monkey command line
===================

Scan Monkey source and print the tokens.

Usage:
    monkey                      # interactive REPL
    monkey FILE                 # scan a file
    monkey -c "let x = 5;"      # scan a string

Options:
    --newline-whitespace    Treat newlines as whitespace instead of ILLEGAL
    --strict                Exit with status 1 if any ILLEGAL token was produced
    --show-warnings         REPL only: print diagnostics for ILLEGAL tokens
                            (files and -c always report them on stderr)
    -v, --verbose           Debug logging
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import LexerConfig, ReplConfig
from .lexer import Lexer
from .lexer.errors import format_warnings
from . import repl

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="monkey",
        description="Tokenize Monkey source code",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    monkey                          # Start the REPL
    monkey program.mk               # Print the tokens of a file
    monkey -c "10 == 10"            # Print the tokens of a string
        """
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument('file', nargs='?',
                        help='Source file to scan (omit for the REPL)')
    source.add_argument('-c', '--command', metavar='SOURCE',
                        help='Scan SOURCE instead of a file')

    parser.add_argument('--newline-whitespace', action='store_true',
                        help='Treat newlines as whitespace instead of ILLEGAL')
    parser.add_argument('--strict', action='store_true',
                        help='Exit with status 1 if any ILLEGAL token is produced')
    parser.add_argument('--show-warnings', action='store_true',
                        help='In the REPL, print a diagnostic after each ILLEGAL token')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the monkey command"""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.command is None and args.file is None:
        lexer_config = LexerConfig(filename="<stdin>",
                                   newline_is_whitespace=args.newline_whitespace)
        try:
            repl.start(config=ReplConfig(show_warnings=args.show_warnings),
                       lexer_config=lexer_config)
        except KeyboardInterrupt:
            print()
        return 0

    if args.command is not None:
        source = args.command
        filename = "<command>"
    else:
        filename = args.file
        try:
            with open(filename, 'r', encoding='utf-8') as f:
                source = f.read()
        except OSError as e:
            parser.exit(2, f"{parser.prog}: error: cannot read {filename}: {e.strerror}\n")
        except UnicodeDecodeError as e:
            parser.exit(2, f"{parser.prog}: error: cannot read {filename}: "
                           f"not valid UTF-8 ({e.reason} at byte {e.start})\n")

    config = LexerConfig(filename=filename, newline_is_whitespace=args.newline_whitespace)
    lexer = Lexer(source, config)
    for token in lexer:
        print(token)

    if lexer.has_warnings():
        logger.info("%d illegal character(s) in %s", len(lexer.warnings), filename)
        sys.stderr.write(format_warnings(lexer.warnings))
        if args.strict:
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
spl-lex: tokenize an SPL source file and print the result.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .lexer import Lexer

log = logging.getLogger(__name__)

EXAMPLES = """
Examples:
    spl-lex program.spl            # Tokenize a file
    spl-lex -c 'var x = 1;'        # Tokenize a literal string
    cat program.spl | spl-lex      # Tokenize stdin
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spl-lex",
        description="Tokenize SPL source code",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EXAMPLES,
    )

    # Input options
    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument('path', nargs='?', default='-',
                              help="source file to tokenize ('-' reads stdin)")
    source_group.add_argument('-c', '--source', metavar='TEXT',
                              help='tokenize TEXT instead of a file')

    parser.add_argument('--eof', action='store_true',
                        help='append the EndOfFile marker token')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='enable debug logging')
    parser.add_argument('--version', action='version',
                        version=f"%(prog)s {__version__}")
    return parser


def read_source(args: argparse.Namespace) -> str:
    if args.source is not None:
        return args.source
    if args.path == '-':
        return sys.stdin.read()
    with open(args.path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s:%(name)s:%(message)s',
    )

    try:
        source = read_source(args)
    except OSError as e:
        print(f"spl-lex: cannot read {args.path}: {e.strerror}", file=sys.stderr)
        return 2
    except UnicodeDecodeError as e:
        print(f"spl-lex: cannot read {args.path}: not valid UTF-8 "
              f"(byte 0x{e.object[e.start]:02x} at offset {e.start})", file=sys.stderr)
        return 2

    log.debug("Read %d characters", len(source))
    result = Lexer(source, emit_eof=args.eof).tokenize()

    if result.has_errors():
        print("Tokenization failed. Tokenization errors:", file=sys.stderr)
        for error in result.errors:
            print(error, file=sys.stderr)
        return 1

    print("Tokenization successful. Tokens:")
    for token in result.tokens:
        print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())

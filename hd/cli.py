"""
Command-line interface for the hd hex dumper.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from . import __version__
from .byte_source import FileByteSource
from .config import DumpConfig
from .engine import DumpEngine
from .errors import EngineError

EXIT_OK = 0
EXIT_USAGE = 1

USAGE = (
    "hd - Copyright (c) 2011, Michael Vysin\n"
    "This program comes with ABSOLUTELY NO WARRANTY; for details see LICENSE\n"
    "This is free software distributed under the terms of the GNU General Public License\n"
    "version 3.0 or later, and you are welcome to redistribute it under these conditions.\n\n"
    "Usage: hd [-a] [-d] [-c count] [-s offset] [-w width] file\n"
    "Options:\n"
    "    -a           : display all the data - do not skip duplicate lines\n"
    "    -d           : double-space the output\n"
    "    -c count     : dump at most [count] bytes, expressed as a C number literal\n"
    "    -s offset    : skip [offset] bytes, expressed as a C number literal\n"
    "    -w width     : use [width] bytes per row, expressed as a C number literal\n"
)


def parse_int_literal(text: str) -> int:
    """
    Parse an integer written as a C number literal.

    Accepts decimal, 0x-prefixed hexadecimal and leading-zero octal, plus
    Python's 0o and 0b prefixes.
    """
    s = text.strip()
    digits = s.lstrip('+-')
    if len(digits) > 1 and digits[0] == '0' and digits[1].isdigit():
        value = int(digits, 8)
        return -value if s.startswith('-') else value
    return int(s, 0)


def _int_arg(text: str) -> int:
    try:
        return parse_int_literal(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number literal: {text!r}")


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with the hd banner and exit status 1."""

    def format_usage(self):
        return USAGE

    def format_help(self):
        return USAGE

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"hd: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog='hd', description='Hex dump utility')
    parser.add_argument('-a', dest='all', action='store_true',
                        help='Display all the data, do not skip duplicate lines')
    parser.add_argument('-d', dest='double_space', action='store_true',
                        help='Double-space the output')
    parser.add_argument('-c', dest='count', type=_int_arg, default=0,
                        help='Maximum number of bytes to dump (default: rest of file)')
    parser.add_argument('-s', dest='offset', type=_int_arg, default=0,
                        help='Starting offset (default: 0)')
    parser.add_argument('-w', dest='width', type=_int_arg, default=16,
                        help='Bytes per line (default: 16)')
    parser.add_argument('-V', '--version', action='version', version=f'hd {__version__}')
    parser.add_argument('--debug', action='store_true', help='Log debug messages to stderr')
    parser.add_argument('files', nargs='*', type=Path, help='File to dump')
    return parser


def config_from_args(args: argparse.Namespace) -> DumpConfig:
    return DumpConfig(
        width=args.width,
        offset=args.offset,
        count=args.count,
        skip_duplicates=not args.all,
        double_space=args.double_space,
    )


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(name)s: %(levelname)s: %(message)s',
        stream=sys.stderr,
    )

    if len(args.files) != 1:
        parser.error("exactly one file is required")

    try:
        engine = DumpEngine(config_from_args(args).validate())
        with FileByteSource(args.files[0]) as source:
            engine.run(source, sys.stdout.write)
        sys.stdout.flush()
    except EngineError as e:
        print(f"hd: {e}", file=sys.stderr)
        return e.exit_code
    except BrokenPipeError:
        # Reader went away; point stdout at devnull so the exit-time flush stays quiet.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return EXIT_OK

    return EXIT_OK

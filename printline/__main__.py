# __main__.py

import sys
import argparse
from dataclasses import replace
from typing import List, Optional

from .logger import Logger
from .config import PrinterSettings
from .exceptions import BadOutputPath
from .printer import CliOutputPrinter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='printline', description='Write formatted messages')
    parser.add_argument('messages', nargs='*',
        help='Messages to write; style tags like <info>...</info> are supported')
    parser.add_argument('-o', '--out',
        help='Write to this file instead of stdout')
    colors = parser.add_mutually_exclusive_group()
    colors.add_argument('--colors', dest='decorated', action='store_true', default=None,
        help='Force colored output')
    colors.add_argument('--no-colors', dest='decorated', action='store_false', default=None,
        help='Disable colored output')
    parser.add_argument('-v', '--verbose', action='store_true', default=None,
        help='Enable verbose output')
    parser.add_argument('-n', '--no-newline', action='store_true',
        help='Do not append a line break after each message')
    parser.add_argument('--enable-logging', action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stderr)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = PrinterSettings.from_env()
    except ValueError as e:
        print(f"printline: error: {e}", file=sys.stderr)
        return 2
    if args.out is not None:
        settings = replace(settings, path=args.out)
    if args.decorated is not None:
        settings = replace(settings, decorated=args.decorated)
    if args.verbose is not None:
        settings = replace(settings, verbose=args.verbose)

    logger = Logger('printline', args.enable_logging, args.log_file)
    printer = settings.configure(CliOutputPrinter(logger=logger))

    try:
        if args.no_newline:
            printer.write(args.messages)
        else:
            printer.writeln(args.messages or '')
    except BadOutputPath as e:
        logger.error(f"Bad output path: {e.path}")
        print(f"printline: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Command-line entry point for yumsize.

Usage: yumsize datafile [datafile...]
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from yumsize import __version__
from yumsize.constants import USAGE
from yumsize.logging import logger, setup_logging
from yumsize.processor import handle_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='yumsize',
        description='Sort package-manager update lines by their trailing size.',
    )
    parser.add_argument(
        'datafiles',
        nargs='*',
        metavar='datafile',
        help='Text file with lines copied from a package-manager update log',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if not args.datafiles:
        print(USAGE, file=sys.stderr)
        return 0
    
    setup_logging()
    failed = 0
    for path in args.datafiles:
        if not handle_file(path, sys.stdout):
            failed += 1
    
    if failed:
        logger.debug(f"{failed} of {len(args.datafiles)} file(s) failed")
    # Per-file failures are reported on stderr only; the exit status stays 0.
    return 0

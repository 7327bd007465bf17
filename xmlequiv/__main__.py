"""
Compare XML and HTML markup trees for equivalence.

Parses two XML or HTML files, and reports whether they are equivalent, or lists the differences between them.

Copyright 2022-2026, Levente Hunyadi
"""

import argparse
import logging
import os.path
import sys
from io import StringIO
from pathlib import Path
from typing import Literal, Optional, Sequence

from . import __version__
from .clio import add_arguments, get_options
from .environment import ParseError
from .equivalence import compare
from .options import ComparisonOptions
from .parsing import document_from_file


class Arguments(argparse.Namespace):
    left: Path
    right: Path
    format: Optional[Literal["html", "xml"]]
    loglevel: str


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Determine whether two XML or HTML documents are equivalent.")
    parser.prog = os.path.basename(os.path.dirname(__file__))
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("left", type=Path, help="Path to the left (e.g. expected) document.")
    parser.add_argument("right", type=Path, help="Path to the right (e.g. actual) document.")
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--html",
        dest="format",
        action="store_const",
        const="html",
        help="Parse both documents as HTML (default for .html and .htm files).",
    )
    group.add_argument(
        "--xml",
        dest="format",
        action="store_const",
        const="xml",
        help="Parse both documents as XML (default for all other files).",
    )
    parser.add_argument(
        "-l",
        "--loglevel",
        choices=[
            logging.getLevelName(level).lower()
            for level in (
                logging.DEBUG,
                logging.INFO,
                logging.WARN,
                logging.ERROR,
                logging.CRITICAL,
            )
        ],
        default=logging.getLevelName(logging.WARN).lower(),
        help="Use this option to set the log verbosity.",
    )
    add_arguments(parser, ComparisonOptions)
    return parser


def get_help() -> str:
    parser = get_parser()
    with StringIO() as buf:
        parser.print_help(file=buf)
        return buf.getvalue()


def _is_html(path: Path, format: Optional[Literal["html", "xml"]]) -> bool:
    if format is not None:
        return format == "html"
    return path.suffix.lower() in (".html", ".htm", ".xhtml")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = get_parser()
    args = Arguments()
    parser.parse_args(argv, namespace=args)

    logging.basicConfig(
        level=getattr(logging, args.loglevel.upper(), logging.WARN),
        format="%(asctime)s - %(levelname)s - %(funcName)s [%(lineno)d] - %(message)s",
    )

    options = get_options(args, ComparisonOptions)
    try:
        left = document_from_file(args.left, html=_is_html(args.left, args.format))
        right = document_from_file(args.right, html=_is_html(args.right, args.format))
    except (OSError, ParseError) as e:
        logging.error(e)
        return 2

    result = compare(left, right, options)
    if options.verbose:
        for difference in result.differences:
            print(difference)
    print("equivalent" if result.is_equivalent else "not equivalent")
    return 0 if result.is_equivalent else 1


if __name__ == "__main__":
    sys.exit(main())

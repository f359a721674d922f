"""Command line front end: print how an expression groups.

    $ spaced-parse "1 * 2+3"
    1 * (2 + 3)
    $ spaced-parse --full "2 + 4 * 6 - 8"
    ((2 + (4 * 6)) - 8)

With no expression arguments every line of standard input is parsed.
"""
import argparse
import logging
import sys

from spaced_config import DEBUG, ParserConfig
from spaced_errors import ParseError
from spaced_parser import parse
from spaced_render import parenthesize, unparse

logger = logging.getLogger(__name__)


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog="spaced-parse", description="Parse expressions grouped by whitespace."
    )
    parser.add_argument("expressions", nargs="*", help="expressions to parse (default: stdin lines)")
    parser.add_argument(
        "--full", action="store_true", help="parenthesize every binary operation"
    )
    parser.add_argument("--functions", help="comma separated prefix function names")
    parser.add_argument("--no-grouping", action="store_true", help="reject '(' and ')'")
    parser.add_argument("--no-negation", action="store_true", help="reject prefix '-'")
    parser.add_argument(
        "--ignore-newlines",
        action="store_true",
        help="do not count newlines towards an operator's spacing",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log every reduction")
    return parser


def config_from_args(args):
    config = ParserConfig.from_env()
    if args.functions is not None:
        config = config._replace(
            functions=frozenset(f.strip() for f in args.functions.split(",") if f.strip())
        )
    if args.no_grouping:
        config = config._replace(allow_grouping=False)
    if args.no_negation:
        config = config._replace(allow_negation=False)
    if args.ignore_newlines:
        config = config._replace(count_newlines=False)
    return config


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose or DEBUG else logging.WARNING,
        format="%(name)s: %(message)s",
    )
    config = config_from_args(args)
    render = parenthesize if args.full else unparse
    sources = args.expressions or [line.rstrip("\n") for line in sys.stdin]
    status = 0
    for text in sources:
        try:
            print(render(parse(text, config)))
        except ParseError as e:
            logger.debug("failed to parse %r", text, exc_info=True)
            print(e.describe(text), file=sys.stderr)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())

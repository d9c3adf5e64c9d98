"""Command-line front end: resolve the scopes of an ESTree JSON file.

Usage:
    python -m jsscope program.json [--strict] [--global NAME ...]

Prints the scope tree and the reference table as JSON. Exit status is 1
when resolution fails and 2 for unreadable input.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence

from .errors import MalformedTree, ScopeError
from .estree import load
from .globals import DEFAULT_GLOBALS
from .resolver import ScopeResolver

logger = logging.getLogger("jsscope")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsscope",
        description="Resolve lexical scopes of a JavaScript program given as ESTree JSON.",
    )
    parser.add_argument("file", help="ESTree JSON file ('-' for stdin)")
    parser.add_argument(
        "--strict", action="store_true", help="treat all code as strict mode code"
    )
    parser.add_argument(
        "--global", dest="globals", action="append", default=[], metavar="NAME",
        help="additional name provided by the host environment (repeatable)",
    )
    parser.add_argument(
        "--no-default-globals", action="store_true",
        help="do not predeclare the standard built-in globals",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log resolution steps")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    names: List[str] = list(args.globals)
    if not args.no_default_globals:
        names.extend(DEFAULT_GLOBALS)

    try:
        if args.file == "-":
            program = load(sys.stdin)
        else:
            with open(args.file, encoding="utf-8") as fp:
                program = load(fp)
    except (OSError, MalformedTree) as e:
        logger.error("cannot load %s: %s", args.file, e)
        return 2

    resolver = ScopeResolver(strict=args.strict, globals=names)
    try:
        tree, table = resolver.analyze(program)
    except ScopeError as e:
        print(e, file=sys.stderr)
        return 1

    json.dump({"scopes": tree.to_dict(), "references": table.to_dict()}, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())

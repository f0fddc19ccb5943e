"""Runs the minilisp read-eval-print loop over a file or standard input."""

import argparse
import logging
import sys

from minilisp.config import get_recursion_limit
from minilisp.interpreter import Interpreter

logger = logging.getLogger("minilisp")

EXIT_RECURSION = 2


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="minilisp", description="Evaluate minilisp source.")
    parser.add_argument("file", help="file to interpret (reads standard input if omitted)", nargs="?")
    parser.add_argument("--keep-going", action="store_true",
                        help="continue with the next top-level form after an error")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    limit = get_recursion_limit()
    if limit is not None:
        logger.debug("setting recursion limit to %d", limit)
        sys.setrecursionlimit(limit)

    interp = Interpreter()
    try:
        if args.file is not None:
            with open(args.file, encoding="utf-8") as source:
                return interp.run(source, keep_going=args.keep_going)
        return interp.run(sys.stdin, keep_going=args.keep_going)
    except RecursionError:
        # nesting deeper than the host stack allows; not a language error
        sys.stdout.write("Error: maximum recursion depth exceeded\n")
        return EXIT_RECURSION


if __name__ == "__main__":
    sys.exit(main())

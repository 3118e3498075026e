"""Command-line entry point: `tern [file]`.

With a file, parses and runs it once and stays silent on success. Without
one, starts the interactive shell.
"""

import argparse
import logging
import sys

from tern.config import get_log_level, get_recursion_limit
from tern.errors import TernError, TernParseError
from tern.interpreter import Interpreter
from tern.repl.shell import Shell
from tern.types.signals import is_error

logger = logging.getLogger("tern")


def run_file(path: str) -> int:
    """Runs a source file; answers the process exit status."""
    interp = Interpreter()
    try:
        result = interp.run_file(path)
    except TernParseError as exc:
        for error in exc.errors:
            print(error, file=sys.stderr)
        return 1
    except TernError as exc:
        print(exc, file=sys.stderr)
        return 1
    except RecursionError:
        print("maximum recursion depth exceeded", file=sys.stderr)
        return 1

    if is_error(result):
        print(result.message, file=sys.stderr)
        return 1
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="tern")
    parser.add_argument("file", help="file to interpret and run (if empty, starts the interactive shell)", nargs="?")
    parser.add_argument("-v", "--verbose", help="log debug output to stderr", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.setrecursionlimit(get_recursion_limit())

    if args.file is not None:
        logger.debug("running file %s", args.file)
        return run_file(args.file)

    logger.debug("starting interactive shell")
    Shell(Interpreter()).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

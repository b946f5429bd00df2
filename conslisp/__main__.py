"""Runs the conslisp interpreter: a REPL without arguments, or a source file."""

import argparse
import logging
import sys

from conslisp.errors import LispError
from conslisp.interpreter import Interpreter
from conslisp.repl import Repl


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="conslisp")
    parser.add_argument("file", help="file to run (if empty, starts the interactive REPL)", nargs="?")
    parser.add_argument("--no-prelude", action="store_true", help="do not load the standard prelude")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        interp = Interpreter(prelude=None if args.no_prelude else 'auto')
        if args.file is None:
            Repl(interp).cmdloop()
        else:
            interp.run_file(args.file)
    except LispError as e:
        # batch mode: the first failure is fatal
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"conslisp: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

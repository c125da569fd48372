"""Command-line read-eval-print loop.

    $ felisp
    felisp> (defn sq (fn (x) (+ x x)))
    => sq
    felisp> (sq 4)
    => 8

One form per line. Errors are reported and the loop continues; `(exit)` ends
the process.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Optional, TextIO

from felisp import config
from felisp.errors import FelispError
from felisp.evaluation.special_forms.exit_form import Halt
from felisp.interpreter import Interpreter
from felisp.printer import to_string

logger = logging.getLogger(__name__)


def eval_line(interp: Interpreter, line: str, out: TextIO) -> None:
    """Evaluate one line and write its result or error. Halt propagates."""
    try:
        result = interp.eval(line)
    except FelispError as e:
        print(f"!! {e.message}", file=out)
        return
    print(f"=> {to_string(result)}", file=out)


def run(interp: Interpreter, lines: Iterable[str], out: TextIO) -> int:
    """Evaluate each non-blank line; returns the process exit status."""
    try:
        for line in lines:
            if not line.strip():
                continue
            eval_line(interp, line, out)
    except Halt as h:
        logger.debug("halted with status %#x", h.status)
        return h.status & 0xFF
    return 0


def _interactive_lines(prompt: str) -> Iterable[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="felisp", description="Felisp interpreter")
    parser.add_argument(
        "-e", "--eval", dest="exprs", action="append", default=[],
        metavar="EXPR", help="evaluate EXPR and exit (repeatable)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.log_level())
    interp = Interpreter()
    lines = args.exprs if args.exprs else _interactive_lines(config.prompt())
    return run(interp, lines, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())

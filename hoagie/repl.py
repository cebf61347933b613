"""
Command line entry point and interactive REPL for HoagieLisp.

    hoagie                 start the REPL
    hoagie -e "+ 1 2"      evaluate, print, exit
    hoagie --ast -e "(1)"  print the parse tree instead of evaluating
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from hoagie import __version__
from hoagie.config import get_history_file, get_log_level, get_prompt
from hoagie.errors import HoagieError
from hoagie.interpreter import Interpreter
from hoagie.logging_config import setup_logging
from hoagie.reader.parser import parse

try:
    import readline
except ImportError:
    # No line editing on this platform; input() still works
    readline = None

logger = logging.getLogger(__name__)

BANNER = f"HoagieLisp Version {__version__}"


def eval_line(interp: Interpreter, line: str, show_ast: bool = False) -> str:
    """Render the result of one line; syntax errors render like language errors."""
    try:
        if show_ast:
            return parse(line).pretty()
        return interp.rep(line)
    except HoagieError as exc:
        return f"Error: {exc}"


def load_history(path: Optional[Path]) -> None:
    if readline is None or path is None:
        return
    try:
        readline.read_history_file(str(path))
    except FileNotFoundError:
        logger.info("No history file at %s yet", path)
    except OSError as exc:
        logger.warning("Could not read history file %s: %s", path, exc)


def save_history(path: Optional[Path]) -> None:
    if readline is None or path is None:
        return
    try:
        readline.write_history_file(str(path))
    except OSError as exc:
        logger.warning("Could not write history file %s: %s", path, exc)


def run_repl(interp: Interpreter, prompt: str, history_file: Optional[Path] = None, show_ast: bool = False) -> None:
    print()
    print(BANNER)
    print("Press ctrl-c to exit")
    print()

    load_history(history_file)
    logger.info("REPL started (history: %s)", history_file or "off")
    try:
        while True:
            try:
                line = input(prompt)
            except (EOFError, KeyboardInterrupt):
                print()
                break
            print(eval_line(interp, line, show_ast))
    finally:
        save_history(history_file)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hoagie", description="HoagieLisp interpreter")
    parser.add_argument(
        "-e", "--eval", action="append", metavar="CODE",
        help="Evaluate CODE, print the result and exit (repeatable)",
    )
    parser.add_argument("--ast", action="store_true", help="Print parse trees instead of evaluating")
    parser.add_argument("--log-level", default=None, help="Logging level (default: $HOAGIE_LOG_LEVEL or WARNING)")
    parser.add_argument("--log-file", default=None, help="Write logs to this file instead of stderr")
    parser.add_argument("--version", action="version", version=BANNER)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.log_level or get_log_level(), args.log_file)

    interp = Interpreter()
    if args.eval:
        for code in args.eval:
            print(eval_line(interp, code, args.ast))
        return 0

    run_repl(interp, get_prompt(), get_history_file(), args.ast)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

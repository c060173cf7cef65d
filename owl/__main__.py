#!/usr/bin/env python3
"""
CLI for the Owl interpreter.

Usage:
    python -m owl [SCRIPT] [--log-level LEVEL]

SCRIPT defaults to $OWL_SCRIPT_PATH, or scripts/repl.owl. The rendered
value of the last top-level form is printed to stdout.

Exit codes:
    0  success
    1  parse or evaluation error
    2  the script could not be read
"""

import argparse
import logging
import sys

from owl import config
from owl.errors import OwlError
from owl.interpreter import Interpreter

logger = logging.getLogger("owl")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="owl", description="Run an Owl script.")
    parser.add_argument(
        "script",
        nargs="?",
        default=None,
        help=f"script to run (default: {config.get_script_path()})",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="logging level name, e.g. DEBUG (default: $OWL_LOG_LEVEL or WARNING)",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=config.get_log_level(args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    path = args.script or config.get_script_path()

    interp = Interpreter()
    try:
        result = interp.run_file(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read %s: %s", path, e)
        return 2
    except OwlError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1

    print(result.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Evaluator entry point."""

from __future__ import annotations

import argparse
import sys


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the evaluator's command line."""
    parser = argparse.ArgumentParser(
        prog="eka_ci_evaluator", description="Simple program to greet a person"
    )
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 0.1.0")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the evaluator; return the process exit status."""
    parse_args(argv)
    return 0


if __name__ == "__main__":
    sys.exit(main())
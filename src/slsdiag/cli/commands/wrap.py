"""`slsdiag wrap` command implementation."""

from __future__ import annotations

import argparse

from slsdiag.errors import ErrorReporter, ServerlessError, pad_title, word_wrap
from slsdiag.errors.messages import MESSAGE_LINE_LENGTH, MESSAGE_MARGIN


def add_subparser(subparsers: argparse._SubParsersAction) -> None:
    """Register the `wrap` command."""
    parser = subparsers.add_parser("wrap", help="Word-wrap text the way error messages are laid out.")
    parser.add_argument("text", help="Text to wrap.")
    parser.add_argument("--width", type=int, default=MESSAGE_LINE_LENGTH, help="Line length threshold.")
    parser.add_argument("--margin", type=int, default=MESSAGE_MARGIN, help="Left margin in spaces.")
    parser.add_argument("--title", default=None, help="Optional title printed above the text.")
    parser.set_defaults(command="wrap")


def run(args: argparse.Namespace, reporter: ErrorReporter) -> None:
    """Execute the `wrap` command."""
    if args.width < 1 or args.margin < 0:
        raise ServerlessError("--width must be positive and --margin must not be negative.")
    if args.title is not None:
        reporter.console.print(pad_title(args.title), markup=False, emoji=False, soft_wrap=True)
    reporter.console.out(word_wrap(args.text, args.width, args.margin), end="")

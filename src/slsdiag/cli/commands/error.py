"""`slsdiag error` command implementation."""

from __future__ import annotations

import argparse

from slsdiag.errors import ErrorReporter, ServerlessError


def add_subparser(subparsers: argparse._SubParsersAction) -> None:
    """Register the `error` command."""
    parser = subparsers.add_parser("error", help="Report an error and exit with code 1.")
    parser.add_argument("message", help="Error message.")
    parser.add_argument(
        "--unexpected",
        action="store_true",
        help="Report as an internal failure (adds the debugging hint) instead of a Serverless Error.",
    )
    parser.set_defaults(command="error")


def run(args: argparse.Namespace, reporter: ErrorReporter) -> None:
    """Execute the `error` command. Always raises; the CLI guard reports it."""
    if args.unexpected:
        raise RuntimeError(args.message)
    raise ServerlessError(args.message)

"""`slsdiag warning` command implementation."""

from __future__ import annotations

import argparse

from slsdiag.errors import ErrorReporter


def add_subparser(subparsers: argparse._SubParsersAction) -> None:
    """Register the `warning` command."""
    parser = subparsers.add_parser("warning", help="Print a warning block.")
    parser.add_argument("message", help="Warning message.")
    parser.set_defaults(command="warning")


def run(args: argparse.Namespace, reporter: ErrorReporter) -> None:
    """Execute the `warning` command."""
    reporter.report_warning(args.message)

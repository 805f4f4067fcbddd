"""slsdiag command-line interface entrypoint."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from types import ModuleType
from typing import Optional

from slsdiag.cli.commands import error, warning, wrap
from slsdiag.errors import ErrorReporter, ReporterConfig, configure_logging, reporting
from slsdiag.errors.config import OUTPUT_FORMATS
from slsdiag.version import __version__

CommandModule = ModuleType
CommandRunner = Callable[[argparse.Namespace, ErrorReporter], None]

# Map CLI subcommands to their implementation modules.
_COMMANDS: dict[str, CommandModule] = {
    "error": error,
    "warning": warning,
    "wrap": wrap,
}


def build_arg_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="slsdiag",
        description="Render Serverless CLI errors, warnings and support information.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Error output format (default: $SLS_OUTPUT_FORMAT or text).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, metavar="<command>")

    for name, module in _COMMANDS.items():
        add_subparser = getattr(module, "add_subparser", None)
        if add_subparser is None:
            raise RuntimeError(f"CLI command module '{name}' is missing add_subparser().")
        add_subparser(subparsers)

    return parser


def build_reporter(args: argparse.Namespace) -> ErrorReporter:
    """Create the reporter from the environment, letting ``--format`` win."""
    cfg = ReporterConfig.from_env()
    fmt: Optional[str] = getattr(args, "format", None)
    if fmt is not None:
        cfg = cfg.with_output_format(fmt)
    return ErrorReporter(cfg=cfg, logger=configure_logging(cfg=cfg))


def main(argv: Sequence[str] | None = None, *, reporter: ErrorReporter | None = None) -> None:
    """Parse args and dispatch to the selected command, reporting any failure."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    command_name = str(args.command)

    module = _COMMANDS.get(command_name)
    if module is None:
        raise RuntimeError(f"Unknown command: {command_name}")

    runner: CommandRunner | None = getattr(module, "run", None)
    if runner is None:
        raise RuntimeError(f"CLI command module '{command_name}' is missing run().")

    reporter = reporter if reporter is not None else build_reporter(args)
    with reporting(reporter):
        runner(args, reporter)


# Keep console script compatibility with pyproject's entrypoint.
app = main


if __name__ == "__main__":
    main()

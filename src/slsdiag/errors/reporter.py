from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, NoReturn, Optional

from rich.console import Console
from rich.text import Text

from .config import ReporterConfig
from .environment import EnvironmentProvider, capture_environment
from .logging import configure_logging
from .messages import (
    debug_hint_block,
    environment_block,
    error_header_block,
    stack_trace_block,
    support_block,
)
from .types import ReportPayload, ServerlessError, build_error_record

WARNING_TITLE = "Warning"
FAILURE_EXIT_CODE = 1


def _stdout_console() -> Console:
    return Console(emoji=False, highlight=False)


@dataclass
class ErrorReporter:
    """
    Terminal error handler for the CLI: prints a report, then exits with 1.

    Design notes
    ------------
    - Formatting lives in `messages`/`layout`; this class only picks blocks.
    - Environment capture and process exit are injected so tests can replace
      them.

    Usage example
    -------------
        reporter = ErrorReporter(cfg=cfg, logger=logger)
        try:
            deploy()
        except Exception as exc:
            reporter.report_exception(exc)
    """

    cfg: ReporterConfig
    logger: logging.Logger
    console: Console = field(default_factory=_stdout_console)
    environment: EnvironmentProvider = capture_environment
    exit: Callable[[int], NoReturn] = sys.exit

    def build_payload(self, raw_error: Any) -> ReportPayload:
        """Normalize a caught value; stack traces are kept only in debug mode."""
        return build_error_record(
            raw_error,
            environment=self.environment,
            include_stack_trace=self.cfg.debug,
        )

    def report_error(self, payload: ReportPayload, output_format: Optional[str] = None) -> NoReturn:
        """
        Print `payload` and terminate with exit code 1.

        Text mode block order: header, debug hint (unexpected errors only),
        stack trace (debug mode with a trace only), support, environment.
        """
        fmt = output_format if output_format is not None else self.cfg.output_format
        self.logger.debug("Reporting %s (format=%s)", payload.error.type, fmt)

        if fmt == "json":
            self.console.print(payload.to_json(), markup=False, highlight=False, emoji=False, soft_wrap=True)
        else:
            self._print(error_header_block(payload.error.type, payload.error.message))

            if payload.error.type != ServerlessError.name:
                self._print(debug_hint_block())

            if self.cfg.debug and payload.error.stack_trace:
                title, trace = stack_trace_block(payload.error.stack_trace)
                self._print(title)
                self._write_raw(trace)

            self._print(support_block())
            self._print(environment_block(payload.env))

        self.logger.debug("Exiting with code %d", FAILURE_EXIT_CODE)
        self.exit(FAILURE_EXIT_CODE)

    def report_exception(self, raw_error: Any, output_format: Optional[str] = None) -> NoReturn:
        """Normalize and report a caught value, then exit with 1."""
        self.report_error(self.build_payload(raw_error), output_format=output_format)

    def report_warning(self, message: str) -> None:
        """Print a warning header block. Does not exit."""
        self._print(error_header_block(WARNING_TITLE, message))

    def _print(self, block: Text) -> None:
        self.console.print(block, soft_wrap=True)

    def _write_raw(self, text: str) -> None:
        self.console.file.write(f"{text}\n")
        self.console.file.flush()


def default_reporter(cfg: Optional[ReporterConfig] = None) -> ErrorReporter:
    """Build a reporter from the environment (``SLS_DEBUG``, ``SLS_OUTPUT_FORMAT``)."""
    cfg = cfg if cfg is not None else ReporterConfig.from_env()
    return ErrorReporter(cfg=cfg, logger=configure_logging(cfg=cfg))


def log_error(raw_error: Any, output_format: Optional[str] = None) -> NoReturn:
    """
    Report a caught error with a reporter configured from the environment.

    Usage example
    -------------
        except Exception as exc:
            log_error(exc)
    """
    default_reporter().report_exception(raw_error, output_format=output_format)


def log_warning(message: str) -> None:
    default_reporter().report_warning(message)

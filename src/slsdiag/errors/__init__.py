"""
errors subpackage: formatting and reporting of errors and warnings.

Key primitives
--------------
- pad_title() / word_wrap(): fixed-width text layout
- messages: the header, support, environment, stack-trace and debug-hint blocks
- build_error_record(): normalize a caught value into a ReportPayload
- ErrorReporter: prints a report (text or JSON) and exits with code 1
- reporting() / guard(): top-level handlers that hand exceptions to the reporter
- ReporterConfig, configure_logging(): debug flag, output format, internal logging
"""

from .config import ConfigError, ReporterConfig
from .environment import capture_environment
from .guards import guard, reporting
from .layout import pad_title, word_wrap
from .logging import configure_logging
from .reporter import ErrorReporter, log_error, log_warning
from .types import (
    EnvironmentSnapshot,
    ErrorRecord,
    NormalizationError,
    ReportPayload,
    SError,
    ServerlessError,
    build_error_record,
)

__all__ = [
    "ConfigError",
    "ReporterConfig",
    "capture_environment",
    "guard",
    "reporting",
    "pad_title",
    "word_wrap",
    "configure_logging",
    "ErrorReporter",
    "log_error",
    "log_warning",
    "EnvironmentSnapshot",
    "ErrorRecord",
    "NormalizationError",
    "ReportPayload",
    "SError",
    "ServerlessError",
    "build_error_record",
]

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Literal, Optional, get_args
import logging
import os

OutputFormat = Literal["text", "json"]
OUTPUT_FORMATS: tuple[str, ...] = get_args(OutputFormat)


class ConfigError(ValueError):
    """Raised when explicitly supplied reporter configuration is invalid."""


@dataclass(frozen=True)
class ReporterConfig:
    """
    Configuration for error reporting.

    Parameters
    ----------
    output_format
        "text" prints colored, human-readable blocks; "json" prints a single
        structured record.
    debug
        Attach stack traces to reports and log reporter internals.
    console_level
        Logging level for the stderr log handler when `debug` is off.
    env_prefix
        Prefix for environment-variable overrides.

    Usage example
    -------------
        cfg = ReporterConfig(output_format="json")
    """

    output_format: OutputFormat = "text"
    debug: bool = False
    console_level: int = logging.WARNING

    env_prefix: str = field(default="SLS_", repr=False)

    def with_output_format(self, output_format: str) -> "ReporterConfig":
        """Return a copy using `output_format`."""
        if output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Unknown output format '{output_format}'. Expected one of: {', '.join(OUTPUT_FORMATS)}."
            )
        return replace(self, output_format=output_format)  # type: ignore[arg-type]

    @classmethod
    def from_env(cls, *, default: Optional["ReporterConfig"] = None) -> "ReporterConfig":
        """
        Create config from environment variables.

        Supported variables (prefix controlled by env_prefix on `default`):
        - <PFX>DEBUG: any non-empty value enables debug output
        - <PFX>OUTPUT_FORMAT: "text" | "json"
        - <PFX>LOG_LEVEL: logging level name, e.g. "INFO"

        Invalid values fall back to `default`.

        Usage example
        -------------
            cfg = ReporterConfig.from_env()  # honours SLS_DEBUG=*
        """
        base = default if default is not None else cls()
        pfx = base.env_prefix

        debug = bool(os.getenv(f"{pfx}DEBUG", "")) or base.debug

        output_format = os.getenv(f"{pfx}OUTPUT_FORMAT", base.output_format).strip().lower()
        if output_format not in OUTPUT_FORMATS:
            output_format = base.output_format

        console_level = base.console_level
        level_raw = os.getenv(f"{pfx}LOG_LEVEL", "").strip().upper()
        if level_raw:
            level = logging.getLevelName(level_raw)
            if isinstance(level, int):
                console_level = level

        return cls(
            output_format=output_format,  # type: ignore[arg-type]
            debug=debug,
            console_level=console_level,
            env_prefix=pfx,
        )

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional
import json
import traceback as _traceback

GENERIC_ERROR_TYPE = "Error"
GENERIC_ERROR_MESSAGE = "An unexpected error occurred."


class ServerlessError(Exception):
    """
    The tool's own, already-explained error kind.

    Reports for this kind omit the "run again with debugging" hint.

    Usage example
    -------------
        raise ServerlessError("Function 'hello' is not defined", status_code=404)
    """

    name = "Serverless Error"

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


# Deprecated - use ServerlessError instead
SError = ServerlessError


class NormalizationError(RuntimeError):
    """Raised when a caught value cannot be inspected well enough to report it."""

    def __init__(self, description: str) -> None:
        super().__init__(f"Unable to report error value: {description}")
        self.description = description


@dataclass(frozen=True)
class ErrorRecord:
    """
    Normalized view of a caught error.

    Usage example
    -------------
        rec = ErrorRecord(type="Serverless Error", message="boom")
    """
    type: str
    message: str
    stack_trace: Optional[str] = None


@dataclass(frozen=True)
class EnvironmentSnapshot:
    """Runtime facts shown at the end of every error report."""
    operating_system: str
    runtime_version: str
    tool_version: str


@dataclass(frozen=True)
class ReportPayload:
    error: ErrorRecord
    env: EnvironmentSnapshot

    def to_dict(self) -> dict[str, Any]:
        """Return the structured-output shape consumed by external tooling."""
        error: dict[str, Any] = {"type": self.error.type, "message": self.error.message}
        if self.error.stack_trace is not None:
            error["stackTrace"] = self.error.stack_trace
        return {
            "error": error,
            "env": {
                "OS": self.env.operating_system,
                "nodeVersion": self.env.runtime_version,
                "serverlessVersion": self.env.tool_version,
            },
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)


def _kind_name(raw_error: Any) -> str:
    if isinstance(raw_error, BaseException):
        # Class-level only: ImportError and friends use an instance `name` for other data.
        name = getattr(type(raw_error), "name", None)
        if isinstance(name, str) and name:
            return name
        return type(raw_error).__name__
    name = getattr(raw_error, "name", None)
    if isinstance(name, str) and name:
        return name
    return GENERIC_ERROR_TYPE


def _message(raw_error: Any) -> str:
    if isinstance(raw_error, BaseException):
        message = str(raw_error)
    elif isinstance(raw_error, str):
        message = raw_error
    else:
        message = getattr(raw_error, "message", None)
    if isinstance(message, str) and message.strip():
        return message
    return GENERIC_ERROR_MESSAGE


def _stack_trace(raw_error: Any) -> Optional[str]:
    if isinstance(raw_error, BaseException) and raw_error.__traceback__ is not None:
        return "".join(_traceback.format_exception(type(raw_error), raw_error, raw_error.__traceback__))
    stack = getattr(raw_error, "stack", None)
    if isinstance(stack, str) and stack:
        return stack
    return None


def build_error_record(
    raw_error: Any,
    *,
    environment: Callable[[], EnvironmentSnapshot],
    include_stack_trace: bool = False,
) -> ReportPayload:
    """
    Normalize an arbitrary caught value into a report payload.

    Parameters
    ----------
    raw_error
        Usually an exception; strings and objects with ``name``/``message``
        attributes are accepted as well.
    environment
        Provider called once to capture a fresh environment snapshot.
    include_stack_trace
        Attach the formatted traceback (debug mode only).

    Raises
    ------
    NormalizationError
        If reading the value raises. The original exception is chained.
    """
    try:
        record = ErrorRecord(
            type=_kind_name(raw_error),
            message=_message(raw_error),
            stack_trace=_stack_trace(raw_error) if include_stack_trace else None,
        )
    except Exception as exc:
        raise NormalizationError(object.__repr__(raw_error)) from exc

    return ReportPayload(error=record, env=environment())

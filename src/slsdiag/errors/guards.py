from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, Optional, TypeVar

from .reporter import ErrorReporter

T = TypeVar("T")


@contextmanager
def reporting(reporter: ErrorReporter, *, output_format: Optional[str] = None) -> Iterator[None]:
    """
    Context manager that turns any escaping exception into an error report.

    Behavior
    --------
    - Exception: reported via `reporter`, then the process exits with 1.
    - SystemExit / KeyboardInterrupt: propagate untouched.
    - NormalizationError from the reporter propagates without exiting.
    - If the reporter's `exit` returns instead of terminating, the exception
      is suppressed and execution continues after the block.

    Usage example
    -------------
        with reporting(reporter):
            deploy(service)
    """
    try:
        yield
    except Exception as exc:
        reporter.report_exception(exc, output_format=output_format)


def guard(
    reporter: ErrorReporter,
    fn: Callable[[], T],
    *,
    output_format: Optional[str] = None,
) -> Optional[T]:
    """
    Execute a callable under `reporting`.

    Returns
    -------
    value
        The callable result on success; None if it failed and the reporter's
        `exit` returned.

    Usage example
    -------------
        service = guard(reporter, lambda: load_service(path))
    """
    with reporting(reporter, output_format=output_format):
        return fn()
    return None

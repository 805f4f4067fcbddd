from __future__ import annotations

import io
from typing import NoReturn

import pytest
from rich.console import Console

from slsdiag.cli import main as cli_main
from slsdiag.errors import ErrorReporter, ReporterConfig, configure_logging, pad_title


class ExitCalled(Exception):
    pass


def _fake_exit(code: int) -> NoReturn:
    raise ExitCalled(code)


def _make_reporter() -> tuple[ErrorReporter, io.StringIO]:
    cfg = ReporterConfig()
    buf = io.StringIO()
    reporter = ErrorReporter(
        cfg=cfg,
        logger=configure_logging(cfg=cfg, console=Console(file=io.StringIO())),
        console=Console(file=buf, width=200, color_system=None),
        exit=_fake_exit,
    )
    return reporter, buf


def test_wrap_command_outputs_wrapped_text() -> None:
    reporter, buf = _make_reporter()

    cli_main.main(["wrap", "foo bar baz foobar", "--width", "8", "--margin", "3"], reporter=reporter)

    assert buf.getvalue() == "   foo bar baz\n   foobar\n"


def test_wrap_command_with_title() -> None:
    reporter, buf = _make_reporter()

    cli_main.main(["wrap", "hello", "--title", "Notes"], reporter=reporter)

    assert buf.getvalue() == f"{pad_title('Notes')}\n     hello\n"


def test_wrap_command_rejects_bad_width() -> None:
    reporter, buf = _make_reporter()

    with pytest.raises(ExitCalled):
        cli_main.main(["wrap", "hello", "--width", "0"], reporter=reporter)

    assert "--width must be positive" in buf.getvalue()

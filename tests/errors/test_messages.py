from slsdiag.errors.layout import pad_title
from slsdiag.errors.messages import (
    DEBUG_ENV_VAR,
    debug_hint_block,
    environment_block,
    error_header_block,
    stack_trace_block,
    support_block,
)
from slsdiag.errors.types import EnvironmentSnapshot


def test_error_header_block_is_title_blank_line_and_wrapped_message() -> None:
    block = error_header_block("Serverless Error", "boom")

    assert block.plain == f"{pad_title('Serverless Error')}\n\n     boom\n"
    assert block.style == "yellow"


def test_error_header_block_wraps_at_fifty_with_margin_five() -> None:
    message = " ".join(["word"] * 20)
    block = error_header_block("Warning", message)

    body = block.plain.split("\n\n", 1)[1]
    lines = [line for line in body.split("\n") if line]
    assert len(lines) == 2
    assert all(line.startswith("     word") for line in lines)


def test_support_block_lists_links_in_white() -> None:
    block = support_block()
    text = block.plain

    assert text.startswith(pad_title("Get Support") + "\n")
    assert "     Docs:          docs.serverless.com\n" in text
    assert "     Bugs:          github.com/serverless/serverless/issues\n" in text
    assert "     Forums:        forum.serverless.com\n" in text
    assert "     Chat:          gitter.im/serverless/serverless\n" in text

    white = [text[span.start:span.end] for span in block.spans if span.style == "white"]
    assert "docs.serverless.com" in white
    assert len(white) == 4


def test_environment_block_interpolates_snapshot() -> None:
    env = EnvironmentSnapshot(operating_system="linux", runtime_version="3.12.1", tool_version="1.2.3")
    text = environment_block(env).plain

    assert text.startswith(pad_title("Your Environment Information") + "\n")
    assert "     OS:" + " " * 17 + "linux\n" in text
    assert "     Python Version:" + " " * 5 + "3.12.1\n" in text
    assert "     Serverless Version: 1.2.3\n" in text


def test_stack_trace_block_keeps_trace_raw_and_unstyled() -> None:
    trace = "Traceback (most recent call last):\n\t  a very long line " + "x" * 120 + "\r\nValueError: boom\n"
    title, raw = stack_trace_block(trace)

    assert title.plain == pad_title("Stack Trace")
    assert title.style == "yellow"
    assert raw is trace


def test_debug_hint_block_mentions_debug_variable_in_red() -> None:
    block = debug_hint_block()

    assert block.style == "red"
    assert block.plain.startswith("\n")
    assert f'"{DEBUG_ENV_VAR}=*"' in block.plain
    assert DEBUG_ENV_VAR == "SLS_DEBUG"


def test_blocks_are_independent_between_calls() -> None:
    a = error_header_block("A", "one")
    b = error_header_block("A", "one")
    a.append("mutated")

    assert "mutated" not in b.plain
    assert error_header_block("A", "one").plain == b.plain

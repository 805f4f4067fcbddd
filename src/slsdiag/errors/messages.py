"""
Message blocks shown by the error reporter.

Each function is pure and returns a ``rich.text.Text``; the reporter decides
where and whether to print it. Use ``block.plain`` for the uncolored text.
"""

from __future__ import annotations

from rich.text import Text

from .layout import pad_title, word_wrap
from .types import EnvironmentSnapshot

INFO_STYLE = "yellow"
ALERT_STYLE = "red"
LINK_STYLE = "white"

MESSAGE_LINE_LENGTH = 50
MESSAGE_MARGIN = 5

DEBUG_ENV_VAR = "SLS_DEBUG"

SUPPORT_LINKS: tuple[tuple[str, str], ...] = (
    ("Docs", "docs.serverless.com"),
    ("Bugs", "github.com/serverless/serverless/issues"),
    ("Forums", "forum.serverless.com"),
    ("Chat", "gitter.im/serverless/serverless"),
)


def _label(name: str, width: int) -> str:
    return f"     {name + ':':<{width}}"


def error_header_block(error_type: str, message: str) -> Text:
    """Padded title for the error kind followed by the wrapped message."""
    text = Text(style=INFO_STYLE)
    text.append(f"{pad_title(error_type)}\n\n")
    text.append(word_wrap(message, MESSAGE_LINE_LENGTH, MESSAGE_MARGIN))
    return text


def support_block() -> Text:
    text = Text(style=INFO_STYLE)
    text.append(f"{pad_title('Get Support')}\n")
    for name, url in SUPPORT_LINKS:
        text.append(_label(name, 15))
        text.append(url, style=LINK_STYLE)
        text.append("\n")
    return text


def environment_block(env: EnvironmentSnapshot) -> Text:
    text = Text(style=INFO_STYLE)
    text.append(f"{pad_title('Your Environment Information')}\n")
    text.append(f"{_label('OS', 20)}{env.operating_system}\n")
    text.append(f"{_label('Python Version', 20)}{env.runtime_version}\n")
    text.append(f"{_label('Serverless Version', 20)}{env.tool_version}\n")
    return text


def stack_trace_block(stack_trace: str) -> tuple[Text, str]:
    """
    Padded title and the trace to print under it.

    The trace is a plain string and is written out byte for byte, never
    rendered through Rich.
    """
    return Text(pad_title("Stack Trace"), style=INFO_STYLE), stack_trace


def debug_hint_block() -> Text:
    return Text(
        "\n"
        " For debugging logs, run again after setting the"
        f' "{DEBUG_ENV_VAR}=*" environment variable.\n',
        style=ALERT_STYLE,
    )

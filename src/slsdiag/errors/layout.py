from __future__ import annotations

import re

TITLE_LENGTH = 60

# Tokens never contain a comma or whitespace.
_TOKEN_RE = re.compile(r"[^,\s]+")


def pad_title(title: str, width: int = TITLE_LENGTH) -> str:
    """
    Pad a title with two spaces on the left and dashes on the right.

    The result is at least `width` characters long; a title that is already
    too long is returned with its fixed padding and no dashes, never truncated.

    Usage example
    -------------
        pad_title("Foobar", width=15)  # "  Foobar ------"
    """
    return f"  {title} ".ljust(width, "-")


def word_wrap(sentence: str, line_length: int, left_margin: int) -> str:
    """
    Greedily break a sentence into margin-prefixed, newline-terminated lines.

    Tokens are added to the current line one at a time. As soon as the
    space-joined line is longer than `line_length` it is emitted, including
    the token that pushed it over, and a new line is started. Whatever is left
    after the last token is emitted the same way.

    Usage example
    -------------
        word_wrap("foo bar baz foobar", 8, 3)  # "   foo bar baz\\n   foobar\\n"
    """
    margin = " " * left_margin
    wrapped: list[str] = []

    line: list[str] = []
    for word in _TOKEN_RE.findall(sentence):
        line.append(word)
        joined = " ".join(line)
        if len(joined) > line_length:
            wrapped.append(f"{margin}{joined}\n")
            line = []

    if line:
        wrapped.append(f"{margin}{' '.join(line)}\n")

    return "".join(wrapped)

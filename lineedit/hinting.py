"""Helpers for hints: white-space checks and the first token of a hint."""

from __future__ import annotations

import regex

# Line breaks stand alone, runs of other white space stay together, words keep
# inner apostrophes and separators, anything else is one grapheme.
_SEGMENT = regex.compile(
    r"\r\n"
    r"|[\n\r\x0b\x0c\x85\u2028\u2029]"
    r"|[^\S\n\r\x0b\x0c\x85\u2028\u2029]+"
    r"|\w+(?:['.:\u2019]\w+)*"
    r"|\X"
)


def is_whitespace_str(s: str) -> bool:
    """Whether every character of ``s`` is white space (true for the empty string)."""
    return all(c.isspace() and c not in "\x1c\x1d\x1e\x1f" for c in s)


def get_first_token(string: str) -> str:
    """Leading white space of ``string`` followed by its first word-bounded segment."""
    parts = []
    for match in _SEGMENT.finditer(string):
        segment = match.group()
        parts.append(segment)
        if not is_whitespace_str(segment):
            break
    return "".join(parts)
"""Whitespace and escape handling for text runs.

Text runs in children position are trimmed line by line: indentation at the
start of a line and trailing whitespace before a newline are dropped, unless
the newline is escaped with a backslash, in which case only the backslash is
removed. Quoted attribute values keep their whitespace and resolve
single-character backslash escapes instead.
"""

import re

_ESCAPE_PATTERN = re.compile(r"\\([\s\S]?)")


def trim_line_start(text):
    return text.lstrip()


def trim_line_end(text):
    """Trim a run that is followed by a newline marker."""
    if text.endswith("\\"):
        # Escaped newline: keep the surrounding whitespace, drop the backslash.
        return text[:-1]
    return text.rstrip()


def trim_fragment_end(text, value_pending):
    """Trim a run that reaches the end of its fragment.

    A value pending right after the run is rendered flush against it, so the
    whitespace stays; otherwise this is the end of the content.
    """
    if value_pending:
        return text
    return text.rstrip()


def unescape(text):
    if "\\" not in text:
        return text
    return _ESCAPE_PATTERN.sub(r"\1", text)


def stringify(value):
    """Text contributed by a value embedded in a quoted attribute string."""
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, str):
        return value
    return str(value)

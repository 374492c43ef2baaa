"""Errors raised while parsing a template.

Every failure is fatal to the parse call that raised it; no partial tree is
returned. Each error carries a short kebab-case ``code`` plus the index of the
fragment that was being scanned (``None`` once the end of input is reached).
"""


class ParseError(Exception):
    """Base class for template syntax errors."""

    code = "parse-error"

    def __init__(self, message, fragment=None):
        super().__init__(message)
        self.message = message
        self.fragment = fragment

    def __repr__(self):
        if self.fragment is not None:
            return f"{self.__class__.__name__}({self.message!r}, fragment={self.fragment})"
        return f"{self.__class__.__name__}({self.message!r})"

    def __str__(self):
        if self.fragment is not None:
            return f"(fragment {self.fragment}): {self.code} - {self.message}"
        return f"{self.code} - {self.message}"


class UnmatchedClosingTag(ParseError):
    code = "unmatched-closing-tag"


class MismatchedClosingTag(ParseError):
    code = "mismatched-closing-tag"


class UnmatchedOpeningTag(ParseError):
    code = "unmatched-opening-tag"


class MissingSpreadExpression(ParseError):
    code = "missing-spread-expression"


class ExpressionExpected(ParseError):
    code = "expression-expected"


class UnexpectedText(ParseError):
    code = "unexpected-text"


class UnexpectedExpression(ParseError):
    code = "unexpected-expression"


class MissingCommentTerminator(ParseError):
    code = "missing-comment-terminator"


def tag_display(tag):
    """Human readable form of a tag identifier for error messages."""
    if isinstance(tag, str):
        return tag
    name = getattr(tag, "__name__", None)
    if callable(tag) and isinstance(name, str):
        return name
    return str(tag)

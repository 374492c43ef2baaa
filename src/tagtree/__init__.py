from .build import create_elements, element, template
from .errors import (
    ExpressionExpected,
    MismatchedClosingTag,
    MissingCommentTerminator,
    MissingSpreadExpression,
    ParseError,
    UnexpectedExpression,
    UnexpectedText,
    UnmatchedClosingTag,
    UnmatchedOpeningTag,
)
from .parser import TagTree, parse
from .serialize import to_test_format
from .tokenizer import TokenizerOpts
from .tokens import ParseElement, ParseValue

__all__ = [
    "ExpressionExpected",
    "MismatchedClosingTag",
    "MissingCommentTerminator",
    "MissingSpreadExpression",
    "ParseElement",
    "ParseError",
    "ParseValue",
    "TagTree",
    "TokenizerOpts",
    "UnexpectedExpression",
    "UnexpectedText",
    "UnmatchedClosingTag",
    "UnmatchedOpeningTag",
    "create_elements",
    "element",
    "parse",
    "template",
    "to_test_format",
]

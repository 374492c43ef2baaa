"""
Test-format serialization of parse trees.

The format follows the html5lib tree dumps: one node per line with a '| '
prefix, children indented by two spaces, attributes listed right under their
element sorted by name. Literal strings are quoted; any other value is shown
as ``${repr}``.
"""

from .errors import tag_display
from .tokens import ParseElement


def to_test_format(node, indent=0):
    """Convert a parse node to test format string."""
    if not isinstance(node, ParseElement):
        return _format_value(node.value, indent)

    line = f"| {' ' * indent}<{tag_display(node.tag)}>"
    sections = [line]
    sections.extend(_format_attributes(node, indent))
    for child in node.children:
        sections.append(to_test_format(child, indent + 2))
    return "\n".join(sections)


def _format_value(value, indent):
    if isinstance(value, str):
        return f'| {" " * indent}"{value}"'
    return f"| {' ' * indent}${{{value!r}}}"


def _format_attributes(node, indent):
    """Format element attributes for test output."""
    if not node.props:
        return []

    padding = " " * (indent + 2)
    formatted = []
    for name, value in sorted(node.props.items(), key=lambda item: item[0]):
        if isinstance(value, str):
            formatted.append(f'| {padding}{name}="{value}"')
        else:
            formatted.append(f"| {padding}{name}=${{{value!r}}}")
    return formatted

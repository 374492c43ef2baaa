"""Turning parse trees into caller-built elements."""

from .parser import TagTree
from .tokens import ParseElement


def element(tag, props, *children):
    """Default element factory: a plain ``(tag, props, children)`` tuple."""
    return (tag, props, list(children))


def create_elements(node, factory=element):
    """Build elements bottom-up by calling ``factory(tag, props, *children)``.

    Value leaves are passed through as they are. The walk uses an explicit
    stack, so deeply nested trees do not hit the recursion limit.
    """
    if not isinstance(node, ParseElement):
        return node.value

    stack = [(node, iter(node.children), [])]
    while True:
        parent, remaining, children = stack[-1]
        for child in remaining:
            if isinstance(child, ParseElement):
                stack.append((child, iter(child.children), []))
                break
            children.append(child.value)
        else:
            stack.pop()
            built = factory(parent.tag, parent.props, *children)
            if not stack:
                return built
            stack[-1][2].append(built)


def template(strings, *values, factory=element):
    """Parse a template and build its elements.

    ``strings`` is either the sequence of literal fragments, followed by the
    substitution values as positional arguments, or a template-string object
    exposing ``strings`` and ``values`` (such as ``string.templatelib.Template``).
    """
    if not values and hasattr(strings, "strings") and hasattr(strings, "values"):
        strings, values = strings.strings, strings.values
    return create_elements(TagTree(strings, values).result, factory)

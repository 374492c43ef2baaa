class Tag:
    __slots__ = ("kind", "name", "self_closing", "wildcard")

    START = 0
    END = 1

    def __init__(self, kind, name, wildcard=False, self_closing=False):
        self.kind = kind
        self.name = name
        self.wildcard = bool(wildcard)
        self.self_closing = bool(self_closing)

    def __repr__(self):
        if self.kind == self.START:
            return f"<start:{self.name!r}>"
        if self.self_closing:
            return "<end:/>"
        if self.wildcard:
            return "<end://>"
        return f"<end:{self.name!r}>"


class CharacterTokens:
    __slots__ = ("data",)

    def __init__(self, data):
        self.data = data


class ValueToken:
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value


class PropToken:
    __slots__ = ("name", "value")

    def __init__(self, name, value):
        self.name = name
        self.value = value


class SpreadToken:
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value


class CommentToken:
    __slots__ = ()


class ParseElement:
    """An element of the parse tree.

    - tag: name string parsed from the text, or a substitution value
    - props: dict of attributes in insertion order, None when the tag has none
    - children: list of ParseElement / ParseValue in source order
    """

    __slots__ = ("children", "props", "tag")

    type = "element"

    def __init__(self, tag, props=None, children=None):
        self.tag = tag
        self.props = props
        self.children = children if children is not None else []

    def __repr__(self):
        return f"ParseElement({self.tag!r}, {self.props!r}, {self.children!r})"

    def __eq__(self, other):
        if not isinstance(other, ParseElement):
            return NotImplemented
        return self.tag == other.tag and self.props == other.props and self.children == other.children

    __hash__ = None


class ParseValue:
    """A leaf of the parse tree: a text run or a raw substitution value."""

    __slots__ = ("value",)

    type = "value"

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"ParseValue({self.value!r})"

    def __eq__(self, other):
        if not isinstance(other, ParseValue):
            return NotImplemented
        return self.value == other.value

    __hash__ = None

from .errors import MismatchedClosingTag, UnmatchedClosingTag, UnmatchedOpeningTag, tag_display
from .tokens import CharacterTokens, CommentToken, ParseElement, ParseValue, PropToken, SpreadToken, Tag, ValueToken


def _same_tag(closing, opening):
    if closing is opening:
        return True
    return isinstance(closing, str) and isinstance(opening, str) and closing == opening


class TreeBuilder:
    """Assembles the parse tree from the tokenizer's structural tokens.

    The builder keeps the chain of open elements on an explicit stack, so
    nesting depth never turns into Python recursion. The outermost element is
    a synthetic wrapper with an empty tag; it is returned by ``finish``.
    """

    __slots__ = ("current", "root", "stack")

    def __init__(self):
        self.root = ParseElement("")
        self.current = self.root
        self.stack = []

    @property
    def depth(self):
        return len(self.stack)

    def process_token(self, token):
        token_type = type(token)
        if token_type is CharacterTokens:
            self.current.children.append(ParseValue(token.data))
        elif token_type is ValueToken:
            self.current.children.append(ParseValue(token.value))
        elif token_type is Tag:
            if token.kind == Tag.START:
                self._open_element(token.name)
            else:
                self._close_element(token)
        elif token_type is PropToken:
            self._props()[token.name] = token.value
        elif token_type is SpreadToken:
            self._spread(token.value)
        elif token_type is CommentToken:
            # Comments are dropped from the tree.
            return
        else:
            msg = f"Unknown token type {token_type.__name__}"
            raise TypeError(msg)

    def finish(self):
        if self.stack:
            msg = f'Unmatched opening tag "{tag_display(self.current.tag)}"'
            raise UnmatchedOpeningTag(msg)
        return self.root

    # ---------------------
    # Stack discipline
    # ---------------------

    def _open_element(self, tag):
        element = ParseElement(tag)
        self.current.children.append(element)
        self.stack.append(self.current)
        self.current = element

    def _close_element(self, token):
        if not self.stack:
            msg = f'Unmatched closing tag "{tag_display(token.name)}"'
            raise UnmatchedClosingTag(msg)
        if not token.wildcard and not _same_tag(token.name, self.current.tag):
            msg = (
                f'Mismatched closing tag "{tag_display(token.name)}" '
                f'for opening tag "{tag_display(self.current.tag)}"'
            )
            raise MismatchedClosingTag(msg)
        self.current = self.stack.pop()

    def _props(self):
        props = self.current.props
        if props is None:
            props = self.current.props = {}
        return props

    def _spread(self, value):
        if value is None:
            return
        try:
            self._props().update(value)
        except (TypeError, ValueError) as exc:
            msg = f'Cannot spread {type(value).__name__} into props of "{tag_display(self.current.tag)}"'
            raise TypeError(msg) from exc

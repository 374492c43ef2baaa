import re

from .cursor import FragmentCursor
from .errors import (
    ExpressionExpected,
    MissingCommentTerminator,
    MissingSpreadExpression,
    ParseError,
    UnexpectedExpression,
    UnexpectedText,
    tag_display,
)
from .normalize import stringify, trim_fragment_end, trim_line_end, trim_line_start, unescape
from .tokens import CharacterTokens, CommentToken, PropToken, SpreadToken, Tag, ValueToken

# Grammar, with ${} standing for a substitution value:
#
#   children : (element | comment | ${} | text)*
#   element  : "<" (name | ${})? props "/>"
#            | "<" (name | ${})? props ">" children "<" "/" "/"? (name | ${})? ">"
#   props    : (name ("=" (string | ${}))? | "..." ${})*
#   string   : '"' (escape | ${} | char)* '"' | "'" (escape | ${} | char)* "'"
#   comment  : "<!--" (char | ${})* "-->"
#   name     : [-_$\w]+

# First significant marker in children position.
_CHILDREN_PATTERN = re.compile(
    r"(?P<newline>(?:\r\n|\r|\n)\s*)"
    r"|(?P<comment><!--[\s\S]*?(?P<comment_end>-->|\Z))"
    r"|(?P<tag><\s*(?P<slash>/{0,2})\s*(?P<name>[-_$\w]*))",
)

# Next prop, spread or tag end after a tag name. An unterminated string runs
# to the end of the fragment; the closing quote group tells the two apart.
_PROPS_PATTERN = re.compile(
    r"\s*(?:"
    r"(?P<tag_end>/?\s*>)"
    r"|(?P<spread>\.\.\.\s*)"
    r"|(?P<name>[-_$\w]+)\s*(?P<equals>=)?\s*"
    r"(?P<string>\"(?:\\[\s\S]?|[^\"\\])*(?P<double_close>\")?"
    r"|'(?:\\[\s\S]?|[^'\\])*(?P<single_close>')?)?"
    r")",
)

_CLOSING_SINGLE_QUOTE_PATTERN = re.compile(r"(?:\\[\s\S]|[^'\\])*'")
_CLOSING_DOUBLE_QUOTE_PATTERN = re.compile(r'(?:\\[\s\S]|[^"\\])*"')

_UNEXPECTED_CONTEXT = 20


class TokenizerOpts:
    __slots__ = ("debug", "strict_comments")

    def __init__(self, debug=False, strict_comments=False):
        self.debug = bool(debug)
        self.strict_comments = bool(strict_comments)


class Tokenizer:
    CHILDREN = 0
    PROPS = 1
    CLOSING_TAG_TAIL = 2
    CLOSING_SINGLE_QUOTE = 3
    CLOSING_DOUBLE_QUOTE = 4
    CLOSING_COMMENT = 5

    __slots__ = (
        "buffer",
        "current_tag_name",
        "cursor",
        "length",
        "line_start",
        "opts",
        "pos",
        "prop_name",
        "prop_parts",
        "sink",
        "state",
    )

    def __init__(self, sink, opts=None):
        self.sink = sink
        self.opts = opts or TokenizerOpts()

        self.state = self.CHILDREN
        self.cursor = None
        self.buffer = ""
        self.length = 0
        self.pos = 0
        self.line_start = True
        self.current_tag_name = ""

        # Quoted prop value being accumulated across substitution values.
        self.prop_name = ""
        self.prop_parts = []

    def run(self, fragments, values=()):
        self.cursor = FragmentCursor(fragments, values)
        self.state = self.CHILDREN
        self.line_start = True
        self.current_tag_name = ""
        self.prop_name = ""
        self.prop_parts.clear()

        for fragment in self.cursor:
            self.buffer = fragment
            self.length = len(fragment)
            self.pos = 0
            while self.pos < self.length:
                state = self.state
                if state == self.CHILDREN:
                    self._state_children()
                elif state == self.PROPS:
                    self._state_props()
                elif state == self.CLOSING_TAG_TAIL:
                    self._state_closing_tag_tail()
                elif state == self.CLOSING_SINGLE_QUOTE:
                    self._state_closing_quote(_CLOSING_SINGLE_QUOTE_PATTERN)
                elif state == self.CLOSING_DOUBLE_QUOTE:
                    self._state_closing_quote(_CLOSING_DOUBLE_QUOTE_PATTERN)
                else:
                    self._state_closing_comment()
            self._end_of_fragment()

        self._end_of_input()

    # ---------------------
    # State handlers
    # ---------------------

    def _state_children(self):
        buffer = self.buffer
        pos = self.pos
        match = _CHILDREN_PATTERN.search(buffer, pos)
        if match is None:
            text = buffer[pos:]
            if self.line_start:
                text = trim_line_start(text)
            self._emit_text(trim_fragment_end(text, self.cursor.pending))
            self.pos = self.length
            return

        start = match.start()
        newline = match.group("newline")
        if pos < start:
            text = buffer[pos:start]
            if self.line_start:
                text = trim_line_start(text)
            if newline is not None:
                text = trim_line_end(text)
            self._emit_text(text)

        self.line_start = newline is not None
        self.pos = match.end()
        if match.group("comment") is not None:
            self._emit_token(CommentToken())
            if not match.group("comment_end"):
                self._unterminated_comment()
        elif match.group("tag") is not None:
            self._tag_marker(match.group("slash"), match.group("name"))

    def _state_props(self):
        buffer = self.buffer
        pos = self.pos
        match = _PROPS_PATTERN.search(buffer, pos)
        if match is None:
            rest = buffer[pos:]
            if rest.strip():
                self._unexpected_text(rest)
            self.pos = self.length
            return

        start = match.start()
        end = match.end()
        if pos < start:
            self._unexpected_text(buffer[pos:start])
        self.pos = end
        at_end = end == self.length

        tag_end = match.group("tag_end")
        if tag_end is not None:
            if tag_end[0] == "/":
                self._emit_token(Tag(Tag.END, None, wildcard=True, self_closing=True))
            self.state = self.CHILDREN
            return

        if match.group("spread") is not None:
            if not (at_end and self.cursor.pending):
                msg = f'Missing expression after "..." while parsing props for "{tag_display(self.current_tag_name)}"'
                raise MissingSpreadExpression(msg, self.cursor.index)
            self._emit_token(SpreadToken(self.cursor.consume_value()))
            return

        name = match.group("name")
        string = match.group("string")
        if string is None:
            if not match.group("equals"):
                self._emit_token(PropToken(name, True))
            elif not at_end:
                self._unexpected_text(buffer[end:])
            elif not self.cursor.pending:
                msg = f'Expression expected for prop "{name}"'
                raise ExpressionExpected(msg, self.cursor.index)
            else:
                self._emit_token(PropToken(name, self.cursor.consume_value()))
            return

        if match.group("double_close") is not None or match.group("single_close") is not None:
            self._emit_token(PropToken(name, unescape(string[1:-1])))
            return

        # The string continues past a substitution value (or the input ends).
        self.prop_name = name
        self.prop_parts.clear()
        self.prop_parts.append(unescape(string[1:]))
        self.state = self.CLOSING_SINGLE_QUOTE if string[0] == "'" else self.CLOSING_DOUBLE_QUOTE

    def _state_closing_tag_tail(self):
        buffer = self.buffer
        pos = self.pos
        close = buffer.find(">", pos)
        if close == -1:
            rest = buffer[pos:]
            if rest.strip():
                self._unexpected_text(rest)
            self.pos = self.length
            return
        if buffer[pos:close].strip():
            self._unexpected_text(buffer[pos:close])
        self.pos = close + 1
        self.state = self.CHILDREN

    def _state_closing_quote(self, pattern):
        buffer = self.buffer
        pos = self.pos
        match = pattern.match(buffer, pos)
        if match is None:
            self.prop_parts.append(unescape(buffer[pos:]))
            self.pos = self.length
            return
        end = match.end()
        self.prop_parts.append(unescape(buffer[pos : end - 1]))
        self._emit_token(PropToken(self.prop_name, "".join(self.prop_parts)))
        self.prop_name = ""
        self.prop_parts.clear()
        self.pos = end
        self.state = self.PROPS

    def _state_closing_comment(self):
        close = self.buffer.find("-->", self.pos)
        if close == -1:
            self.pos = self.length
            return
        self.pos = close + 3
        self.state = self.CHILDREN

    # ---------------------
    # Helper methods
    # ---------------------

    def _tag_marker(self, slash, name):
        tag = name
        if not name and self.pos == self.length and self.cursor.pending:
            # <${Component}> uses the value itself as the tag.
            tag = self.cursor.consume_value()

        if slash:
            self._emit_token(Tag(Tag.END, tag, wildcard=slash == "//"))
            self.state = self.CLOSING_TAG_TAIL
        else:
            self.current_tag_name = tag
            self._emit_token(Tag(Tag.START, tag))
            self.state = self.PROPS

    def _unterminated_comment(self):
        if self.cursor.pending:
            # <!-- ${value} --> : the comment resumes in the next fragment.
            self.state = self.CLOSING_COMMENT
        elif self.opts.strict_comments:
            raise MissingCommentTerminator('Missing "-->"', self.cursor.index)

    def _end_of_fragment(self):
        cursor = self.cursor
        if not cursor.pending:
            return
        state = self.state
        if state == self.CHILDREN:
            self._emit_token(ValueToken(cursor.consume_value()))
            self.line_start = False
        elif state in (self.CLOSING_SINGLE_QUOTE, self.CLOSING_DOUBLE_QUOTE):
            self.prop_parts.append(stringify(cursor.consume_value()))
        elif state == self.CLOSING_COMMENT:
            cursor.consume_value()
        else:
            msg = f"Unexpected expression ${{{cursor.peek_value()!r}}}"
            raise UnexpectedExpression(msg, cursor.index)

    def _end_of_input(self):
        if self.state == self.CLOSING_COMMENT:
            raise MissingCommentTerminator('Missing "-->"')
        if self.state == self.CLOSING_TAG_TAIL:
            raise UnexpectedText('Unexpected end of input, expected ">"')

    def _unexpected_text(self, text):
        msg = f"Unexpected text `{text[:_UNEXPECTED_CONTEXT].strip()}`"
        raise UnexpectedText(msg, self.cursor.index)

    def _emit_text(self, text):
        if text:
            self._emit_token(CharacterTokens(text))

    def _emit_token(self, token):
        if self.opts.debug:
            _debug_token(token)
        try:
            self.sink.process_token(token)
        except ParseError as exc:
            if exc.fragment is None:
                exc.fragment = self.cursor.index
            raise


def _debug_token(token):
    """Print debug information about a token."""
    if type(token) is CharacterTokens:
        preview = token.data[:20] if len(token.data) > 20 else token.data
        suffix = "..." if len(token.data) > 20 else ""
        print(f"Token: Character '{preview}{suffix}'")
    elif type(token) is ValueToken:
        print(f"Token: Value {token.value!r}")
    elif type(token) is PropToken:
        print(f"Token: Prop {token.name}={token.value!r}")
    elif type(token) is SpreadToken:
        print(f"Token: Spread {token.value!r}")
    elif type(token) is CommentToken:
        print("Token: Comment")
    else:
        print(f"Token: Tag {token!r}")

class FragmentCursor:
    """Walks the interleaved ``F0 V0 F1 V1 ... Fn`` template input.

    The scanner only ever looks at one fragment at a time. A value sits right
    after the current fragment and stays *pending* until the scanner consumes
    it; the scanner decides what the value means from the mode it is in when
    the fragment runs out.
    """

    __slots__ = ("_fragments", "_values", "index", "pending")

    def __init__(self, fragments, values=()):
        if isinstance(fragments, str):
            fragments = (fragments,)
        fragments = tuple(fragments)
        values = tuple(values)
        if not fragments:
            msg = "A template needs at least one text fragment"
            raise ValueError(msg)
        if len(fragments) != len(values) + 1:
            msg = f"Expected {len(fragments) - 1} substitution values for {len(fragments)} fragments, got {len(values)}"
            raise ValueError(msg)
        for fragment in fragments:
            if not isinstance(fragment, str):
                msg = f"Template fragments must be strings, got {type(fragment).__name__}"
                raise TypeError(msg)
        self._fragments = fragments
        self._values = values
        self.index = -1
        self.pending = False

    def __iter__(self):
        while self.advance():
            yield self.text

    def __len__(self):
        return len(self._fragments)

    def advance(self):
        index = self.index + 1
        if index >= len(self._fragments):
            self.index = len(self._fragments)
            self.pending = False
            return False
        self.index = index
        self.pending = index < len(self._values)
        return True

    @property
    def text(self):
        return self._fragments[self.index]

    @property
    def is_last(self):
        return self.index >= len(self._fragments) - 1

    def peek_value(self):
        if not self.pending:
            return None
        return self._values[self.index]

    def consume_value(self):
        if not self.pending:
            msg = f"No substitution value is pending after fragment {self.index}"
            raise RuntimeError(msg)
        self.pending = False
        return self._values[self.index]

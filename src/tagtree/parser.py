"""Minimal tagtree parser entry point."""

from .tokenizer import Tokenizer, TokenizerOpts
from .treebuilder import TreeBuilder


class TagTree:
    __slots__ = ("debug", "root", "tokenizer", "tree_builder")

    def __init__(
        self,
        fragments,
        values=(),
        *,
        debug=False,
        opts=None,
        tree_builder=None,
    ):
        self.debug = bool(debug)
        self.tree_builder = tree_builder or TreeBuilder()
        opts = opts or TokenizerOpts()
        if self.debug:
            opts.debug = True

        self.tokenizer = Tokenizer(self.tree_builder, opts)
        self.tokenizer.run(fragments, values)
        self.root = self.tree_builder.finish()

    @property
    def result(self):
        """The parse tree without the synthetic wrapper where possible.

        A single top-level node (one root element, or one lone value) is
        returned as is; otherwise the wrapper element with tag "" is kept,
        which also covers a template with no content at all.
        """
        children = self.root.children
        if len(children) == 1:
            return children[0]
        return self.root


def parse(fragments, values=(), *, opts=None):
    """Parse template fragments interleaved with substitution values.

    ``fragments`` holds the literal text pieces and ``values`` the values that
    sit between them, so ``len(fragments) == len(values) + 1``.
    """
    return TagTree(fragments, values, opts=opts).result

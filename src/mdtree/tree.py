"""Syntax tree built from a linear markdown-it token stream.

markdown-it emits a flat token list where structure is encoded by each token's
``nesting`` (+1 opens, -1 closes, 0 is self-contained). This module rebuilds
the hierarchy so renderers can walk it.

Each :class:`SyntaxTreeNode` is one of:

- the root of the document (children only, no token);
- a leaf wrapping a single self-contained token;
- a branch wrapping an ``*_open``/``*_close`` pair and the tokens between.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator, Sequence

from mdtree.exceptions import (
    EmptyTokenStreamError,
    InvalidNestingError,
    MissingAttributeDataError,
    UnbalancedNestingError,
    UnclosedTokenError,
)

if TYPE_CHECKING:
    from markdown_it.token import Token

_OPEN_SUFFIX = "_open"


class SyntaxTreeNode:
    """A Markdown syntax tree node.

    Build a tree by passing the whole token stream::

        tree = SyntaxTreeNode(md.parse(text))

    Nodes are read-only after construction.
    """

    def __init__(self, tokens: Sequence[Token] = (), *, create_root: bool = True) -> None:
        self._token: Token | None = None
        self._opening: Token | None = None
        self._closing: Token | None = None
        self._parent: SyntaxTreeNode | None = None
        self._children: tuple[SyntaxTreeNode, ...] = ()

        if create_root:
            self._children = self._build_children(tokens)
            return

        if not tokens:
            raise EmptyTokenStreamError(
                "Only the root node can be created from an empty token stream"
            )

        if len(tokens) == 1:
            token = tokens[0]
            if token.nesting:
                raise UnbalancedNestingError(
                    "Unequal nesting level at the start and end of token stream"
                )
            self._token = token
            # Inline containers (``inline``, ``image``) carry their own sub-stream.
            if token.children:
                self._children = self._build_children(token.children)
            return

        opening, closing = tokens[0], tokens[-1]
        if opening.nesting != 1:
            raise InvalidNestingError(opening, expected="1")
        if closing.nesting != -1:
            raise InvalidNestingError(closing, expected="-1")
        self._opening = opening
        self._closing = closing
        self._children = self._build_children(tokens[1:-1])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.type})"

    def _build_children(self, tokens: Sequence[Token]) -> tuple[SyntaxTreeNode, ...]:
        """Partition ``tokens`` into top-level spans and build a child per span."""
        children: list[SyntaxTreeNode] = []
        index = 0
        while index < len(tokens):
            token = tokens[index]
            if token.nesting == 0:
                end = index
            elif token.nesting == 1:
                end = _find_closing_index(tokens, index)
            else:
                raise InvalidNestingError(token)

            child = type(self)(tokens[index : end + 1], create_root=False)
            child._parent = self
            children.append(child)
            index = end + 1
        return tuple(children)

    # Navigation

    @property
    def parent(self) -> SyntaxTreeNode | None:
        return self._parent

    @property
    def children(self) -> tuple[SyntaxTreeNode, ...]:
        return self._children

    @property
    def is_root(self) -> bool:
        """Is the node the document root (no token data)."""
        return self._token is None and self._opening is None

    @property
    def is_nested(self) -> bool:
        """Is the node built from an opening/closing token pair."""
        return self._opening is not None

    @property
    def siblings(self) -> tuple[SyntaxTreeNode, ...]:
        """All children of the parent, including this node."""
        if self._parent is None:
            return (self,)
        return self._parent.children

    @property
    def next_sibling(self) -> SyntaxTreeNode | None:
        siblings = self.siblings
        index = siblings.index(self)
        if index + 1 < len(siblings):
            return siblings[index + 1]
        return None

    @property
    def previous_sibling(self) -> SyntaxTreeNode | None:
        siblings = self.siblings
        index = siblings.index(self)
        if index > 0:
            return siblings[index - 1]
        return None

    def walk(self, *, include_self: bool = True) -> Iterator[SyntaxTreeNode]:
        """Yield nodes depth first, in the order of the source token stream.

        Each call returns a fresh iterator, so a walk can be restarted at any
        time and several walks may run side by side.
        """
        stack = [self] if include_self else list(reversed(self._children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def to_tokens(self) -> list[Token]:
        """Flatten the subtree back into a linear token stream."""
        tokens: list[Token] = []
        if self._token is not None:
            tokens.append(self._token)
            return tokens
        if self._opening is not None:
            tokens.append(self._opening)
        for child in self._children:
            tokens.extend(child.to_tokens())
        if self._closing is not None:
            tokens.append(self._closing)
        return tokens

    def pretty(self, *, indent: int = 2, show_text: bool = False, _current: int = 0) -> str:
        """Return an indented outline of the subtree, for debugging."""
        prefix = " " * _current
        line = f"{prefix}<{self.type}"
        if not self.is_root and self.attrs:
            line += " " + " ".join(f"{key}={value!r}" for key, value in self.attrs.items())
        line += ">"
        lines = [line]
        if show_text and not self.is_root and self.type in ("text", "code_inline") and self.content:
            lines.append(" " * (_current + indent) + self.content.replace("\n", "\\n"))
        for child in self._children:
            lines.append(child.pretty(indent=indent, show_text=show_text, _current=_current + indent))
        return "\n".join(lines)

    # Token data

    def _attribute_token(self) -> Token:
        """Return the token backing the attribute properties below."""
        if self._token is not None:
            return self._token
        if self._opening is not None:
            return self._opening
        raise MissingAttributeDataError("Root node has no attribute data")

    @property
    def type(self) -> str:
        """Node type.

        - ``"root"`` for the root node
        - ``Token.type`` for a single token
        - ``Token.type`` of the opening token, ``_open`` suffix removed, for a pair
        """
        if self._token is not None:
            return self._token.type
        if self._opening is not None:
            return self._opening.type.removesuffix(_OPEN_SUFFIX)
        return "root"

    @property
    def tag(self) -> str:
        """HTML tag name, e.g. ``"p"``."""
        return self._attribute_token().tag

    @property
    def attrs(self) -> dict[str, str | int | float]:
        """HTML attributes."""
        attrs = self._attribute_token().attrs
        if not attrs:
            return {}
        return dict(attrs)

    @property
    def map(self) -> tuple[int, int] | None:
        """Source line range as ``(line_begin, line_end)``."""
        map_ = self._attribute_token().map
        if map_ is None:
            return None
        return (map_[0], map_[1])

    @property
    def level(self) -> int:
        """Nesting level as assigned by the tokenizer."""
        return self._attribute_token().level

    @property
    def content(self) -> str:
        """Content of a self-contained token (text, code, html, fence)."""
        return self._attribute_token().content

    @property
    def markup(self) -> str:
        """Syntax marker, e.g. ``"*"`` for emphasis or the fence string."""
        return self._attribute_token().markup

    @property
    def info(self) -> str:
        """Fence info string."""
        return self._attribute_token().info

    @property
    def meta(self) -> Any:
        """Opaque data attached by plugins."""
        return self._attribute_token().meta

    @property
    def block(self) -> bool:
        """True for block-level tokens, False for inline ones."""
        return self._attribute_token().block

    @property
    def hidden(self) -> bool:
        """True if the wrapper should be skipped when rendering (tight lists)."""
        return self._attribute_token().hidden


def build_tree(tokens: Sequence[Token]) -> SyntaxTreeNode:
    """Build a syntax tree from a markdown-it token stream and return its root."""
    return SyntaxTreeNode(tokens)


def _find_closing_index(tokens: Sequence[Token], start: int) -> int:
    """Return the index of the token that closes ``tokens[start]``."""
    balance = 1
    for index in range(start + 1, len(tokens)):
        balance += tokens[index].nesting
        if balance == 0:
            return index
    raise UnclosedTokenError(tokens[start])

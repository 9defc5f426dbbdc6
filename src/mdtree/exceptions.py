"""Custom exceptions for mdtree."""

from __future__ import annotations

from typing import Any


class MdtreeError(Exception):
    """Base exception for mdtree operations."""


class TreeBuildError(MdtreeError):
    """Error while building a syntax tree from a token stream."""


class UnbalancedNestingError(TreeBuildError):
    """A single token with non-zero nesting was given as a whole node."""


class UnclosedTokenError(TreeBuildError):
    """An opening token has no matching closing token."""

    def __init__(self, token: Any) -> None:
        self.token = token
        super().__init__(f"Unclosed token starting at {token.type!r} (map={token.map})")


class InvalidNestingError(TreeBuildError):
    """A token has a nesting value that cannot appear at its position."""

    def __init__(self, token: Any, expected: str = "0 or 1") -> None:
        self.token = token
        super().__init__(
            f"Invalid token nesting {token.nesting!r} for {token.type!r}, expected {expected}"
        )


class EmptyTokenStreamError(TreeBuildError):
    """A non-root node was built from an empty token stream."""


class MissingAttributeDataError(MdtreeError, AttributeError):
    """A token attribute was accessed on the root node."""


class ConfigurationError(MdtreeError):
    """Invalid preset name or parse options."""


class TokenizerError(MdtreeError):
    """Error raised by the Markdown tokenizer."""


class RendererRegistrationError(MdtreeError):
    """Invalid renderer handler registration."""

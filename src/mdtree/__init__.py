"""mdtree: rebuild markdown-it token streams into syntax trees and render them."""

from mdtree.exceptions import (
    ConfigurationError,
    EmptyTokenStreamError,
    InvalidNestingError,
    MdtreeError,
    MissingAttributeDataError,
    RendererRegistrationError,
    TokenizerError,
    TreeBuildError,
    UnbalancedNestingError,
    UnclosedTokenError,
)
from mdtree.pipeline import render_markdown
from mdtree.renderer import BASE_RENDERERS, HtmlRenderer
from mdtree.schemas import ParseOptions, PresetName, RenderResult
from mdtree.tokenizer import create_parser, tokenize
from mdtree.tree import SyntaxTreeNode, build_tree

__all__ = [
    "BASE_RENDERERS",
    "ConfigurationError",
    "EmptyTokenStreamError",
    "HtmlRenderer",
    "InvalidNestingError",
    "MdtreeError",
    "MissingAttributeDataError",
    "ParseOptions",
    "PresetName",
    "RenderResult",
    "RendererRegistrationError",
    "SyntaxTreeNode",
    "TokenizerError",
    "TreeBuildError",
    "UnbalancedNestingError",
    "UnclosedTokenError",
    "build_tree",
    "create_parser",
    "render_markdown",
    "tokenize",
]

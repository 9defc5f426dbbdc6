"""Format a syntax tree into summary and outline text."""

from __future__ import annotations

from typing import Iterable

from mdtree.schemas import ParseOptions
from mdtree.tree import SyntaxTreeNode

_PREVIEW_CHARS = 40
_PREVIEW_TYPES = frozenset({"text", "code_inline", "code_block", "fence", "html_inline", "html_block"})


def format_summary(
    *,
    preset: str,
    options: ParseOptions,
    token_count: int,
    node_count: int,
    diagnostics: Iterable[str] = (),
) -> str:
    """Create the summary block shown above the rendered document."""
    flags = options.enabled_flags()
    summary_lines = [
        f"Preset: {preset}",
        f"Options: {', '.join(flags) if flags else 'none'}",
        f"Tokens: {token_count}",
        f"Nodes: {node_count}",
    ]
    diagnostics = list(diagnostics)
    if diagnostics:
        summary_lines.append(f"Diagnostics: {len(diagnostics)}")
    return "\n".join(summary_lines)


def count_nodes(root: SyntaxTreeNode) -> int:
    """Count all nodes below ``root``."""
    return sum(1 for _ in root.walk(include_self=False))


def format_tree(root: SyntaxTreeNode) -> str:
    """Create an indented outline of node types below ``root``."""
    return "Nodes:\n" + _create_nodes_tree(root.children)


def _create_nodes_tree(nodes: Iterable[SyntaxTreeNode], indent: int = 0) -> str:
    lines: list[str] = []
    for node in nodes:
        lines.append(" " * (indent * 4) + _describe(node))
        if node.children:
            lines.append(_create_nodes_tree(node.children, indent + 1))
    return "\n".join(lines)


def _describe(node: SyntaxTreeNode) -> str:
    label = node.type
    if node.type == "heading":
        label += f" ({node.tag})"
    if node.type in _PREVIEW_TYPES and node.content:
        label += f": {_preview(node.content)}"
    if node.hidden:
        label += " [hidden]"
    return label


def _preview(text: str) -> str:
    text = " ".join(text.split())
    if len(text) > _PREVIEW_CHARS:
        return repr(text[: _PREVIEW_CHARS - 3] + "...")
    return repr(text)

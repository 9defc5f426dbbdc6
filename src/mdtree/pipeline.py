"""Render pipeline for Markdown source -> tokens -> syntax tree -> HTML."""

from __future__ import annotations

from typing import Any, Mapping

from mdtree.output_formatter import count_nodes, format_summary, format_tree
from mdtree.renderer import HtmlRenderer
from mdtree.schemas import ParseOptions, RenderResult
from mdtree.tokenizer import resolve_options, resolve_preset, tokenize
from mdtree.tree import SyntaxTreeNode
from mdtree.utils.logging_config import get_logger

logger = get_logger(__name__)


def render_markdown(
    source: str,
    *,
    preset: str | None = None,
    options: ParseOptions | Mapping[str, Any] | None = None,
    renderer: HtmlRenderer | None = None,
) -> RenderResult:
    """Tokenize, build and render Markdown ``source``.

    Args:
        source: Markdown text.
        preset: Tokenizer preset name; the configured default when None.
        options: Parse options as a model or plain mapping. Unknown keys are
            ignored.
        renderer: Renderer to use. A fresh :class:`HtmlRenderer` for the
            resolved options when None.

    Returns:
        The rendered HTML with a summary, a node outline and diagnostics.

    Raises:
        ConfigurationError: If the preset or options are invalid.
        TokenizerError: If markdown-it fails.
        TreeBuildError: If the token stream is malformed.
    """
    preset_name = resolve_preset(preset)
    opts = resolve_options(options)
    logger.info("Rendering markdown", extra={"preset": preset_name, "chars": len(source)})

    tokens = tokenize(source, preset_name, opts)
    tree = SyntaxTreeNode(tokens)

    renderer = renderer or HtmlRenderer(opts)
    html = renderer.render(tree)
    diagnostics = list(renderer.diagnostics)

    node_count = count_nodes(tree)
    summary = format_summary(
        preset=preset_name,
        options=opts,
        token_count=len(tokens),
        node_count=node_count,
        diagnostics=diagnostics,
    )
    logger.info(
        "Rendered markdown",
        extra={"tokens": len(tokens), "nodes": node_count, "diagnostics": len(diagnostics)},
    )
    return RenderResult(
        summary=summary,
        tree=format_tree(tree),
        html=html,
        node_count=node_count,
        diagnostics=diagnostics,
    )

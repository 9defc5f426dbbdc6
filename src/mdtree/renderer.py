"""Render a syntax tree to HTML through a node-type dispatch table."""

from __future__ import annotations

import html
from types import MappingProxyType
from typing import Callable, Mapping

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from mdtree.config import MDTREE_HIGHLIGHT_STYLE
from mdtree.exceptions import RendererRegistrationError
from mdtree.schemas import ParseOptions
from mdtree.tree import SyntaxTreeNode
from mdtree.utils.logging_config import get_logger

logger = get_logger(__name__)

RenderFunc = Callable[["HtmlRenderer", SyntaxTreeNode], str]

_DEFAULT_LANG_PREFIX = "language-"
_HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
_TEXT_ALIGNMENTS = ("center", "left", "right")


class HtmlRenderer:
    """Walk a :class:`SyntaxTreeNode` tree and emit HTML.

    Each node type maps to a handler ``handler(renderer, node) -> str``. Nodes
    without a handler are skipped and recorded in :attr:`diagnostics`.

    Parameters
    ----------
    options : ParseOptions or None
        Options of the parse that produced the tree. ``breaks``, ``xhtml_out``,
        ``lang_prefix`` and ``highlighting`` affect the output.
    renderers : Mapping[str, RenderFunc] or None
        Dispatch table to start from, ``BASE_RENDERERS`` by default.
    highlight_style : str
        Pygments style for highlighted fences.

    """

    def __init__(
        self,
        options: ParseOptions | None = None,
        renderers: Mapping[str, RenderFunc] | None = None,
        highlight_style: str = MDTREE_HIGHLIGHT_STYLE,
    ) -> None:
        self.options = options or ParseOptions()
        self.highlight_style = highlight_style
        self.diagnostics: list[str] = []
        self._renderers: dict[str, RenderFunc] = {}
        for node_type, handler in (BASE_RENDERERS if renderers is None else renderers).items():
            self.register(node_type, handler)

    @property
    def renderers(self) -> Mapping[str, RenderFunc]:
        """Read-only view of the dispatch table."""
        return MappingProxyType(self._renderers)

    def register(self, node_type: str, handler: RenderFunc) -> None:
        """Map ``node_type`` to ``handler``, replacing any existing handler.

        Raises:
            RendererRegistrationError: If the type is not a non-empty string or
                the handler is not callable.
        """
        if not isinstance(node_type, str) or not node_type:
            raise RendererRegistrationError(f"Node type must be a non-empty string, got {node_type!r}")
        if not callable(handler):
            raise RendererRegistrationError(f"Handler for {node_type!r} is not callable")
        self._renderers[node_type] = handler

    def render(self, root: SyntaxTreeNode) -> str:
        """Render the children of ``root``; resets :attr:`diagnostics`."""
        self.diagnostics = []
        return self.render_children(root)

    def render_children(self, node: SyntaxTreeNode) -> str:
        return "".join(self.render_node(child) for child in node.children)

    def render_node(self, node: SyntaxTreeNode) -> str:
        handler = self._renderers.get(node.type)
        if handler is None:
            self.report(f"no renderer for type {node.type}")
            logger.warning("No renderer for node type", extra={"node_type": node.type, "source_map": node.map})
            return ""
        # Tight list paragraphs: drop the wrapper, keep the content.
        if node.hidden:
            return self.render_children(node)
        return handler(self, node)

    def report(self, message: str) -> None:
        """Record a non-fatal rendering diagnostic."""
        self.diagnostics.append(message)

    def void_tag(self, tag: str, attrs: str = "") -> str:
        """Return a void element honouring ``xhtmlOut``."""
        closing = " />" if self.options.xhtml_out else ">"
        return f"<{tag}{attrs}{closing}"


def _escape(text: str) -> str:
    return html.escape(text, quote=False)


def _attr(name: str, value: object) -> str:
    return f' {name}="{html.escape(str(value))}"'


def _block_end(node: SyntaxTreeNode) -> str:
    return "\n" if node.block else ""


def _container(tag: str) -> RenderFunc:
    """Handler wrapping a node's rendered children in ``tag``."""

    def render(renderer: HtmlRenderer, node: SyntaxTreeNode) -> str:
        return f"<{tag}>{renderer.render_children(node)}</{tag}>{_block_end(node)}"

    render.__name__ = f"render_{tag}"
    return render


def render_inline(renderer: HtmlRenderer, node: SyntaxTreeNode) -> str:
    return renderer.render_children(node)


def render_text(renderer: HtmlRenderer, node: SyntaxTreeNode) -> str:
    return _escape(node.content)


def render_ordered_list(renderer: HtmlRenderer, node: SyntaxTreeNode) -> str:
    start = node.attrs.get("start")
    start_attr = _attr("start", start) if start is not None else ""
    return f"<ol{start_attr}>{renderer.render_children(node)}</ol>{_block_end(node)}"


def render_softbreak(renderer: HtmlRenderer, node: SyntaxTreeNode) -> str:
    if renderer.options.breaks:
        return renderer.void_tag("br") + "\n"
    return "\n"


def render_hardbreak(renderer: HtmlRenderer, node: SyntaxTreeNode) -> str:
    return renderer.void_tag("br") + "\n"


def render_hr(renderer: HtmlRenderer, node: SyntaxTreeNode) -> str:
    return renderer.void_tag("hr") + "\n"


def render_code_inline(renderer: HtmlRenderer, node: SyntaxTreeNode) -> str:
    return f"<code>{_escape(node.content)}</code>"


def render_code_block(renderer: HtmlRenderer, node: SyntaxTreeNode) -> str:
    return f"<pre><code>{_escape(node.content)}</code></pre>\n"


def render_fence(renderer: HtmlRenderer, node: SyntaxTreeNode) -> str:
    """Render fenced code, highlighted with Pygments when enabled.

    The first word of the info string names the language. Unknown languages
    and styles fall back to a plain block carrying the language class.
    """
    info = node.info.strip()
    lang = info.split(maxsplit=1)[0] if info else ""
    if renderer.options.highlighting and lang:
        try:
            lexer = get_lexer_by_name(lang)
            formatter = HtmlFormatter(style=renderer.highlight_style, noclasses=True)
        except ClassNotFound:
            logger.debug("No highlighter for fence", extra={"lang": lang, "style": renderer.highlight_style})
        else:
            return highlight(node.content, lexer, formatter)

    class_attr = ""
    if lang:
        prefix = renderer.options.lang_prefix
        class_attr = _attr("class", f"{_DEFAULT_LANG_PREFIX if prefix is None else prefix}{lang}")
    return f"<pre><code{class_attr}>{_escape(node.content)}</code></pre>\n"


def render_heading(renderer: HtmlRenderer, node: SyntaxTreeNode) -> str:
    tag = node.tag
    if tag not in _HEADING_TAGS:
        renderer.report(f"unexpected heading tag {tag}")
        logger.error("Unexpected heading tag", extra={"tag": tag, "source_map": node.map})
        return ""
    return f"<{tag}>{renderer.render_children(node)}</{tag}>\n"


def render_link(renderer: HtmlRenderer, node: SyntaxTreeNode) -> str:
    attrs = node.attrs
    href = _attr("href", attrs["href"]) if attrs.get("href") else ""
    title = _attr("title", attrs["title"]) if attrs.get("title") else ""
    return f"<a{href}{title}>{renderer.render_children(node)}</a>"


def render_html(renderer: HtmlRenderer, node: SyntaxTreeNode) -> str:
    return node.content


def render_image(renderer: HtmlRenderer, node: SyntaxTreeNode) -> str:
    attrs = node.attrs
    src = _attr("src", attrs["src"]) if attrs.get("src") else ""
    title = _attr("title", attrs["title"]) if attrs.get("title") else ""
    return renderer.void_tag("img", f"{src}{_attr('alt', node.content)}{title}")


def _table_cell(tag: str) -> RenderFunc:
    """Handler for ``td``/``th`` carrying the column alignment."""

    def render(renderer: HtmlRenderer, node: SyntaxTreeNode) -> str:
        style = node.attrs.get("style")
        style_attr = ""
        if isinstance(style, str):
            for alignment in _TEXT_ALIGNMENTS:
                if style.endswith(alignment):
                    style_attr = _attr("style", f"text-align:{alignment}")
                    break
        return f"<{tag}{style_attr}>{renderer.render_children(node)}</{tag}>{_block_end(node)}"

    render.__name__ = f"render_{tag}"
    return render


BASE_RENDERERS: Mapping[str, RenderFunc] = MappingProxyType(
    {
        "paragraph": _container("p"),
        "inline": render_inline,
        "text": render_text,
        "bullet_list": _container("ul"),
        "ordered_list": render_ordered_list,
        "list_item": _container("li"),
        "em": _container("em"),
        "strong": _container("strong"),
        "softbreak": render_softbreak,
        "hardbreak": render_hardbreak,
        "blockquote": _container("blockquote"),
        "hr": render_hr,
        "code_inline": render_code_inline,
        "code_block": render_code_block,
        "fence": render_fence,
        "heading": render_heading,
        "link": render_link,
        "autolink": render_link,
        "html_inline": render_html,
        "html_block": render_html,
        "image": render_image,
        # extended syntax
        "s": _container("s"),
        "table": _container("table"),
        "thead": _container("thead"),
        "tbody": _container("tbody"),
        "tr": _container("tr"),
        "td": _table_cell("td"),
        "th": _table_cell("th"),
    }
)


def render_tree(root: SyntaxTreeNode, options: ParseOptions | None = None) -> tuple[str, list[str]]:
    """Render ``root`` with the base renderers; return the HTML and diagnostics."""
    renderer = HtmlRenderer(options)
    output = renderer.render(root)
    return output, renderer.diagnostics

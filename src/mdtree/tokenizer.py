"""Markdown tokenization through markdown-it-py."""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping

from markdown_it import MarkdownIt
from markdown_it.token import Token
from pydantic import ValidationError

from mdtree.config import MDTREE_DEFAULT_PRESET, PRESET_NAMES
from mdtree.exceptions import ConfigurationError, TokenizerError
from mdtree.schemas import ParseOptions
from mdtree.utils.logging_config import get_logger

logger = get_logger(__name__)


def resolve_options(options: ParseOptions | Mapping[str, Any] | None) -> ParseOptions:
    """Coerce ``options`` into a validated :class:`ParseOptions`.

    Raises:
        ConfigurationError: If a mapping holds values of the wrong type.
    """
    if options is None:
        return ParseOptions()
    if isinstance(options, ParseOptions):
        return options
    try:
        return ParseOptions.model_validate(dict(options))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid parse options: {exc}") from exc


def resolve_preset(preset: str | None) -> str:
    """Return a supported preset name, falling back to the configured default."""
    name = preset or MDTREE_DEFAULT_PRESET
    if name not in PRESET_NAMES:
        raise ConfigurationError(
            f"Unknown preset {name!r}, use one of: {', '.join(PRESET_NAMES)}"
        )
    return name


def create_parser(
    preset: str | None = None,
    options: ParseOptions | Mapping[str, Any] | None = None,
) -> MarkdownIt:
    """Create a markdown-it parser for ``preset`` with ``options`` applied on top.

    Only options markdown-it understands are forwarded; ``highlighting`` is
    consumed by the renderer.
    """
    name = resolve_preset(preset)
    opts = resolve_options(options)
    tokenizer_options = opts.tokenizer_options()
    logger.debug("Creating parser", extra={"preset": name, "options": tokenizer_options})
    return MarkdownIt(name, tokenizer_options)


def tokenize(
    source: str,
    preset: str | None = None,
    options: ParseOptions | Mapping[str, Any] | None = None,
    env: MutableMapping[str, Any] | None = None,
) -> list[Token]:
    """Tokenize Markdown ``source`` into a flat markdown-it token stream.

    Args:
        source: Markdown text.
        preset: One of ``default``, ``zero`` or ``commonmark``.
        options: Parse options, as a model or a plain mapping.
        env: Optional environment shared with markdown-it rules (reference
            definitions end up here).

    Returns:
        The flat token list.

    Raises:
        ConfigurationError: If the preset or options are invalid.
        TokenizerError: If markdown-it fails on the input.
    """
    md = create_parser(preset, options)
    try:
        tokens = md.parse(source, env if env is not None else {})
    except Exception as exc:
        raise TokenizerError(f"Failed to tokenize source: {exc}") from exc
    logger.debug("Tokenized source", extra={"chars": len(source), "tokens": len(tokens)})
    return tokens

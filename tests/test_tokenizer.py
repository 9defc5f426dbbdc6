"""Tests for the markdown-it tokenizer wrapper and parse options."""

from __future__ import annotations

import pytest
from markdown_it import MarkdownIt
from pydantic import ValidationError

from mdtree.exceptions import ConfigurationError, TokenizerError
from mdtree.schemas import ParseOptions
from mdtree.tokenizer import create_parser, resolve_options, resolve_preset, tokenize


def _inline_types(tokens: list) -> list[str]:
    return [child.type for token in tokens for child in token.children or []]


class TestParseOptions:
    """Tests for the ParseOptions model."""

    def test_defaults_follow_demo_form(self) -> None:
        options = ParseOptions()
        assert options.html is False
        assert options.linkify is True
        assert options.typographer is True
        assert options.highlighting is True
        assert options.xhtml_out is None

    def test_accepts_tokenizer_names(self) -> None:
        options = ParseOptions.model_validate({"xhtmlOut": True, "langPrefix": "lang-"})
        assert options.xhtml_out is True
        assert options.lang_prefix == "lang-"

    def test_accepts_python_names(self) -> None:
        options = ParseOptions(xhtml_out=True, lang_prefix="lang-")
        assert options.tokenizer_options()["xhtmlOut"] is True
        assert options.tokenizer_options()["langPrefix"] == "lang-"

    def test_unknown_keys_are_ignored(self) -> None:
        options = ParseOptions.model_validate({"html": True, "colour": "blue"})
        assert options.html is True
        assert not hasattr(options, "colour")

    def test_tokenizer_options_skip_unset_and_renderer_flags(self) -> None:
        assert ParseOptions().tokenizer_options() == {
            "html": False,
            "linkify": True,
            "typographer": True,
        }

    def test_quotes_need_four_entries(self) -> None:
        with pytest.raises(ValidationError, match="4"):
            ParseOptions(quotes="«»")
        assert ParseOptions(quotes="«»‹›").quotes == "«»‹›"
        assert ParseOptions(quotes=["“", "”", "‘", "’"]).tokenizer_options()["quotes"] == ["“", "”", "‘", "’"]

    def test_enabled_flags(self) -> None:
        options = ParseOptions(html=True, linkify=False, typographer=False, highlighting=False, breaks=True)
        assert options.enabled_flags() == ["html", "breaks"]


class TestResolve:
    """Tests for preset and option resolution."""

    @pytest.mark.parametrize("preset", ["default", "zero", "commonmark"])
    def test_known_presets(self, preset: str) -> None:
        assert resolve_preset(preset) == preset

    def test_none_uses_configured_default(self) -> None:
        assert resolve_preset(None) == "default"

    def test_unknown_preset(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown preset 'gfm'"):
            resolve_preset("gfm")

    def test_mapping_is_validated(self) -> None:
        assert resolve_options({"html": True}).html is True

    def test_invalid_mapping(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid parse options"):
            resolve_options({"html": "sometimes"})

    def test_model_is_returned_as_is(self) -> None:
        options = ParseOptions(html=True)
        assert resolve_options(options) is options


class TestCreateParser:
    """Tests for create_parser."""

    def test_returns_markdown_it(self) -> None:
        assert isinstance(create_parser(), MarkdownIt)

    def test_options_are_forwarded(self) -> None:
        md = create_parser("default", {"html": True, "breaks": True, "langPrefix": "x-"})
        assert md.options["html"] is True
        assert md.options["breaks"] is True
        assert md.options["langPrefix"] == "x-"

    def test_highlighting_is_not_forwarded(self) -> None:
        md = create_parser("default", {"highlighting": True})
        assert "highlighting" not in md.options

    def test_unset_options_keep_preset_values(self) -> None:
        md = create_parser("commonmark", ParseOptions())
        assert md.options["xhtmlOut"] is True


class TestTokenize:
    """Tests for tokenize."""

    def test_flat_block_stream(self) -> None:
        tokens = tokenize("# Title\n\ntext\n", "commonmark")
        assert [token.type for token in tokens] == [
            "heading_open",
            "inline",
            "heading_close",
            "paragraph_open",
            "inline",
            "paragraph_close",
        ]

    def test_zero_preset_has_no_headings(self) -> None:
        tokens = tokenize("# Title\n", "zero")
        assert "heading_open" not in [token.type for token in tokens]

    def test_default_preset_has_tables_and_strikethrough(self) -> None:
        tokens = tokenize("~~gone~~\n\n| a |\n|---|\n| b |\n", "default")
        assert "s_open" in _inline_types(tokens)
        assert "table_open" in [token.type for token in tokens]

    def test_commonmark_preset_has_no_tables(self) -> None:
        tokens = tokenize("| a |\n|---|\n| b |\n", "commonmark")
        assert "table_open" not in [token.type for token in tokens]

    def test_html_option(self) -> None:
        assert "html_inline" in _inline_types(tokenize("a <b>x</b>", options={"html": True}))
        assert "html_inline" not in _inline_types(tokenize("a <b>x</b>", options={"html": False}))

    def test_linkify_option(self) -> None:
        on = tokenize("see https://example.com", options={"linkify": True})
        off = tokenize("see https://example.com", options={"linkify": False})
        assert "link_open" in _inline_types(on)
        assert "link_open" not in _inline_types(off)

    def test_typographer_option(self) -> None:
        on = tokenize("(c) 2024", options={"typographer": True})
        off = tokenize("(c) 2024", options={"typographer": False})
        assert on[1].children[0].content == "© 2024"
        assert off[1].children[0].content == "(c) 2024"

    def test_env_collects_references(self) -> None:
        env: dict = {}
        tokenize("[a]: http://x\n\n[a]\n", env=env)
        assert "A" in env["references"]

    def test_non_string_source(self) -> None:
        with pytest.raises(TokenizerError, match="Failed to tokenize"):
            tokenize(None)  # type: ignore[arg-type]

    def test_unknown_preset(self) -> None:
        with pytest.raises(ConfigurationError):
            tokenize("x", "js-default")

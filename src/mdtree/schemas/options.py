"""Parse option model shared by the library and the demo server."""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

PresetName = Literal["default", "zero", "commonmark"]

# Options forwarded verbatim to markdown-it, by their markdown-it names.
TOKENIZER_OPTION_NAMES = frozenset(
    {"html", "xhtmlOut", "breaks", "langPrefix", "linkify", "typographer", "quotes"}
)


class ParseOptions(BaseModel):
    """Parser configuration flags.

    Defaults mirror the demonstrator form. Passthrough options left as ``None``
    keep whatever the selected preset defines. Unknown keys are ignored.

    Attributes:
        html: Allow raw HTML in the source.
        linkify: Autoconvert URL-like text to links.
        typographer: Apply typographic replacements and smart quotes.
        highlighting: Syntax highlight fenced code (renderer only).
        xhtml_out: Close single tags with ``/>``.
        breaks: Render newlines inside paragraphs as ``<br>``.
        lang_prefix: CSS class prefix for fenced code languages.
        quotes: Four replacement characters for smart quotes.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    html: bool = False
    linkify: bool = True
    typographer: bool = True
    highlighting: bool = True
    xhtml_out: bool | None = Field(default=None, alias="xhtmlOut")
    breaks: bool | None = None
    lang_prefix: str | None = Field(default=None, alias="langPrefix")
    quotes: Union[str, list[str], None] = None

    @field_validator("quotes")
    @classmethod
    def validate_quotes(cls, v: str | list[str] | None) -> str | list[str] | None:
        """Require exactly four quote characters (double open/close, single open/close)."""
        if v is not None and len(v) != 4:
            err = "quotes must contain exactly 4 entries"
            raise ValueError(err)
        return v

    def tokenizer_options(self) -> dict[str, Any]:
        """Return the options markdown-it understands, keyed by markdown-it name."""
        dumped = self.model_dump(by_alias=True, exclude_none=True)
        return {key: value for key, value in dumped.items() if key in TOKENIZER_OPTION_NAMES}

    def enabled_flags(self) -> list[str]:
        """Names of the boolean flags that are switched on, in declaration order."""
        return [
            name
            for name in ("html", "linkify", "typographer", "highlighting", "xhtml_out", "breaks")
            if getattr(self, name)
        ]

"""Pydantic models for the render API."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mdtree.schemas import ParseOptions, PresetName


class RenderRequest(BaseModel):
    """Request model for the /api/render endpoint.

    Attributes
    ----------
    source : str
        Markdown source text to render.
    preset_name : PresetName
        Tokenizer preset: ``default``, ``zero`` or ``commonmark``.
    options : ParseOptions
        Parser configuration flags. Unknown keys are ignored.

    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    source: str = Field(..., description="Markdown source text")
    preset_name: PresetName = Field(default="default", alias="presetName", description="Tokenizer preset")
    options: ParseOptions = Field(default_factory=ParseOptions, description="Parser configuration flags")

    @field_validator("options", mode="before")
    @classmethod
    def default_options(cls, v: object) -> object:
        """Treat an explicit ``null`` like a missing options object."""
        return {} if v is None else v


class RenderSuccessResponse(BaseModel):
    """Success response model for the /api/render endpoint.

    Attributes
    ----------
    preset_name : str
        Preset the source was tokenized with.
    summary : str
        Preset, enabled options and token/node counts.
    tree : str
        Outline of the syntax tree.
    html : str
        Rendered HTML fragment.
    node_count : int
        Number of nodes below the root.
    diagnostics : list[str]
        Non-fatal renderer diagnostics (e.g. node types without a renderer).

    """

    preset_name: str = Field(..., description="Tokenizer preset used")
    summary: str = Field(..., description="Render summary")
    tree: str = Field(..., description="Syntax tree outline")
    html: str = Field(..., description="Rendered HTML")
    node_count: int = Field(..., ge=0, description="Number of tree nodes")
    diagnostics: list[str] = Field(default_factory=list, description="Renderer diagnostics")


class RenderErrorResponse(BaseModel):
    """Error response model for the /api/render endpoint.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.
    error_type : str
        Name of the error, e.g. ``UnclosedTokenError`` or ``SourceTooLarge``.

    """

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error name")


# Union type for API responses
RenderResponse = Union[RenderSuccessResponse, RenderErrorResponse]

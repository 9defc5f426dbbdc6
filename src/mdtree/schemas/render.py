"""Render output model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RenderResult(BaseModel):
    """Final render output."""

    summary: str
    tree: str
    html: str
    node_count: int = Field(..., ge=0)
    diagnostics: list[str] = Field(default_factory=list)

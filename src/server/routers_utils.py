"""Shared helpers for the render routers."""

from __future__ import annotations

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from mdtree.schemas import ParseOptions
from server.models import RenderErrorResponse, RenderSuccessResponse
from server.render_processor import SOURCE_TOO_LARGE, process_render

COMMON_RENDER_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_200_OK: {"model": RenderSuccessResponse, "description": "Successful render"},
    status.HTTP_400_BAD_REQUEST: {"model": RenderErrorResponse, "description": "Malformed input or configuration"},
    status.HTTP_413_REQUEST_ENTITY_TOO_LARGE: {"model": RenderErrorResponse, "description": "Source too large"},
}


def error_status(response: RenderErrorResponse) -> int:
    """HTTP status code for an error response."""
    if response.error_type == SOURCE_TOO_LARGE:
        return status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    return status.HTTP_400_BAD_REQUEST


async def _perform_render(
    *,
    source: str,
    preset_name: str,
    options: ParseOptions,
) -> JSONResponse:
    """Run the render and serialize the outcome with the matching status code."""
    result = await process_render(source, preset_name=preset_name, options=options)
    if isinstance(result, RenderErrorResponse):
        return JSONResponse(status_code=error_status(result), content=result.model_dump())
    return JSONResponse(status_code=status.HTTP_200_OK, content=result.model_dump())

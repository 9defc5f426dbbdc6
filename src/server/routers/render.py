"""Render endpoints for the API."""

from __future__ import annotations

import html

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, JSONResponse

from mdtree.schemas import ParseOptions
from server.form_types import BoolForm, OptStrForm, StrForm
from server.models import RenderErrorResponse, RenderRequest
from server.render_processor import process_render
from server.routers_utils import COMMON_RENDER_RESPONSES, _perform_render, error_status

router = APIRouter()


@router.post("/api/render", responses=COMMON_RENDER_RESPONSES)
async def api_render(
    request: Request,  # noqa: ARG001 (unused-function-argument) # pylint: disable=unused-argument
    render_request: RenderRequest,
) -> JSONResponse:
    """Render Markdown source and return HTML plus the tree outline.

    **The source is tokenized with markdown-it, rebuilt into a syntax tree and**
    rendered through the node-type dispatch table.

    **Parameters**

    - **render_request** (`RenderRequest`): source text, preset name and parse options

    **Returns**

    - **JSONResponse**: success payload, or an error payload with status **400**
      (malformed token stream or configuration) or **413** (source too large)

    """
    return await _perform_render(
        source=render_request.source,
        preset_name=render_request.preset_name,
        options=render_request.options,
    )


@router.post("/render", response_class=HTMLResponse)
async def form_render(
    source: StrForm,
    preset_name: OptStrForm = None,
    html_enabled: BoolForm = False,
    linkify: BoolForm = False,
    typographer: BoolForm = False,
    highlighting: BoolForm = False,
) -> HTMLResponse:
    """Render Markdown submitted from the demo form and return the HTML fragment.

    Unchecked checkboxes are not submitted, so every flag defaults to off here.
    The ``html`` checkbox is posted as ``html_enabled``.
    """
    options = ParseOptions(
        html=html_enabled,
        linkify=linkify,
        typographer=typographer,
        highlighting=highlighting,
    )
    result = await process_render(source, preset_name=preset_name or "default", options=options)
    if isinstance(result, RenderErrorResponse):
        return HTMLResponse(
            content=f'<div class="render-error">{html.escape(result.error)}</div>',
            status_code=error_status(result),
        )
    return HTMLResponse(content=result.html, status_code=status.HTTP_200_OK)

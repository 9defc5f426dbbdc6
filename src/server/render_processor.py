"""Process a render request by running the mdtree pipeline."""

from __future__ import annotations

import asyncio

from mdtree.exceptions import MdtreeError
from mdtree.pipeline import render_markdown
from mdtree.schemas import ParseOptions
from mdtree.utils.logging_config import get_logger
from server.models import RenderErrorResponse, RenderResponse, RenderSuccessResponse
from server.server_config import MAX_SOURCE_CHARS

# Initialize logger for this module
logger = get_logger(__name__)

SOURCE_TOO_LARGE = "SourceTooLarge"


async def process_render(
    source: str,
    *,
    preset_name: str = "default",
    options: ParseOptions | None = None,
) -> RenderResponse:
    """Render Markdown ``source`` and wrap the outcome in a response model.

    Malformed input never escapes as an exception: every :class:`MdtreeError`
    becomes a :class:`RenderErrorResponse` so the shell can display it.
    """
    options = options or ParseOptions()

    if len(source) > MAX_SOURCE_CHARS:
        logger.warning(
            "Source exceeds size limit",
            extra={"chars": len(source), "max_chars": MAX_SOURCE_CHARS},
        )
        return RenderErrorResponse(
            error=f"Source is {len(source)} characters, the limit is {MAX_SOURCE_CHARS}",
            error_type=SOURCE_TOO_LARGE,
        )

    try:
        result = await asyncio.to_thread(
            render_markdown, source, preset=preset_name, options=options
        )
    except MdtreeError as exc:
        _print_error(preset_name, options, exc)
        return RenderErrorResponse(error=str(exc), error_type=type(exc).__name__)

    _print_success(preset_name, len(source), result.node_count, result.diagnostics)

    return RenderSuccessResponse(
        preset_name=preset_name,
        summary=result.summary,
        tree=result.tree,
        html=result.html,
        node_count=result.node_count,
        diagnostics=result.diagnostics,
    )


def _print_error(preset_name: str, options: ParseOptions, exc: Exception) -> None:
    """Log a failed render with the configuration that produced it.

    Parameters
    ----------
    preset_name : str
        Preset the source was tokenized with.
    options : ParseOptions
        Parse options of the request.
    exc : Exception
        The exception raised while rendering.

    """
    logger.error(
        "Render failed",
        extra={
            "preset": preset_name,
            "options": options.enabled_flags(),
            "error_type": type(exc).__name__,
            "error": str(exc),
        },
    )


def _print_success(preset_name: str, chars: int, node_count: int, diagnostics: list[str]) -> None:
    """Log a completed render.

    Parameters
    ----------
    preset_name : str
        Preset the source was tokenized with.
    chars : int
        Length of the source text.
    node_count : int
        Number of nodes in the built tree.
    diagnostics : list[str]
        Renderer diagnostics; logged at warning level when present.

    """
    extra = {"preset": preset_name, "chars": chars, "nodes": node_count}
    if diagnostics:
        logger.warning("Render completed with diagnostics", extra={**extra, "diagnostics": diagnostics})
        return
    logger.info("Render completed successfully", extra=extra)

"""Section listing and section pages."""

from __future__ import annotations

from fastapi import APIRouter, Query, Request, Response  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore[import-not-found]

from ..utils import (
    create_jinja_context,
    get_progress,
    get_section_or_404,
    get_sections,
    section_summaries,
    templates,
)

# Pages take the whole single-segment URL space; data lives under /api.
api_router = APIRouter(prefix="/api")
router = APIRouter()


@api_router.get("/sections")
async def list_sections(request: Request) -> JSONResponse:
    """Return titles and slugs of every section and subsection."""

    return JSONResponse(section_summaries(get_sections(request)))


@router.get("/{slug}")
async def get_section(
    slug: str,
    request: Request,
    format: str = Query(default="html", pattern="^(json|html)$"),
) -> Response:
    """Return one section as a page or as structured data.

    Args:
        slug: Section slug.
        request: Incoming request used for template rendering.
        format: Desired response format.

    Returns:
        The rendered section page or its JSON structure.
    """

    sections = get_sections(request)
    section = get_section_or_404(sections, slug)

    if format == "json":
        return JSONResponse(section.to_dict())

    progress = get_progress(request)
    return templates.TemplateResponse(
        request,
        "section.html",
        context=create_jinja_context(
            request=request,
            sections=sections,
            section=section,
            progress=progress,
            summary=progress.summary([section]).get(section.slug, (0, 0)),
        ),
    )

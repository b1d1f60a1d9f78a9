"""Root page redirecting to the first section."""

from __future__ import annotations

from fastapi import APIRouter, Request, Response  # type: ignore
from fastapi.responses import RedirectResponse  # type: ignore

from ..utils import create_jinja_context, get_sections, templates

router = APIRouter()


@router.get("/")
async def root(request: Request) -> Response:
    """Redirect to the first section or explain that nothing was found."""

    sections = get_sections(request)

    # Sections without a slug have no page of their own.
    first = next((s for s in sections if s.slug), None)
    if first is not None:
        return RedirectResponse(url=f"/{first.slug}")

    return templates.TemplateResponse(
        request,
        "empty.html",
        context=create_jinja_context(request=request, sections=sections),
    )

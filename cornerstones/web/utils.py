"""Utility helpers for web routes."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from fastapi import HTTPException, Request  # type: ignore[import-not-found]
from fastapi.templating import Jinja2Templates  # type: ignore

from cornerstones.document_cache import load_sections
from cornerstones.parser import Section, display_title, find_section
from cornerstones.parser.types import SectionList
from cornerstones.progress import (
    DEFAULT_PROGRESS_PATH,
    INTRO_SLUG,
    ProgressStore,
    checklist_prefix,
    progress_key,
)

JSONDict = dict[str, Any]
SectionSummaryList = list[JSONDict]

DEFAULT_SOURCE = "cornerstones.md"
DEFAULT_TITLE = "Cornerstones"

TEMPLATES_DIR = Path(__file__).parent / "templates"


def strip_dash(text: str) -> str:
    """Remove a leading ``"- "`` left in a link description."""

    return text[2:] if text.startswith("- ") else text


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["display_title"] = display_title
templates.env.filters["strip_dash"] = strip_dash
templates.env.globals["checklist_prefix"] = checklist_prefix
templates.env.globals["progress_key"] = progress_key
templates.env.globals["intro_slug"] = INTRO_SLUG


def get_source_path() -> Path:
    """Return the markdown source configured by ``CORNERSTONES_SOURCE``."""

    return Path(os.environ.get("CORNERSTONES_SOURCE", DEFAULT_SOURCE))


def get_progress_path() -> Path:
    """Return the progress file configured by ``CORNERSTONES_PROGRESS``."""

    return Path(
        os.environ.get("CORNERSTONES_PROGRESS", str(DEFAULT_PROGRESS_PATH))
    )


def get_site_title() -> str:
    """Return the site title configured by ``CORNERSTONES_TITLE``."""

    return os.environ.get("CORNERSTONES_TITLE", DEFAULT_TITLE)


def get_sections(request: Request) -> SectionList:
    """Return the parsed sections of the application's source document."""

    return load_sections(request.app.state.source_path)


def get_progress(request: Request) -> ProgressStore:
    """Return the progress store attached to the application."""

    return request.app.state.progress


def get_section_or_404(sections: SectionList, slug: str) -> Section:
    """Return the section matching ``slug``.

    Throws:
        HTTPException: With status 404 when no section matches.
    """

    section = find_section(sections, slug)
    if section is None:
        raise HTTPException(status_code=404, detail="Section not found")
    return section


def section_summaries(sections: SectionList) -> SectionSummaryList:
    """Return titles and slugs of sections and subsections.

    Args:
        sections: Parsed sections.

    Returns:
        One mapping per section with its subsections, used for route
        enumeration and navigation.
    """

    return [
        {
            "title": section.title,
            "slug": section.slug,
            "subsections": [
                {"title": sub.title, "slug": sub.slug}
                for sub in section.subsections
            ],
        }
        for section in sections
    ]


def create_jinja_context(request: Request, **kwargs: Any) -> JSONDict:
    """Build the template context shared by every page.

    Args:
        request: Incoming request.
        kwargs: Page specific values.

    Returns:
        Context with the request, the site title and the given values.
    """

    return {"request": request, "site_title": get_site_title(), **kwargs}

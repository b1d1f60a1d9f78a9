"""Parse reference document text into structured sections."""

from __future__ import annotations

import logging
from typing import Any

from .section import Section
from .subsection import Subsection
from .types import SectionList, SubsectionList
from .utils import parse_blocks, slugify, split_sections, split_subsections

logger = logging.getLogger(__name__)


def _normalize_newlines(text: str) -> str:
    """Convert Windows and old Mac line endings to ``\\n``."""

    return text.replace("\r\n", "\n").replace("\r", "\n")


def _parse_section(title: str, body: str) -> Section:
    """Build a section from its header title and raw body.

    Args:
        title: Trimmed header text.
        body: Text between this header and the next top-level header.

    Returns:
        The section with its intro blocks and subsections.
    """

    intro_raw, chunks = split_subsections(body)

    subsections: SubsectionList = []
    for sub_title, sub_body in chunks:
        subsections.append(
            Subsection(
                title=sub_title,
                slug=slugify(sub_title),
                blocks=parse_blocks(sub_body),
            )
        )

    return Section(
        title=title,
        slug=slugify(title),
        intro=parse_blocks(intro_raw),
        subsections=subsections,
    )


def parse_document(text: str) -> SectionList:
    """Parse the reference document into sections.

    The function is pure: the same text always yields an equal tree, and an
    empty text yields an empty list.

    Args:
        text: Complete document text.

    Returns:
        Sections in document order. Text before the first top-level header
        is ignored.
    """

    sections = [
        _parse_section(title, body)
        for title, body in split_sections(_normalize_newlines(text))
    ]

    logger.debug(
        "Parsed %d sections with %d subsections",
        len(sections),
        sum(len(s.subsections) for s in sections),
    )
    return sections


def document_to_dict(sections: SectionList) -> list[dict[str, Any]]:
    """Return parsed sections as plain data for JSON or YAML output."""

    return [section.to_dict() for section in sections]


def find_section(sections: SectionList, slug: str) -> Section | None:
    """Return the first section with the given slug, if any."""

    return next((s for s in sections if s.slug == slug), None)


def find_subsection(section: Section, slug: str) -> Subsection | None:
    """Return the first subsection of ``section`` with the given slug."""

    return next((s for s in section.subsections if s.slug == slug), None)

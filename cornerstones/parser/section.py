"""Top-level section of the reference document."""

from __future__ import annotations

from typing import Any

from attrs import define, field

from .types import BlockList, SubsectionList


@define(slots=True)
class Section:
    """Top-level section of the reference document.

    Attributes:
        title: Header text, possibly keeping an ordinal prefix such as
            "1. ".
        slug: URL-safe identifier derived from the title.
        intro: Content blocks found before the first subsection header.
        subsections: Ordered subsections of the section.
    """

    title: str
    slug: str
    intro: BlockList = field(factory=list, repr=False)
    subsections: SubsectionList = field(factory=list, repr=False)

    def to_dict(self) -> dict[str, Any]:
        """Return the section as plain data.

        Returns:
            Mapping with the title, slug, intro blocks and subsections, ready
            for JSON or YAML serialization.
        """

        return {
            "title": self.title,
            "slug": self.slug,
            "intro": [block.to_dict() for block in self.intro],
            "subsections": [sub.to_dict() for sub in self.subsections],
        }

"""Subsection introduced by a second-level header."""

from __future__ import annotations

from typing import Any

from attrs import define, field

from .types import BlockList


@define(slots=True)
class Subsection:
    """Subsection introduced by a second-level header.

    Attributes:
        title: Header text with surrounding whitespace removed.
        slug: URL fragment derived from the title, unique only within the
            parent section.
        blocks: Ordered content blocks of the subsection body.
    """

    title: str
    slug: str
    blocks: BlockList = field(factory=list, repr=False)

    def to_dict(self) -> dict[str, Any]:
        """Return the subsection as plain data."""

        return {
            "title": self.title,
            "slug": self.slug,
            "blocks": [block.to_dict() for block in self.blocks],
        }

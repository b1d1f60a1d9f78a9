"""Typed content blocks found inside sections and subsections."""

from __future__ import annotations

from typing import Any, ClassVar

from attrs import asdict, define, field

from .types import ChecklistItemList, LinkItemList

DEFAULT_LANGUAGE = "text"


@define(slots=True)
class TextBlock:
    """Paragraph of one or more lines.

    Attributes:
        content: Paragraph lines joined by newlines, trimmed.
    """

    type: ClassVar[str] = "text"

    content: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "content": self.content}


@define(slots=True)
class RuleBlock:
    """Thematic break produced by a ``---`` or ``***`` line."""

    type: ClassVar[str] = "hr"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type}


@define(slots=True)
class ChecklistBlock:
    """Bullet-list run read as a list of tasks.

    Attributes:
        items: Checklist entries in source order.
    """

    type: ClassVar[str] = "checklist"

    items: ChecklistItemList = field(factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "items": [asdict(item) for item in self.items],
        }


@define(slots=True)
class LinksBlock:
    """Bullet-list run read as a collection of hyperlinks.

    Attributes:
        items: Link entries in source order.
    """

    type: ClassVar[str] = "links"

    items: LinkItemList = field(factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "items": [asdict(item) for item in self.items],
        }


@define(slots=True)
class CodeBlock:
    """Fenced code block.

    Attributes:
        code: Body of the fence, trimmed, inner formatting untouched.
        language: Tag following the opening fence, ``"text"`` when missing.
    """

    type: ClassVar[str] = "code"

    code: str
    language: str = DEFAULT_LANGUAGE

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "data": {"language": self.language, "code": self.code},
        }

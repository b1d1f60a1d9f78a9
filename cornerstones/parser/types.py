"""Common type aliases for parser structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .blocks import (  # noqa: F401
        ChecklistBlock,
        CodeBlock,
        LinksBlock,
        RuleBlock,
        TextBlock,
    )
    from .checklist_item import ChecklistItem  # noqa: F401
    from .link_item import LinkItem  # noqa: F401
    from .section import Section  # noqa: F401
    from .subsection import Subsection  # noqa: F401


ContentBlock = Union[
    "TextBlock", "RuleBlock", "ChecklistBlock", "LinksBlock", "CodeBlock"
]
BlockList = list[ContentBlock]
ChecklistItemList = list["ChecklistItem"]
LinkItemList = list["LinkItem"]
SubsectionList = list["Subsection"]
SectionList = list["Section"]
StrList = list[str]

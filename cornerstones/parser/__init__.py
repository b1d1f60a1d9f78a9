"""Parser package for the reference document."""

from .blocks import (
    ChecklistBlock,
    CodeBlock,
    LinksBlock,
    RuleBlock,
    TextBlock,
)
from .checklist_item import ChecklistItem
from .link_item import LinkItem
from .load_document import load_document
from .parse_document import (
    document_to_dict,
    find_section,
    find_subsection,
    parse_document,
)
from .section import Section
from .subsection import Subsection
from .utils import LINK_RATIO_THRESHOLD, display_title, slugify

__all__ = [
    "ChecklistBlock",
    "ChecklistItem",
    "CodeBlock",
    "LINK_RATIO_THRESHOLD",
    "LinkItem",
    "LinksBlock",
    "RuleBlock",
    "Section",
    "Subsection",
    "TextBlock",
    "display_title",
    "document_to_dict",
    "find_section",
    "find_subsection",
    "load_document",
    "parse_document",
    "slugify",
]

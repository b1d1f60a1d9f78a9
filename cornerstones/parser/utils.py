"""Utility functions for segmenting document text into blocks."""

from __future__ import annotations

import re

from .blocks import (
    DEFAULT_LANGUAGE,
    ChecklistBlock,
    CodeBlock,
    LinksBlock,
    RuleBlock,
    TextBlock,
)
from .checklist_item import ChecklistItem
from .link_item import LinkItem
from .types import BlockList, StrList

# Lines that stand for a thematic break once trimmed.
RULE_TOKENS = ("---", "***")

# Minimum share of link-shaped lines for a list run to become a link grid.
LINK_RATIO_THRESHOLD = 0.7

# Target used for lines of a link run that do not parse as links.
PLACEHOLDER_URL = "#"

# Number of leading text characters considered for checklist identifiers.
CHECKLIST_ID_LENGTH = 32

SECTION_MARKER = "## "
SUBSECTION_MARKER = "### "

_SECTION_RE = re.compile(r"^" + re.escape(SECTION_MARKER), re.MULTILINE)
_SUBSECTION_RE = re.compile(
    r"^" + re.escape(SUBSECTION_MARKER), re.MULTILINE
)
_FENCE_RE = re.compile(
    r"^```([^\n`]*)\n(.*?)^```[^\n]*", re.MULTILINE | re.DOTALL
)
_LIST_LINE_RE = re.compile(r"^-\s+")
_LINK_LINE_RE = re.compile(r"^-\s*\[.*\]\(.*\)")
_LINK_ITEM_RE = re.compile(r"^-\s*\[(.*?)\]\((.*?)\)\s*-?\s*(.*)$")
_BULLET_RE = re.compile(r"^-\s*")
_CHECKBOX_RE = re.compile(r"^\[ \]\s*")
_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")
_NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]")
_ORDINAL_RE = re.compile(r"^[0-9]+\.\s*")

# Pair of header text and the raw body that follows it.
Chunk = tuple[str, str]
ChunkList = list[Chunk]


def slugify(title: str) -> str:
    """Derive a URL-safe identifier from a header title.

    Args:
        title: Header text such as "1. Getting Started".

    Returns:
        Lower-case identifier where every run of characters outside
        ``[a-z0-9]`` became a single hyphen, without a leading or trailing
        hyphen (``"1-getting-started"``).
    """

    slug = _NON_SLUG_RE.sub("-", title.lower())
    return slug.strip("-")


def display_title(title: str) -> str:
    """Remove a leading ordinal prefix such as "1. " from a title."""

    return _ORDINAL_RE.sub("", title)


def _split_chunks(
    pattern: re.Pattern[str], text: str
) -> tuple[str, ChunkList]:
    """Split text on header lines matched by ``pattern``.

    Args:
        pattern: Compiled expression matching the header marker at the start
            of a line.
        text: Text to split.

    Returns:
        The text preceding the first header and the list of
        ``(title, body)`` pairs, one per header in document order.
    """

    parts = pattern.split(text)

    chunks: ChunkList = []
    for part in parts[1:]:
        # The header line holds the title; the remaining lines are the body.
        title, _, body = part.partition("\n")
        chunks.append((title.strip(), body))

    return parts[0], chunks


def split_sections(text: str) -> ChunkList:
    """Split a document into top-level ``(title, body)`` chunks.

    Text preceding the first top-level header is front matter and is dropped.
    """

    _, chunks = _split_chunks(_SECTION_RE, text)
    return chunks


def split_subsections(body: str) -> tuple[str, ChunkList]:
    """Split a section body into its intro text and subsection chunks."""

    return _split_chunks(_SUBSECTION_RE, body)


def is_list_line(line: str) -> bool:
    """Return whether a trimmed line is a bullet item (dash then space)."""

    return _LIST_LINE_RE.match(line) is not None


def is_rule_line(line: str) -> bool:
    """Return whether a trimmed line is a thematic break."""

    return line in RULE_TOKENS


def is_link_line(line: str) -> bool:
    """Return whether a bullet line looks like ``- [text](url)``."""

    return _LINK_LINE_RE.match(line) is not None


def checklist_id(text: str) -> str:
    """Derive the identifier of a checklist item.

    Args:
        text: Cleaned item text.

    Returns:
        The first :data:`CHECKLIST_ID_LENGTH` characters of ``text`` with
        every character outside ``[A-Za-z0-9]`` removed.
    """

    return _NON_ALNUM_RE.sub("", text[:CHECKLIST_ID_LENGTH])


def parse_link_item(line: str) -> LinkItem:
    """Extract a link entry from one bullet line.

    Args:
        line: Trimmed bullet line of a run classified as links.

    Returns:
        The parsed link. Lines that do not follow the link syntax keep their
        text and point to :data:`PLACEHOLDER_URL`.
    """

    match = _LINK_ITEM_RE.match(line)
    if match:
        return LinkItem(
            text=match.group(1),
            url=match.group(2),
            description=match.group(3),
        )

    # Keep the visible text of lines that merely sit inside a link run.
    return LinkItem(text=_BULLET_RE.sub("", line), url=PLACEHOLDER_URL)


def parse_checklist_item(line: str) -> ChecklistItem:
    """Extract a checklist entry from one bullet line.

    Args:
        line: Trimmed bullet line, optionally carrying a ``[ ]`` checkbox.

    Returns:
        The checklist item with its derived identifier.
    """

    text = _CHECKBOX_RE.sub("", _BULLET_RE.sub("", line)).strip()
    return ChecklistItem(id=checklist_id(text), text=text)


def is_link_run(lines: StrList) -> bool:
    """Decide whether a bullet-list run is a link collection.

    Args:
        lines: Trimmed lines of one run, never empty.

    Returns:
        ``True`` when at least one line is link-shaped and link-shaped lines
        make up at least :data:`LINK_RATIO_THRESHOLD` of the run.
    """

    link_count = sum(1 for line in lines if is_link_line(line))
    return link_count > 0 and link_count / len(lines) >= LINK_RATIO_THRESHOLD


def classify_list(lines: StrList) -> ChecklistBlock | LinksBlock:
    """Turn one bullet-list run into a single links or checklist block.

    Args:
        lines: Trimmed lines of the run in source order.

    Returns:
        A :class:`LinksBlock` or a :class:`ChecklistBlock` holding one item
        per line. Runs are never split between both kinds.
    """

    if is_link_run(lines):
        return LinksBlock(items=[parse_link_item(line) for line in lines])
    return ChecklistBlock(items=[parse_checklist_item(line) for line in lines])


def _paragraph_block(lines: StrList) -> TextBlock | RuleBlock | None:
    """Build the block for buffered paragraph lines.

    Args:
        lines: Trimmed, non-blank lines of the paragraph.

    Returns:
        ``None`` for empty content, a rule when the content is a rule token,
        otherwise a text block.
    """

    content = "\n".join(lines).strip()
    if not content:
        return None
    if is_rule_line(content):
        return RuleBlock()
    return TextBlock(content=content)


def segment_lines(text: str) -> BlockList:
    """Segment fence-free text into paragraphs, rules and list blocks.

    Blank lines are skipped without closing the open paragraph or list run,
    so bullet lines separated only by blank lines still form one run. A
    bullet line closes a paragraph, any other line closes a run.

    Args:
        text: Raw text without fenced code.

    Returns:
        Content blocks in source order.
    """

    blocks: BlockList = []
    paragraph: StrList = []
    run: StrList = []

    def flush_paragraph() -> None:
        block = _paragraph_block(paragraph)
        if block is not None:
            blocks.append(block)
        paragraph.clear()

    def flush_run() -> None:
        if run:
            blocks.append(classify_list(run))
        run.clear()

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        if is_list_line(line):
            flush_paragraph()
            run.append(line)
        elif is_rule_line(line):
            flush_paragraph()
            flush_run()
            blocks.append(RuleBlock())
        else:
            flush_run()
            paragraph.append(line)

    # Only one of the buffers can be open at this point.
    flush_paragraph()
    flush_run()

    return blocks


def parse_blocks(text: str) -> BlockList:
    """Parse an intro or subsection body into content blocks.

    Fenced code is cut out first so its lines never reach the line
    segmentation. An opening fence without a closing one is not a fence:
    the marker and the lines after it are read as ordinary text.

    Args:
        text: Raw body text.

    Returns:
        Content blocks in source order.
    """

    # Skip the fence scan entirely when no marker can be present.
    if "```" not in text:
        return segment_lines(text)

    blocks: BlockList = []
    position = 0
    for match in _FENCE_RE.finditer(text):
        blocks.extend(segment_lines(text[position : match.start()]))
        blocks.append(
            CodeBlock(
                code=match.group(2).strip(),
                language=match.group(1).strip() or DEFAULT_LANGUAGE,
            )
        )
        position = match.end()

    # Text following the last closed fence.
    blocks.extend(segment_lines(text[position:]))

    return blocks

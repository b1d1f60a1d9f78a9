"""Read the reference document from disk and parse it."""

from __future__ import annotations

import logging
from pathlib import Path

from .parse_document import parse_document
from .types import SectionList

logger = logging.getLogger(__name__)


def load_document(path: Path) -> SectionList:
    """Read the reference document and parse it into sections.

    Args:
        path: Location of the UTF-8 markdown source.

    Returns:
        Parsed sections. A missing file yields an empty list, which the
        presentation layer shows as a "no content" page.
    """

    if not path.exists():
        logger.warning("Source document %s does not exist", path)
        return []

    # utf-8-sig drops a leading byte order mark before the first header.
    text = path.read_text(encoding="utf-8-sig")
    logger.debug("Read %d characters from %s", len(text), path)
    return parse_document(text)

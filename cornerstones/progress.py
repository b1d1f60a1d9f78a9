"""Persistent completion state of checklist items."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from attrs import define, field

from cornerstones.json_utils import json_dumps, json_loads
from cornerstones.parser import ChecklistBlock, ChecklistItem, Section
from cornerstones.parser.types import BlockList, SectionList

logger = logging.getLogger(__name__)

# Mapping from progress key to completion flag.
ProgressMap = dict[str, bool]

# Per-section counters: completed items and total items.
ProgressSummary = dict[str, tuple[int, int]]

# Container slug used for checklists placed before the first subsection.
INTRO_SLUG = "intro"

# Default location of the progress file.
DEFAULT_PROGRESS_PATH = Path.home() / ".cornerstones" / "progress.json"


def checklist_prefix(
    section_slug: str, container_slug: str, block_index: int
) -> str:
    """Build the namespace of one checklist block.

    Args:
        section_slug: Slug of the section holding the block.
        container_slug: Slug of the subsection, or :data:`INTRO_SLUG`.
        block_index: Position of the block inside its container.

    Returns:
        Prefix such as ``"1-intro-basics-list-0"``.
    """

    return f"{section_slug}-{container_slug}-list-{block_index}"


def progress_key(prefix: str, item: ChecklistItem) -> str:
    """Return the storage key of a checklist item inside a block."""

    return f"{prefix}-{item.id}"


def _block_keys(
    section_slug: str, container_slug: str, blocks: BlockList
) -> Iterator[str]:
    for index, block in enumerate(blocks):
        if not isinstance(block, ChecklistBlock):
            continue
        prefix = checklist_prefix(section_slug, container_slug, index)
        for item in block.items:
            yield progress_key(prefix, item)


def section_keys(section: Section) -> list[str]:
    """Return the progress keys of every checklist item of a section.

    Items with colliding identifiers inside one block share a key, so the
    list may contain duplicates; callers counting items keep them.
    """

    keys = list(_block_keys(section.slug, INTRO_SLUG, section.intro))
    for sub in section.subsections:
        keys.extend(_block_keys(section.slug, sub.slug, sub.blocks))
    return keys


@define(slots=True)
class ProgressStore:
    """Completion flags of checklist items backed by a JSON file.

    The store is loaded once with :meth:`load` and written back after every
    mutation.

    Attributes:
        path: Location of the JSON file.
        completed: Mapping from progress key to completion flag.
    """

    path: Path
    completed: ProgressMap = field(factory=dict)

    @classmethod
    def load(cls, path: Path) -> ProgressStore:
        """Read the store from ``path``.

        Args:
            path: Location of the JSON file. A missing file yields an empty
                store.

        Returns:
            The loaded store.

        Throws:
            ValueError: If the file does not hold a mapping of booleans.
        """

        if not path.exists():
            logger.debug("No progress file at %s, starting empty", path)
            return cls(path=path)

        data = json_loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict) or not all(
            isinstance(value, bool) for value in data.values()
        ):
            raise ValueError(f"Unsupported progress structure in {path}")

        logger.debug("Loaded %d progress entries from %s", len(data), path)
        return cls(path=path, completed=dict(data))

    def save(self) -> None:
        """Write the store to its file, replacing it atomically."""

        self.path.parent.mkdir(parents=True, exist_ok=True)

        # Write next to the target first so readers never see partial data.
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json_dumps(self.completed), encoding="utf-8")
        tmp_path.replace(self.path)

    def is_completed(self, key: str) -> bool:
        """Return whether the item stored under ``key`` is completed."""

        return self.completed.get(key, False)

    def set(self, key: str, value: bool) -> None:
        """Set the completion flag of ``key`` and persist the store."""

        self.completed[key] = value
        self.save()

    def toggle(self, key: str) -> bool:
        """Flip the completion flag of ``key`` and persist the store.

        Returns:
            The new completion flag.
        """

        value = not self.is_completed(key)
        self.set(key, value)
        logger.debug("Toggled %s to %s", key, value)
        return value

    def reset(self, prefix: str | None = None) -> int:
        """Remove stored flags and persist the store.

        Args:
            prefix: Only remove keys starting with this prefix; remove all
                keys when omitted.

        Returns:
            Number of removed keys.
        """

        keys = [
            key
            for key in self.completed
            if prefix is None or key.startswith(prefix)
        ]
        for key in keys:
            del self.completed[key]

        self.save()
        return len(keys)

    def summary(self, sections: SectionList) -> ProgressSummary:
        """Count completed and total checklist items per section slug."""

        result: ProgressSummary = {}
        for section in sections:
            keys = section_keys(section)
            done = sum(1 for key in keys if self.is_completed(key))
            result[section.slug] = (done, len(keys))
        return result

"""Single entry of a checklist block."""

from __future__ import annotations

from attrs import define


@define(slots=True)
class ChecklistItem:
    """Single entry of a checklist block.

    Attributes:
        id: Identifier derived from the first characters of the text. Two
            items sharing the same alphanumeric prefix share the identifier.
        text: Item text without the bullet and checkbox markers.
    """

    id: str
    text: str

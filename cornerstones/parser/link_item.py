"""Hyperlink entry of a link collection."""

from __future__ import annotations

from attrs import define


@define(slots=True)
class LinkItem:
    """Hyperlink entry of a link collection.

    Attributes:
        text: Display text found between the square brackets.
        url: Target found between the parentheses, or ``"#"`` when the line
            could not be read as a link.
        description: Text trailing the link, possibly empty.
    """

    text: str
    url: str
    description: str = ""

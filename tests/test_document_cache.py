"""Tests for caching of parsed documents."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from cornerstones import document_cache
from cornerstones.parser.types import SectionList


def test_load_sections_caches(
    monkeypatch: pytest.MonkeyPatch, source_file: Path
) -> None:
    """Repeated calls should reuse the parsed sections."""

    calls = {"count": 0}
    original = document_cache.load_document

    def fake_loader(p: Path) -> SectionList:
        calls["count"] += 1
        return original(p)

    monkeypatch.setattr(document_cache, "load_document", fake_loader)

    # First call parses and caches.
    first = document_cache.load_sections(source_file)
    assert calls["count"] == 1
    assert [s.slug for s in first] == ["1-intro", "2-practice"]

    # Second call should hit cache.
    second = document_cache.load_sections(source_file)
    assert calls["count"] == 1
    assert first is second

    # Expire cache and ensure reload.
    entry = document_cache._CACHE[source_file]
    document_cache._CACHE[source_file] = (0.0, entry[1], entry[2])
    document_cache.load_sections(source_file)
    assert calls["count"] == 2


def test_modified_file_is_parsed_again(source_file: Path) -> None:
    """Changing the source invalidates the cached sections."""

    first = document_cache.load_sections(source_file)

    source_file.write_text("## Replaced\nNew body\n", encoding="utf-8")
    stat = source_file.stat()
    os.utime(source_file, (stat.st_atime, stat.st_mtime + 10))

    second = document_cache.load_sections(source_file)
    assert second is not first
    assert [s.slug for s in second] == ["replaced"]


def test_missing_source_is_empty(tmp_path: Path) -> None:
    """A missing document yields no sections."""

    assert document_cache.load_sections(tmp_path / "none.md") == []

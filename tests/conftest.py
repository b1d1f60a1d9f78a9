"""Shared fixtures for the test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from cornerstones import document_cache
from cornerstones.progress import ProgressStore

SAMPLE_DOC = """\
# Cornerstones

Preface text that is not part of any section.

## 1. Intro
Welcome text.
### Basics
- [Docs](https://x.test) - official docs
- [Blog](https://y.test)

## 2. Practice
### Steps
- Step one
- Step two
---
```bash
echo "- [ ] not a task"
```
"""


@pytest.fixture(autouse=True)
def _clear_document_cache() -> Iterator[None]:
    """Start every test without cached documents."""

    document_cache.clear_cache()
    yield
    document_cache.clear_cache()


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """Write the sample document to a temporary file."""

    path = tmp_path / "cornerstones.md"
    path.write_text(SAMPLE_DOC, encoding="utf-8")
    return path


@pytest.fixture
def progress_path(tmp_path: Path) -> Path:
    """Return the location of a temporary progress file."""

    return tmp_path / "state" / "progress.json"


@pytest.fixture
def progress_store(progress_path: Path) -> ProgressStore:
    """Return an empty progress store backed by a temporary file."""

    return ProgressStore.load(progress_path)

"""FastAPI application serving one page per document section."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI  # type: ignore[import-not-found]

from cornerstones.progress import ProgressStore

from .routes import progress as progress_routes
from .routes import root, sections
from .utils import get_progress_path, get_source_path

logger = logging.getLogger(__name__)


def create_app(
    source_path: Path | None = None, progress: ProgressStore | None = None
) -> FastAPI:
    """Create the web application.

    Args:
        source_path: Markdown source; defaults to ``CORNERSTONES_SOURCE``.
        progress: Progress store; defaults to the file configured by
            ``CORNERSTONES_PROGRESS``, loaded once at startup.

    Returns:
        The configured application.
    """

    app = FastAPI(title="cornerstones")
    if source_path is None:
        source_path = get_source_path()
    if progress is None:
        progress = ProgressStore.load(get_progress_path())

    app.state.source_path = source_path
    app.state.progress = progress
    logger.debug("Serving %s", app.state.source_path)

    # The section route matches any single path segment, so it comes last.
    app.include_router(root.router)
    app.include_router(progress_routes.router)
    app.include_router(sections.api_router)
    app.include_router(sections.router)
    return app


app = create_app()

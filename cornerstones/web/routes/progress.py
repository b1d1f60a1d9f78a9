"""Read and update checklist progress."""

from __future__ import annotations

from fastapi import APIRouter, Request  # type: ignore[import-not-found]
from fastapi.responses import JSONResponse  # type: ignore[import-not-found]
from pydantic import BaseModel  # type: ignore[import-not-found]

from ..utils import get_progress

router = APIRouter(prefix="/api")


class ToggleRequest(BaseModel):
    """Request body for toggling an item."""

    key: str


class ResetRequest(BaseModel):
    """Request body for clearing progress."""

    prefix: str | None = None


@router.get("/progress")
async def read_progress(request: Request) -> JSONResponse:
    """Return the stored completion flags."""

    return JSONResponse(get_progress(request).completed)


@router.post("/progress/toggle")
async def toggle_item(
    payload: ToggleRequest, request: Request
) -> JSONResponse:
    """Flip the completion flag of one checklist item.

    Args:
        payload: Request payload containing the progress key.
        request: Incoming request giving access to the store.

    Returns:
        The key and its new completion flag.
    """

    completed = get_progress(request).toggle(payload.key)
    return JSONResponse({"key": payload.key, "completed": completed})


@router.post("/progress/reset")
async def reset_progress(
    request: Request, payload: ResetRequest | None = None
) -> JSONResponse:
    """Clear stored flags, optionally limited to a key prefix.

    A request without a body clears every flag.
    """

    prefix = payload.prefix if payload is not None else None
    cleared = get_progress(request).reset(prefix)
    return JSONResponse({"cleared": cleared})

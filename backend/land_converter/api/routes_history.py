"""History API endpoints — desktop single-session."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from land_converter.config import settings
from land_converter.core.history.history import ConversionHistory
from land_converter.models.schemas import HistoryResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["history"])

# Desktop-only: one history per process, gone when the app closes.
session_history = ConversionHistory(limit=settings.history_limit)


@router.get("/history", response_model=HistoryResponse)
async def get_history():
    """Return recorded conversions, oldest first."""
    return {"entries": session_history.entries()}


@router.delete("/history")
async def clear_history():
    """Clear the history, as the form's Clear button does."""
    cleared = len(session_history)
    session_history.clear()
    logger.info("Cleared %d history entries", cleared)
    return {"ok": True, "cleared": cleared}

"""Land Unit Converter for Nepal — FastAPI application entry point."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from land_converter.config import settings
from land_converter.api.routes_units import router as units_router
from land_converter.api.routes_convert import router as convert_router
from land_converter.api.routes_history import router as history_router

VERSION = "0.1.0"

app = FastAPI(
    title=settings.app_name,
    version=VERSION,
    description="Convert areas between ropani, aana, paisa, daam, bigha, katha and dhur.",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(units_router, prefix="/api")
app.include_router(convert_router, prefix="/api")
app.include_router(history_router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": VERSION}


@app.get("/api/defaults")
async def defaults():
    """Initial form state."""
    return {
        "from_unit": settings.default_from_unit,
        "to_unit": settings.default_to_unit,
        "precision": settings.result_precision,
    }


# ── Serve the converter form ────────────────────────────────────────────
# When running from PyInstaller, _MEIPASS points to the temp extract dir.
# In development, static/ sits inside the package.

def _find_static_dir() -> Optional[Path]:
    """Locate the folder holding index.html."""
    # PyInstaller bundle
    if getattr(sys, "_MEIPASS", None):
        candidate = Path(sys._MEIPASS) / "static"
        if candidate.is_dir():
            return candidate
    # Development: relative to this file
    candidate = Path(__file__).resolve().parent / "static"
    if (candidate / "index.html").is_file():
        return candidate
    return None


_static = _find_static_dir()
if _static:
    @app.get("/", include_in_schema=False)
    async def serve_form():
        return FileResponse(str(_static / "index.html"))

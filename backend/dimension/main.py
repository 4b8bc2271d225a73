"""Another Dimension — FastAPI application entry point."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dimension.config import settings
from dimension.api.routes_parse import router as parse_router
from dimension.api.routes_convert import router as convert_router
from dimension.api.routes_units import router as units_router

__version__ = "0.1.0"

logging.getLogger("dimension").setLevel(settings.log_level)

app = FastAPI(
    title=settings.app_name,
    version=__version__,
    description="Parse dimension literals and convert them between length, pixel and angular units.",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(parse_router, prefix="/api")
app.include_router(convert_router, prefix="/api")
app.include_router(units_router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": __version__}

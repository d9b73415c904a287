from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from dimquant import __version__
from dimquant.api.routes_units import get_symbols, router as units_router
from dimquant.config import load_settings
from dimquant.observability import (
    bind_run_id,
    configure_logging,
    log_event,
    new_run_id,
    reset_run_id,
)
from dimquant.units.loader import build_symbol_table

# -----------------------------------------------------------------------------
# App setup
# -----------------------------------------------------------------------------
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = load_settings()
    configure_logging(settings.log_level)
    try:
        app.state.symbols = build_symbol_table(settings.units_file)
    except OSError:
        logger.exception("Cannot read units file %s; serving SI units only", settings.units_file)
        app.state.symbols = build_symbol_table()
    yield
    app.state.symbols = None


app = FastAPI(title="dimquant API", version="v1", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(units_router)


@app.middleware("http")
async def attach_run_id(request: Request, call_next):
    run_id = request.headers.get("X-Run-ID") or new_run_id()
    token = bind_run_id(run_id)
    log_event("request.start", path=str(request.url.path))
    try:
        response = await call_next(request)
        response.headers["X-Run-ID"] = run_id
        return response
    finally:
        log_event("request.end", path=str(request.url.path))
        reset_run_id(token)


@app.get("/health")
def health(request: Request) -> Dict[str, Any]:
    symbols = get_symbols(request)
    return {
        "ok": True,
        "status": "ok",
        "version": __version__,
        "git_sha": os.getenv("GIT_COMMIT"),
        "units": len(symbols),
        "prefixes": len(symbols.prefixes),
    }

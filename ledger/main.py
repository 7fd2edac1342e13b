"""
FastAPI application entry point.

Creates the transaction store, registers middleware (in order), routes and
exception handlers, and schedules the sample data load.
"""
import asyncio
import logging
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from ledger import config
from ledger.middleware import RequestIDMiddleware, StructuredLoggingMiddleware
from ledger.repository.store import TransactionStore
from ledger.routes.ledger import router as ledger_router
from ledger.routes.transactions import router as transactions_router
from ledger.services.ledger_service import initialize_sample_data

logger = logging.getLogger(__name__)


def log_seed_failure(task: asyncio.Task) -> None:
    """Done callback for the startup seed task; reports an exception nobody awaits."""
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Sample data load failed", exc_info=exc)


def create_app(store: Optional[TransactionStore] = None, seed_on_startup: Optional[bool] = None) -> FastAPI:
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    docs_url = None if config.is_production() else "/docs"
    redoc_url = None if config.is_production() else "/redoc"

    application = FastAPI(
        title="Transaction Ledger Demo",
        description="In-memory transaction ledger with validated CRUD, filtering and sorting.",
        version="1.0.0",
        docs_url=docs_url,
        redoc_url=redoc_url,
    )
    application.state.store = store if store is not None else TransactionStore()
    if seed_on_startup is None:
        seed_on_startup = config.SEED_ON_STARTUP

    # ── Middleware stack (last added runs first) ────────────────────────────
    application.add_middleware(StructuredLoggingMiddleware)
    application.add_middleware(RequestIDMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.get_cors_origins(),
        allow_credentials=False,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Content-Type", "X-Request-ID"],
    )

    # ── Routes ──────────────────────────────────────────────────────────────
    application.include_router(transactions_router)
    application.include_router(ledger_router)

    # ── Exception handlers ───────────────────────────────────────────────────
    @application.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        """Never leak stack traces to clients."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": {"code": "INTERNAL_ERROR", "message": "An unexpected error occurred"}},
        )

    # ── Startup ──────────────────────────────────────────────────────────────
    @application.on_event("startup")
    async def on_startup():
        if seed_on_startup:
            # Fire and forget; the reference keeps the task alive until it finishes
            application.state.seed_task = asyncio.create_task(
                initialize_sample_data(application.state.store, config.SEED_DELAY_SECONDS)
            )
            application.state.seed_task.add_done_callback(log_seed_failure)

    return application


app = create_app()

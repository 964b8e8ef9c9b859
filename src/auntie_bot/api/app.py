"""FastAPI application serving the token-addressed summary endpoints."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from auntie_bot import get_logger
from auntie_bot.config import Settings, get_settings
from auntie_bot.feedback import FeedbackValidationError
from auntie_bot.ledger.queries import MissingTokenError, UnknownTokenError
from auntie_bot.ledger.store import LedgerStore, LedgerStoreError, SQLiteLedgerStore

from .routes import health_router, router

LOGGER = get_logger("api")


def create_api(
    settings: Settings | None = None,
    *,
    store: LedgerStore | None = None,
) -> FastAPI:
    """Return the HTTP app bound to ``store`` (or the configured SQLite ledger)."""

    resolved_settings = settings or get_settings()
    resolved_store = store or SQLiteLedgerStore(
        resolved_settings.ledger_db,
        token_secret=resolved_settings.summary_salt.get_secret_value(),
    )

    app = FastAPI(title="Auntie Can Count One")
    app.state.settings = resolved_settings
    app.state.store = resolved_store

    app.add_exception_handler(MissingTokenError, _bad_request)
    app.add_exception_handler(FeedbackValidationError, _bad_request)
    app.add_exception_handler(UnknownTokenError, _not_found)
    app.add_exception_handler(LedgerStoreError, _store_failure)

    app.include_router(health_router)
    app.include_router(router)
    LOGGER.info("HTTP API ready (timezone=%s)", resolved_settings.timezone)
    return app


async def _bad_request(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})


async def _not_found(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": "not found"})


async def _store_failure(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.error("Ledger store failed during %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "storage unavailable"},
    )

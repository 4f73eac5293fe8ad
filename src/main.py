"""FastAPI application entry point.

Run with: uvicorn src.main:app --loop uvloop --port 3000
or:       matchmaking-server  (see run() below)
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from config.settings import settings
from src.mm_common.errors import AppError, InvalidRequestError
from src.mm_common.logging_config import configure_logging
from src.mm_common.response import error_response
from src.mm_gateway.middleware.request_log import RequestLogMiddleware
from src.mm_matching.api.router import router as queue_router
from src.mm_matching.application.service import get_matchmaking_engine
from src.mm_matching.engine.engine import MatchmakingEngine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: configure logging and create the engine. Pools are never persisted."""
    configure_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    get_matchmaking_engine()
    logger.info("%s started", settings.APP_NAME)
    yield
    logger.info("%s stopped; %d players were still searching",
                settings.APP_NAME, get_matchmaking_engine().count_total())


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
    debug=settings.DEBUG,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.warning("Request rejected: %s (code %d)", exc.message, exc.code)
    resp = error_response(exc.code, exc.message, getattr(request.state, "request_id", None))
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies share the InvalidRequest envelope (400, code 1001)."""
    return await app_error_handler(request, InvalidRequestError(_describe(exc)))


def _describe(exc: RequestValidationError) -> str:
    parts = [
        f"{'.'.join(str(p) for p in err['loc'] if p != 'body')}: {err['msg']}"
        for err in exc.errors()
    ]
    return "Invalid request: " + "; ".join(parts)


app.include_router(queue_router, prefix="/api/v1")


@app.get("/health")
async def health(
    engine: Annotated[MatchmakingEngine, Depends(get_matchmaking_engine)],
) -> dict[str, str | int]:
    return {
        "status": "ok",
        "version": "0.1.0",
        "searching": engine.count_total(),
        "pending": engine.pending_count(),
    }


def run() -> None:
    uvicorn.run(
        "src.main:app",
        host=settings.HOST,
        port=settings.PORT,
        loop="uvloop",
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.DEBUG,
    )

from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from sony_schedules import __version__
from sony_schedules.config import settings, setup_logging
from sony_schedules.exceptions import ConfigError, FetchError, ParseError
from sony_schedules.routers import main_router
from sony_schedules.schemas import ErrorDetail, StandardErrorResponse


setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events"""
    logger.info("Starting Sony Schedules service...")
    app.state.http_client = httpx.AsyncClient(timeout=settings.request_timeout_sec)
    logger.info("HTTP client ready")

    yield

    logger.info("Shutting down Sony Schedules service...")
    await app.state.http_client.aclose()
    app.state.http_client = None
    logger.info("Sony Schedules service stopped")


app = FastAPI(
    title="Sony Schedules",
    version=__version__,
    lifespan=lifespan
)

app.include_router(main_router)


def _error_response(status_code: int, code: str, message: str, context: dict | None = None) -> JSONResponse:
    body = StandardErrorResponse(
        timestamp=datetime.now(timezone.utc).isoformat(),
        error=ErrorDetail(code=code, message=message, context=context)
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(ConfigError)
async def config_error_handler(request: Request, exc: ConfigError):
    """Invalid location or incomplete date"""
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc}")
    return _error_response(400, "CONFIG_ERROR", str(exc), {"key": exc.key})


@app.exception_handler(FetchError)
async def fetch_error_handler(request: Request, exc: FetchError):
    """Upstream schedule page could not be retrieved"""
    logger.error(f"Fetch failed for {request.url.path}: {exc}")
    return _error_response(502, "FETCH_FAILED", str(exc), {"url": exc.url, "status_code": exc.status_code})


@app.exception_handler(ParseError)
async def parse_error_handler(request: Request, exc: ParseError):
    """Upstream returned something that is not a document"""
    logger.error(f"Parse failed for {request.url.path}: {exc}")
    return _error_response(502, "PARSE_FAILED", str(exc))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed query or path parameters"""
    logger.warning(f"Validation error for {request.method} {request.url.path}: {exc.errors()}")

    errors = [
        {
            "loc": list(error.get("loc", ())),
            "msg": error.get("msg"),
            "input": str(error.get("input", ""))[:100]
        }
        for error in exc.errors()
    ]
    return _error_response(422, "VALIDATION_ERROR", "Invalid request parameters", {"errors": errors})

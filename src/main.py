"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api import auth, passwords
from src.api.dependencies import get_current_user, security
from src.config import get_settings
from src.database import init_db
from src.services.errors import (
    INTERNAL_ERROR_MESSAGE,
    AuthenticationError,
    InternalError,
    VaultError,
)

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    init_db()
    logger.info(f"Password vault API starting ({settings.environment})")
    yield


app = FastAPI(
    title="Password Vault API",
    description="Personal password vault with per-user credential storage",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every incoming request."""
    logger.info(f"{request.method} {request.url.path}")
    return await call_next(request)


def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        headers=headers,
    )


@app.exception_handler(VaultError)
async def vault_error_handler(request: Request, exc: VaultError):
    return error_response(exc.status_code, exc.message, exc.headers)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Report the first body problem as a 400 with its message."""
    if request.url.path.startswith(passwords.router.prefix):
        # Unparseable bodies fail before route dependencies run, so apply the
        # token gate here to keep unauthenticated requests at 401
        try:
            get_current_user(await security(request))
        except AuthenticationError as auth_error:
            return await vault_error_handler(request, auth_error)

    errors = exc.errors()
    message = "Invalid request body"
    if errors:
        first = errors[0]
        ctx_error = (first.get("ctx") or {}).get("error")
        if first.get("type") == "value_error" and ctx_error is not None:
            message = str(ctx_error)
    return error_response(400, message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Wrong method on a known path is reported like any unmatched route
    if exc.status_code in (404, 405):
        return error_response(404, "Route not found")
    return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Database error on {request.method} {request.url.path}")
    return await vault_error_handler(request, InternalError(INTERNAL_ERROR_MESSAGE))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(500, INTERNAL_ERROR_MESSAGE)


# Register routers
app.include_router(auth.router)
app.include_router(passwords.router)


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "OK",
        "message": "Password vault API is running",
        "timestamp": datetime.now(UTC).isoformat(),
    }

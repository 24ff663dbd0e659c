"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routes import router as api_router
from app.core.config import Settings, get_settings
from app.core.database import create_db_engine, create_session_factory
from app.core.errors import AppError, InternalError, RequestValidationFailed
from app.core.logging_config import configure_logging
from app.core.security import TokenService

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("app.access")


def _error_response(error: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content={"status": "error", "message": error.message},
        headers=error.headers,
    )


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)


async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    return _error_response(exc)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response(
        RequestValidationFailed(f"Validation error: {_format_validation_errors(exc)}")
    )


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": "error", "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error_response(InternalError())


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error_response(InternalError())


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application from explicit settings. Missing JWT_SECRET or
    DATABASE_URL makes get_settings() raise, which aborts startup.
    """
    if settings is None:
        settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Product API",
        version="0.1.0",
        docs_url="/swagger-ui",
        redoc_url=None,
        openapi_url="/api-docs/openapi.json",
    )

    engine = create_db_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.token_service = TokenService(
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials="*" not in settings.CORS_ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        # Unhandled errors propagate past call_next and are rendered as 500 further out.
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            access_logger.info(
                "%s %s %s %.1fms",
                request.method,
                request.url.path,
                status_code,
                (time.perf_counter() - started) * 1000,
            )

    app.add_exception_handler(AppError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(SQLAlchemyError, handle_database_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/", include_in_schema=False)
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "Product API"}

    logger.info("Application configured", extra={"environment": settings.APP_ENV})
    return app


app = create_app()

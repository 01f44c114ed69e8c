"""
FastAPI application factory and main app configuration.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from .api.errors import APIError, status_for_domain_error
from .api.routers import auth, doctor, health, patients, prescriptions, recognition, records
from .api.schemas.common import ErrorResponse
from .core.config import get_settings
from .core.exceptions import HealthScriptException
from .core.structured_logger import configure_logging
from .domain.errors import DomainError
from .middleware.auth_middleware import AuthenticationMiddleware
from .middleware.performance_middleware import PerformanceMiddleware
from .middleware.request_id_middleware import RequestIDMiddleware

logger = logging.getLogger("healthscript")

# Infrastructure error codes -> HTTP status
INFRASTRUCTURE_ERROR_STATUS = {
    "AUTH_ERROR": 401,
    "AUTHORIZATION_ERROR": 403,
    "EXTERNAL_SERVICE_ERROR": 502,
    "DATABASE_ERROR": 503,
    "DOCUMENT_RENDER_ERROR": 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings = get_settings()
    logger.info(f"🚀 Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"📊 Environment: {settings.app_env}")
    logger.info(f"🔧 Debug mode: {settings.debug}")

    from beanie import init_beanie
    from motor.motor_asyncio import AsyncIOMotorClient
    import certifi

    from .adapters.db.mongo.models import DOCUMENT_MODELS

    mongo_uri = settings.database.uri
    timeout_ms = settings.database.server_selection_timeout_ms
    try:
        # Enable TLS only for Atlas SRV URIs
        if mongo_uri.startswith("mongodb+srv://"):
            client = AsyncIOMotorClient(
                mongo_uri,
                serverSelectionTimeoutMS=timeout_ms,
                tls=True,
                tlsCAFile=certifi.where(),
            )
        else:
            client = AsyncIOMotorClient(mongo_uri, serverSelectionTimeoutMS=timeout_ms)

        await init_beanie(
            database=client[settings.database.db_name],
            document_models=DOCUMENT_MODELS,
        )
        logger.info("✅ Database connection established")
    except Exception as e:
        logger.error(f"❌ Database connection failed: {type(e).__name__}: {e}", exc_info=True)
        raise

    yield

    logger.info(f"🛑 Shutting down {settings.app_name}")
    client.close()


def _error_response(
    request: Request, status_code: int, error: str, message: str, details: dict = None
) -> JSONResponse:
    req_id = getattr(request.state, "request_id", None)
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error=error,
            message=message,
            request_id=req_id or "",
            details=details or {},
        ).model_dump(mode="json"),
    )


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    configure_logging(settings.logging)

    app = FastAPI(
        title=settings.app_name,
        description="Patient registration, digital prescriptions and medical records "
        "for doctors, patients and medical stores",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Last added runs first: CORS -> request id -> timing -> authentication
    app.add_middleware(AuthenticationMiddleware)
    app.add_middleware(PerformanceMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allowed_methods,
        allow_headers=settings.cors.allowed_headers,
        expose_headers=["X-Request-ID", "X-Process-Time", "Content-Disposition"],
        max_age=600,
    )

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(patients.router)
    app.include_router(prescriptions.router)
    app.include_router(records.router)
    app.include_router(recognition.router)
    app.include_router(doctor.router)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        status_code = status_for_domain_error(exc.error_code)
        logger.info(f"DomainError: {exc.error_code} ({status_code}) {exc.message}")
        return _error_response(
            request, status_code, exc.error_code or "DOMAIN_ERROR", exc.message, exc.details
        )

    @app.exception_handler(HealthScriptException)
    async def infrastructure_error_handler(request: Request, exc: HealthScriptException):
        status_code = INFRASTRUCTURE_ERROR_STATUS.get(exc.error_code or "", 500)
        if status_code >= 500:
            logger.error(f"{type(exc).__name__}: {exc.message}", exc_info=exc)
        else:
            logger.warning(f"{type(exc).__name__}: {exc.message}")
        return _error_response(
            request, status_code, exc.error_code or "INTERNAL_ERROR", exc.message, exc.details
        )

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        logger.warning(f"APIError: {exc.code} ({exc.http_status}) {exc.message}")
        return _error_response(request, exc.http_status, exc.code, exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        messages = []
        for error in errors:
            loc = " -> ".join(str(x) for x in error.get("loc", []))
            messages.append(f"{loc}: {error.get('msg', 'Validation error')}")
        logger.info(f"Validation failed on {request.method} {request.url.path}: {messages}")
        return _error_response(
            request,
            422,
            "INVALID_INPUT",
            f"Input validation failed: {'; '.join(messages)}",
            {"errors": [{k: v for k, v in e.items() if k not in ("ctx", "input")} for e in errors]},
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.url.path}: {type(exc).__name__}", exc_info=exc)
        return _error_response(
            request,
            500,
            "INTERNAL_ERROR",
            "An unexpected error has occurred. Please try again later.",
        )

    @app.get("/", tags=["health"])
    async def root():
        """Service information."""
        return {
            "service": settings.app_name,
            "version": settings.app_version,
            "environment": settings.app_env,
            "status": "running",
            "docs": "/docs",
        }

    return app


# Create the app instance
app = create_app()

"""
Authentication middleware - resolves the bearer token before request processing.

Sign-up, login, password reset, health checks and docs are public. Every
other endpoint requires ``Authorization: Bearer <token>``; the resolved
identity is stored on ``request.state.user`` for the role guards in
``healthscript.api.deps``.
"""
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from ..core.auth import get_auth_service
from ..core.exceptions import AuthenticationError
import logging

logger = logging.getLogger(__name__)


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """
    Middleware to enforce authentication on patient data endpoints.

    Public endpoints (account flows, health checks, API docs) are excluded.
    """

    PUBLIC_PATHS = {
        "/",
        "/favicon.ico",
        "/docs",
        "/redoc",
        "/openapi.json",
        "/health",
        "/health/live",
        "/health/ready",
        "/auth/login",
        "/auth/verify",
        "/auth/reset-password",
        "/auth/options",
    }

    PUBLIC_PATH_PREFIXES = {
        "/docs",
        "/redoc",
        "/auth/signup",
    }

    def is_public_endpoint(self, path: str) -> bool:
        """Check if endpoint is public and doesn't require authentication."""
        normalized_path = path.rstrip("/") or "/"

        if normalized_path in self.PUBLIC_PATHS:
            return True

        for prefix in self.PUBLIC_PATH_PREFIXES:
            if path.startswith(prefix + "/"):
                return True

        return False

    async def dispatch(self, request: Request, call_next):
        # CORS preflight never carries credentials
        if request.method == "OPTIONS" or self.is_public_endpoint(request.url.path):
            logger.debug(f"Public endpoint accessed: {request.url.path}")
            return await call_next(request)

        auth_header = request.headers.get("Authorization")

        try:
            user = get_auth_service().get_user_from_header(auth_header)
            request.state.user = user
            logger.debug(f"✅ Authenticated {user.role} {user.account_id} accessing {request.url.path}")

        except AuthenticationError as e:
            logger.warning(
                f"❌ Authentication failed for {request.method} {request.url.path}: {e.message} "
                f"(IP: {request.client.host if request.client else 'unknown'})"
            )
            return JSONResponse(
                status_code=401,
                content={
                    "success": False,
                    "error": "UNAUTHORIZED",
                    "message": e.message,
                    "request_id": getattr(request.state, "request_id", "") or "",
                    "details": {
                        "path": request.url.path,
                        "method": request.method,
                        "hint": "Provide an Authorization Bearer token from /auth/login",
                    },
                },
                headers={"WWW-Authenticate": "Bearer"},
            )

        return await call_next(request)

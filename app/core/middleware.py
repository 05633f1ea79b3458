"""ASGI authentication middleware."""

import json
from typing import Any

import jwt
import structlog
from starlette.types import ASGIApp, Receive, Scope, Send

from app.core.config import settings

logger = structlog.get_logger()

PUBLIC_PATHS: set[str] = {
    "",
    "/",
    "/health",
    "/docs",
    "/openapi.json",
    "/redoc",
}


class AuthMiddleware:
    """Pure ASGI middleware that verifies Supabase access tokens."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        method = scope.get("method", "")
        if method == "OPTIONS":
            await self.app(scope, receive, send)
            return

        path = scope["path"]
        normalized = path.rstrip("/") or "/"
        if normalized in PUBLIC_PATHS or path.startswith(("/docs", "/redoc")):
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers", []))
        auth_header = headers.get(b"authorization", b"").decode()

        if not auth_header.startswith("Bearer "):
            await self._send_error(
                send, 401, "MISSING_TOKEN", "Authorization header required"
            )
            return

        token = auth_header[7:]
        secret = settings.auth.jwt_secret.get_secret_value()

        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                secret,
                algorithms=[settings.auth.algorithm],
                audience=settings.auth.audience,
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            await self._send_error(send, 401, "TOKEN_EXPIRED", "Token has expired")
            return
        except jwt.InvalidTokenError:
            await self._send_error(send, 401, "INVALID_TOKEN", "Invalid token")
            return

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject:
            await self._send_error(send, 401, "INVALID_TOKEN", "Invalid token subject")
            return

        metadata = payload.get("user_metadata") or {}

        scope.setdefault("state", {})
        scope["state"]["external_id"] = subject
        scope["state"]["email"] = payload.get("email")
        scope["state"]["user_metadata"] = metadata if isinstance(metadata, dict) else {}

        await self.app(scope, receive, send)

    @staticmethod
    async def _send_error(send: Send, status: int, code: str, message: str) -> None:
        """Send a JSON error response directly."""
        logger.info("Rejected request", status=status, code=code)
        body = json.dumps({"status": status, "message": message, "code": code}).encode()

        await send(
            {
                "type": "http.response.start",
                "status": status,
                "headers": [
                    [b"content-type", b"application/json"],
                    [b"content-length", str(len(body)).encode()],
                ],
            }
        )
        await send({"type": "http.response.body", "body": body})

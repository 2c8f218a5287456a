from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Headers de seguridad para una API que solo responde JSON.

    Las respuestas de /api/auth llevan token o datos de cuenta, así que
    además se marcan como no cacheables.
    """

    NO_STORE_PREFIXES = ("/api/auth",)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        # Los videos se reproducen desde su URL final, nunca embebidos aquí
        response.headers["Content-Security-Policy"] = "default-src 'none'; frame-ancestors 'none'"
        response.headers["Server"] = "ClipStream"

        if request.url.path.startswith(self.NO_STORE_PREFIXES):
            response.headers["Cache-Control"] = "no-store"

        return response

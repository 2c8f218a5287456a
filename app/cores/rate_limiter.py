import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded

logger = logging.getLogger(__name__)


def get_client_ip(request: Request) -> str:
    """IP del cliente; detrás de un proxy se toma el primer X-Forwarded-For."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()

    if request.client:
        return request.client.host

    return "unknown"


# Solo las rutas decoradas con @limiter.limit(...) se limitan (registro y login)
limiter = Limiter(
    key_func=get_client_ip,
    storage_uri="memory://",
    headers_enabled=False,
)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"Límite de peticiones excedido: ip={get_client_ip(request)} path={request.url.path}")
    return JSONResponse(
        status_code=429,
        content={
            "success": False,
            "message": "Too many requests. Please try again later.",
            "detail": f"Rate limit exceeded: {exc.detail}",
        },
    )

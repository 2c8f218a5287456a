import logging
from functools import wraps

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


async def email_already_registered_exception() -> None:
    raise HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail="User already exists"
    )

async def invalid_credentials_exception() -> None:
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid credentials"
    )

async def user_not_found_exception() -> None:
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="User not found"
    )

async def video_not_found_exception() -> None:
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Video not found"
    )

async def already_liked_exception() -> None:
    raise HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail="Video already liked"
    )

async def like_not_found_exception() -> None:
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Like not found"
    )

async def invalid_content_type_exception() -> None:
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Invalid content type. Must be video/*"
    )

async def unexpected_exception() -> None:
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An internal error occurred. Please try again later."
    )


def handle_db_errors(func):
    """Decorador para capturar errores inesperados: se registran y se devuelven como 500 genérico."""
    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error en {func.__name__}: {str(e)}", exc_info=True)
            await unexpected_exception()
    return wrapper

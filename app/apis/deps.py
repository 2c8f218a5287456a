from dataclasses import dataclass
from typing import AsyncGenerator, Optional

from fastapi import Header, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.cores.db import async_session
from app.cores.token import decode_access_token


"""
Este archivo define la función `get_db`, que proporciona una sesión de base de datos asincrónica.
Se usa como dependencia en rutas de FastAPI para interactuar con la base de datos sin preocuparse
por abrir o cerrar la conexión manualmente.
"""
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    session = async_session()
    try:
        yield session
    finally:
        await session.close()


@dataclass(frozen=True)
class AuthContext:
    """Identidad del usuario que hace la petición, resuelta desde el token."""
    user_id: str
    email: Optional[str] = None


def _context_from_header(authorization: Optional[str]) -> AuthContext:
    if not authorization:
        raise HTTPException(status_code=401, detail="Token not provided")

    try:
        scheme, token = authorization.split()
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid token format")
    if scheme.lower() != "bearer":
        raise HTTPException(status_code=401, detail="Invalid token format")

    try:
        payload = decode_access_token(token)
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    return AuthContext(user_id=str(payload["sub"]), email=payload.get("email"))


async def public_access():
    pass


async def auth_required(authorization: Optional[str] = Header(None)) -> AuthContext:
    return _context_from_header(authorization)


async def optional_auth(authorization: Optional[str] = Header(None)) -> Optional[AuthContext]:
    """Para rutas públicas: un token ausente o inválido equivale a visitante anónimo."""
    if not authorization:
        return None
    try:
        return _context_from_header(authorization)
    except HTTPException:
        return None

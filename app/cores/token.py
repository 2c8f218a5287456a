from datetime import datetime, timedelta, UTC
from typing import Optional

from jose import JWTError, jwt

from app.configs.settings import settings


SECRET_KEY = settings.SECRET_KEY
ALGORITHM = settings.ALGORITHM
ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES


"""
Genera un token JWT de acceso para el usuario indicado.
    - `sub` contiene el id del usuario; `email` se agrega como dato informativo.
    - `expires_delta` permite especificar un tiempo de expiración personalizado.
"""
def create_access_token(user_id: str, email: Optional[str] = None, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(UTC) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {"sub": user_id, "type": "access", "exp": expire}
    if email:
        to_encode["email"] = email
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict:
    """Decodifica el token y valida tipo y sujeto. Lanza ValueError si no es válido."""
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise ValueError("Invalid or expired token") from exc

    if payload.get("type") != "access":
        raise ValueError("Invalid token type")
    if not str(payload.get("sub") or "").strip():
        raise ValueError("Token missing subject")
    return payload

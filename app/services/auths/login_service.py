from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.models import User
from app.cores.token import create_access_token
from app.cores.security import verify_password
from app.services.validation.exception import invalid_credentials_exception, user_not_found_exception, handle_db_errors


async def authenticate_user(db: AsyncSession, email: str, password: str) -> User:
    result = await db.execute(select(User).where(User.email == email))
    user = result.scalar_one_or_none()

    # Sin hash = cuenta OAuth; nunca inicia sesión con contraseña
    if not user or not verify_password(password, user.password):
        await invalid_credentials_exception()

    return user


@handle_db_errors
async def login_user(db: AsyncSession, email: str, password: str):
    user = await authenticate_user(db, email, password)
    access_token = create_access_token(user_id=user.id, email=user.email)
    return access_token, user


@handle_db_errors
async def get_user_profile(db: AsyncSession, user_id: str) -> User:
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if not user:
        await user_not_found_exception()
    return user

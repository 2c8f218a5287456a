import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.models import User
from app.schemas.auths.register_schema import RegisterUserRequest
from app.services.validation.register_validator import validate_password, validate_name
from app.services.validation.exception import email_already_registered_exception, handle_db_errors
from app.cores.security import get_password_hash

logger = logging.getLogger(__name__)


@handle_db_errors
async def register_user(request: RegisterUserRequest, db: AsyncSession) -> User:
    await validate_password(request.password)
    await validate_name(request.name)

    try:
        async with db.begin():
            result = await db.execute(select(User).filter(User.email == request.email))
            if result.scalars().first():
                await email_already_registered_exception()

            new_user = User(
                name=request.name,
                email=request.email,
                password=get_password_hash(request.password),
            )

            db.add(new_user)
            await db.flush()
    except IntegrityError:
        # Registro concurrente con el mismo correo
        await email_already_registered_exception()

    logger.info(f"Usuario registrado: {new_user.id} ({new_user.email})")
    return new_user

import os
import tempfile
from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.future import select
from sqlalchemy.pool import NullPool

from app.cores.db import Base, build_engine
from app.cores.token import create_access_token
from app.models import Like, User, Video

# Base de datos de prueba en archivo: cada sesión abre su propia conexión,
# igual que en producción, para poder probar peticiones concurrentes
TEST_DB_PATH = os.path.join(tempfile.gettempdir(), f"clipstream_test_{os.getpid()}.db")
TEST_DATABASE_URL = f"sqlite+aiosqlite:///{TEST_DB_PATH}"

engine_test = build_engine(TEST_DATABASE_URL, poolclass=NullPool)
TestingSessionLocal = async_sessionmaker(
    engine_test, class_=AsyncSession, autoflush=False, expire_on_commit=False
)

# Crea todas las tablas desde cero
async def init_test_db():
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

# Devuelve una sesión de prueba (para override)
async def override_get_db():
    async with TestingSessionLocal() as session:
        yield session


async def create_user(email: str, name: str = "Tester", password_hash: Optional[str] = None) -> User:
    async with TestingSessionLocal() as session:
        user = User(email=email, name=name, password=password_hash)
        session.add(user)
        await session.commit()
        return user


async def create_video(user_id: str, created_at: Optional[datetime] = None, **fields) -> Video:
    async with TestingSessionLocal() as session:
        video = Video(user_id=user_id, url=fields.pop("url", "/uploads/clip.mp4"), **fields)
        if created_at is not None:
            video.created_at = created_at
        session.add(video)
        await session.commit()
        return video


async def get_like_count(video_id: str) -> int:
    async with TestingSessionLocal() as session:
        result = await session.execute(select(Video.like_count).where(Video.id == video_id))
        return result.scalar_one()


async def count_like_rows(video_id: str, user_id: Optional[str] = None) -> int:
    async with TestingSessionLocal() as session:
        query = select(Like).where(Like.video_id == video_id)
        if user_id is not None:
            query = query.where(Like.user_id == user_id)
        result = await session.execute(query)
        return len(result.scalars().all())


def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user_id=user.id, email=user.email)}"}

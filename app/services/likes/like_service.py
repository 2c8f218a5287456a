"""
Registro de likes: única fuente de verdad de "el usuario U le dio like al video V"
y único escritor de `Video.like_count`.

Cada operación corre en una sola transacción: la fila `Like` y el contador se
confirman o se revierten juntos. La restricción única (user_id, video_id) es la
garantía final contra likes duplicados; la consulta previa solo evita el INSERT
en el caso común.
"""

import logging
from typing import List

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.models import Like, User, Video
from app.services.validation.exception import (
    already_liked_exception,
    handle_db_errors,
    like_not_found_exception,
    user_not_found_exception,
    video_not_found_exception,
)

logger = logging.getLogger(__name__)


async def _current_like_count(db: AsyncSession, video_id: str) -> int:
    result = await db.execute(select(Video.like_count).where(Video.id == video_id))
    return result.scalar_one_or_none() or 0


async def _find_like(db: AsyncSession, user_id: str, video_id: str):
    result = await db.execute(
        select(Like.id).where(Like.user_id == user_id, Like.video_id == video_id)
    )
    return result.scalar_one_or_none()


@handle_db_errors
async def like_video(db: AsyncSession, user_id: str, video_id: str) -> int:
    """
    Registra el like de `user_id` sobre `video_id` e incrementa el contador.

    Returns:
        like_count del video después del like

    Raises:
        HTTPException 404 si el usuario o el video no existen,
        HTTPException 409 si el like ya existe (incluida la carrera entre dos peticiones)
    """
    try:
        async with db.begin():
            user = (await db.execute(select(User.id).where(User.id == user_id))).scalar_one_or_none()
            if user is None:
                await user_not_found_exception()

            # FOR UPDATE serializa likes del mismo video en motores con bloqueo de filas
            video = (
                await db.execute(select(Video.id).where(Video.id == video_id).with_for_update())
            ).scalar_one_or_none()
            if video is None:
                await video_not_found_exception()

            if await _find_like(db, user_id, video_id) is not None:
                await already_liked_exception()

            db.add(Like(user_id=user_id, video_id=video_id))
            await db.flush()

            await db.execute(
                update(Video)
                .where(Video.id == video_id)
                .values(like_count=Video.like_count + 1)
            )
            like_count = await _current_like_count(db, video_id)
    except IntegrityError:
        logger.info(f"Like duplicado rechazado por la restricción única: user={user_id} video={video_id}")
        await already_liked_exception()

    logger.info(f"Like registrado: user={user_id} video={video_id} like_count={like_count}")
    return like_count


@handle_db_errors
async def unlike_video(db: AsyncSession, user_id: str, video_id: str) -> int:
    """
    Elimina el like de `user_id` sobre `video_id` y decrementa el contador.

    El contador solo baja si realmente se borró una fila, y nunca por debajo de cero.

    Returns:
        like_count del video después del unlike

    Raises:
        HTTPException 404 si no existe el like
    """
    async with db.begin():
        result = await db.execute(
            delete(Like).where(Like.user_id == user_id, Like.video_id == video_id)
        )
        if result.rowcount == 0:
            await like_not_found_exception()

        await db.execute(
            update(Video)
            .where(Video.id == video_id, Video.like_count > 0)
            .values(like_count=Video.like_count - 1)
        )
        like_count = await _current_like_count(db, video_id)

    logger.info(f"Like eliminado: user={user_id} video={video_id} like_count={like_count}")
    return like_count


@handle_db_errors
async def get_liked_video_ids(db: AsyncSession, user_id: str) -> List[str]:
    result = await db.execute(select(Like.video_id).where(Like.user_id == user_id))
    return list(result.scalars().all())

from typing import Any, Dict, Iterable, Optional, Set

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.configs.settings import settings
from app.models import Like, Video
from app.schemas.videos.video_schema import VideoData
from app.services.utils.pagination_service import PaginationService
from app.services.validation.exception import handle_db_errors


def to_video_data(video: Video, is_liked: bool = False) -> VideoData:
    """Convierte un Video (con `user` ya cargado) al esquema de respuesta."""
    return VideoData.model_validate(video).model_copy(update={"is_liked": is_liked})


async def get_liked_ids_among(db: AsyncSession, viewer_id: Optional[str], video_ids: Iterable[str]) -> Set[str]:
    """Ids de `video_ids` a los que `viewer_id` les dio like (vacío para anónimos)."""
    video_ids = list(video_ids)
    if not viewer_id or not video_ids:
        return set()

    result = await db.execute(
        select(Like.video_id).where(Like.user_id == viewer_id, Like.video_id.in_(video_ids))
    )
    return set(result.scalars().all())


@handle_db_errors
async def get_feed(
    db: AsyncSession,
    cursor: Optional[str] = None,
    limit: Optional[int] = None,
    viewer_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Feed en orden cronológico inverso con el estado de like del visitante.

    Returns:
        dict con `videos` (lista de VideoData) y `next_cursor`
    """
    limit = PaginationService.clamp_limit(limit, settings.FEED_DEFAULT_LIMIT, settings.FEED_MAX_LIMIT)

    query = select(Video).options(selectinload(Video.user))
    page = await PaginationService.get_keyset_page(db, Video, query, cursor=cursor, limit=limit)

    videos = page["items"]
    liked_ids = await get_liked_ids_among(db, viewer_id, (video.id for video in videos))

    return {
        "videos": [to_video_data(video, video.id in liked_ids) for video in videos],
        "next_cursor": page["next_cursor"],
    }

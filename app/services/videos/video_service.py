import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.models import User, Video
from app.schemas.videos.video_schema import VideoCreateRequest, VideoData
from app.services.validation.exception import handle_db_errors, user_not_found_exception
from app.services.videos.feed_service import to_video_data

logger = logging.getLogger(__name__)


@handle_db_errors
async def create_video_metadata(db: AsyncSession, user_id: str, request: VideoCreateRequest) -> VideoData:
    """
    Registra un video cuyo archivo ya está almacenado.

    Se llama una sola vez por subida, después de que el almacenamiento respondió
    con la URL final; no deduplica por contenido.
    """
    async with db.begin():
        owner = (await db.execute(select(User.id).where(User.id == user_id))).scalar_one_or_none()
        if owner is None:
            await user_not_found_exception()

        video = Video(
            user_id=user_id,
            url=request.url,
            title=request.title,
            description=request.description,
            duration=request.duration,
            thumbnail=request.thumbnail,
            like_count=0,
        )
        db.add(video)
        await db.flush()
        video_id = video.id

    result = await db.execute(
        select(Video)
        .options(selectinload(Video.user))
        .where(Video.id == video_id)
        .execution_options(populate_existing=True)
    )
    created = result.scalar_one()

    logger.info(f"Video creado: id={created.id} user={user_id}")
    return to_video_data(created, is_liked=False)

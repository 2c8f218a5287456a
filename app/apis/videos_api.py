from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.apis.deps import AuthContext, auth_required, get_db, optional_auth
from app.configs.settings import settings
from app.schemas.videos.like_schema import LikeResponse, LikedVideosResponse
from app.schemas.videos.video_schema import FeedResponse, VideoCreateRequest, VideoCreateResponse
from app.services.likes.like_service import get_liked_video_ids, like_video, unlike_video
from app.services.videos.feed_service import get_feed
from app.services.videos.video_service import create_video_metadata

router = APIRouter()


@router.post("/", response_model=VideoCreateResponse)
async def create_video(
    request: VideoCreateRequest,
    db: AsyncSession = Depends(get_db),
    current_user: AuthContext = Depends(auth_required)
):
    """
    Registra los metadatos de un video ya subido.

    Debe llamarse una sola vez, después de que la subida (S3 o local) terminó y
    ya se conoce la URL final del archivo.

    Example:
        POST /api/videos/
        {
            "url": "/uploads/1718000000000-clip.mp4",
            "title": "Atardecer",
            "duration": 14
        }

        Response:
        {
            "success": true,
            "message": "Video created successfully",
            "data": {
                "id": "4f0c...",
                "url": "/uploads/1718000000000-clip.mp4",
                "title": "Atardecer",
                "like_count": 0,
                "is_liked": false,
                "user": {"id": "...", "name": "Ana", "email": "ana@example.com", "image": null},
                ...
            }
        }
    """
    video = await create_video_metadata(db, current_user.user_id, request)
    return {
        "success": True,
        "message": "Video created successfully",
        "data": video,
    }


@router.get("/feed", response_model=FeedResponse)
async def read_feed(
    cursor: Optional[str] = Query(None, description="Id del último video de la página anterior"),
    limit: int = Query(settings.FEED_DEFAULT_LIMIT, ge=1, le=settings.FEED_MAX_LIMIT),
    db: AsyncSession = Depends(get_db),
    viewer: Optional[AuthContext] = Depends(optional_auth)
):
    """
    Feed público en orden cronológico inverso.

    Con un token válido cada video indica si el usuario ya le dio like;
    sin token `is_liked` es false en todos. Para la siguiente página se envía
    `cursor=<next_cursor>`; `next_cursor` null indica el final del feed.
    """
    page = await get_feed(
        db,
        cursor=cursor,
        limit=limit,
        viewer_id=viewer.user_id if viewer else None,
    )
    return {
        "success": True,
        "message": f"{len(page['videos'])} video(s) found",
        "data": page,
    }


@router.post("/{video_id}/like", response_model=LikeResponse)
async def like(
    video_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: AuthContext = Depends(auth_required)
):
    """
    Da like a un video.

    Un segundo like del mismo usuario responde 409; el cliente puede ignorarlo
    porque el estado ya es el que buscaba.
    """
    like_count = await like_video(db, current_user.user_id, video_id)
    return {
        "success": True,
        "message": "Video liked",
        "data": {"video_id": video_id, "like_count": like_count, "is_liked": True},
    }


@router.delete("/{video_id}/like", response_model=LikeResponse)
async def unlike(
    video_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: AuthContext = Depends(auth_required)
):
    """Quita el like. Si no existía responde 404 y el contador no cambia."""
    like_count = await unlike_video(db, current_user.user_id, video_id)
    return {
        "success": True,
        "message": "Video unliked",
        "data": {"video_id": video_id, "like_count": like_count, "is_liked": False},
    }


@router.get("/likes", response_model=LikedVideosResponse)
async def liked_videos(
    user_id: Optional[str] = Query(None, description="Por defecto, el usuario autenticado"),
    db: AsyncSession = Depends(get_db),
    current_user: AuthContext = Depends(auth_required)
):
    """Ids de los videos a los que un usuario dio like."""
    target_id = user_id or current_user.user_id
    video_ids = await get_liked_video_ids(db, target_id)
    return {
        "success": True,
        "message": f"{len(video_ids)} liked video(s)",
        "data": {"user_id": target_id, "video_ids": video_ids},
    }

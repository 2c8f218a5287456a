from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.cores.input_validator import sanitize_optional_field
from app.schemas.auths.register_schema import UserPublicData


class VideoCreateRequest(BaseModel):
    """
    Esquema para registrar los metadatos de un video ya subido.

    El frontend lo envía después de que el archivo quedó guardado (S3 o disco
    local) y ya conoce la URL final. Acepta URLs absolutas o relativas.

    Example:
        {
            "url": "https://clips.s3.us-east-1.amazonaws.com/videos/1718000000000-clip.mp4",
            "title": "Atardecer",
            "description": "Primer clip",
            "duration": 14,
            "thumbnail": "/uploads/1718000000000-clip.jpg"
        }
    """
    url: str = Field(..., min_length=1)
    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = Field(None, max_length=2000)
    duration: Optional[int] = Field(None, gt=0)
    thumbnail: Optional[str] = None

    _sanitize_title = field_validator('title')(sanitize_optional_field)
    _sanitize_description = field_validator('description')(sanitize_optional_field)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "url": "/uploads/1718000000000-clip.mp4",
                "title": "Atardecer",
                "duration": 14,
            }
        }
    )


class VideoData(BaseModel):
    """Video tal como lo ve un usuario: metadatos, contador, perfil del dueño y si ya le dio like."""
    id: str
    url: str
    title: Optional[str] = None
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    duration: Optional[int] = None
    like_count: int
    created_at: datetime
    user: UserPublicData
    is_liked: bool = False

    model_config = ConfigDict(from_attributes=True)


class VideoCreateResponse(BaseModel):
    success: bool
    message: str
    data: VideoData


class FeedData(BaseModel):
    videos: List[VideoData]
    next_cursor: Optional[str] = None


class FeedResponse(BaseModel):
    """
    Página del feed. `next_cursor` es el id del último video devuelto;
    es null cuando ya no hay más videos.
    """
    success: bool
    message: str
    data: FeedData

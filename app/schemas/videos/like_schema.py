from typing import List

from pydantic import BaseModel


class LikeData(BaseModel):
    video_id: str
    like_count: int
    is_liked: bool


class LikeResponse(BaseModel):
    success: bool
    message: str
    data: LikeData


class LikedVideosData(BaseModel):
    user_id: str
    video_ids: List[str]


class LikedVideosResponse(BaseModel):
    success: bool
    message: str
    data: LikedVideosData

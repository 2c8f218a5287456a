import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime, CheckConstraint, Index
from sqlalchemy.orm import relationship
from app.cores.db import Base
from sqlalchemy.sql import func


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Video(Base):
    __tablename__ = "videos"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    url = Column(Text, nullable=False)
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    thumbnail = Column(Text, nullable=True)
    duration = Column(Integer, nullable=True)

    # Contador desnormalizado: solo lo modifica el servicio de likes
    like_count = Column(Integer, nullable=False, default=0, server_default="0")

    # Asignado en la aplicación (resolución de microsegundos); llave de orden del feed
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    user = relationship("User", back_populates="videos")
    likes = relationship("Like", back_populates="video", cascade="all, delete-orphan", passive_deletes=True)

    __table_args__ = (
        CheckConstraint("like_count >= 0", name="ck_video_like_count_non_negative"),
        Index("ix_videos_created_at_id", "created_at", "id"),
    )

    def __repr__(self):
        return f"<Video(id={self.id}, user_id={self.user_id}, like_count={self.like_count})>"

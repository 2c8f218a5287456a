import uuid

from sqlalchemy import Column, String, ForeignKey, DateTime, UniqueConstraint
from sqlalchemy.orm import relationship
from app.cores.db import Base
from app.models.videos.video import utc_now

class Like(Base):
    __tablename__ = "likes"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    video_id = Column(String(36), ForeignKey("videos.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    user = relationship("User", back_populates="likes")
    video = relationship("Video", back_populates="likes")

    # Un usuario solo puede dar like una vez a cada video
    __table_args__ = (
        UniqueConstraint("user_id", "video_id", name="uq_like_user_video"),
    )

    def __repr__(self):
        return f"<Like(user_id={self.user_id}, video_id={self.video_id})>"

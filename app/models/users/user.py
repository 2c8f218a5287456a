import uuid

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from app.cores.db import Base
from sqlalchemy.sql import func

class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(120), unique=True, nullable=False, index=True)
    name = Column(String(100), nullable=True)
    # Nulo para cuentas creadas solo por OAuth
    password = Column(String(255), nullable=True)
    image = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    videos = relationship("Video", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    likes = relationship("Like", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)


    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, name={self.name})>"

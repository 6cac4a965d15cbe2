# ============================================================================
# FILE: nbd_api/db/models/song.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from nbd_api.db.base import Base
from nbd_api.db.models.tag import song_tags

class Song(Base):
    """Standalone uploaded song owned by a user"""
    __tablename__ = "songs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String, nullable=False)
    file_url = Column(String, nullable=True)
    file_size = Column(Integer, nullable=True)
    mime_type = Column(String, nullable=True)
    uploaded_at = Column(DateTime, default=datetime.utcnow, index=True)

    # Relationships
    user = relationship("User", back_populates="songs")
    tags = relationship("Tag", secondary=song_tags, back_populates="songs")

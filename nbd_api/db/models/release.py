# ============================================================================
# FILE: nbd_api/db/models/release.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from datetime import datetime
from nbd_api.db.base import Base
from nbd_api.db.models.tag import release_tags

class Release(Base):
    """A single, EP or album uploaded by a user"""
    __tablename__ = "releases"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    release_type = Column(String, nullable=False, default="single")
    release_date = Column(DateTime, nullable=True)  # NULL = published on upload
    uploaded_at = Column(DateTime, default=datetime.utcnow, index=True)

    # Relationships
    user = relationship("User", back_populates="releases")
    tags = relationship("Tag", secondary=release_tags, back_populates="releases")
    tracks = relationship(
        "Track",
        back_populates="release",
        cascade="all, delete-orphan",
        order_by="Track.track_number",
    )

class Track(Base):
    """Audio file belonging to a release"""
    __tablename__ = "tracks"

    id = Column(Integer, primary_key=True, index=True)
    release_id = Column(Integer, ForeignKey("releases.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String, nullable=False)
    track_number = Column(Integer, nullable=False, default=1)
    file_name = Column(String, nullable=False)
    file_url = Column(String, nullable=False)
    file_size = Column(Integer, nullable=False)
    duration = Column(Integer, nullable=True)  # Duration in seconds
    mime_type = Column(String, nullable=False)

    # Relationships
    release = relationship("Release", back_populates="tracks")

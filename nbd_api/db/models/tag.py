# ============================================================================
# FILE: nbd_api/db/models/tag.py
# ============================================================================
from sqlalchemy import Column, Integer, String, ForeignKey, Table
from sqlalchemy.orm import relationship
from nbd_api.db.base import Base

# Join tables
release_tags = Table(
    "release_tags", Base.metadata,
    Column("release_id", ForeignKey("releases.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)

song_tags = Table(
    "song_tags", Base.metadata,
    Column("song_id", ForeignKey("songs.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)

class Tag(Base):
    __tablename__ = "tags"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, index=True, nullable=False)

    # Relationships
    releases = relationship("Release", secondary=release_tags, back_populates="tags")
    songs = relationship("Song", secondary=song_tags, back_populates="tags")

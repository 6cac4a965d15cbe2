# ============================================================================
# FILE: nbd_api/services/song_service.py
# ============================================================================
from typing import List
from sqlalchemy.orm import Session, selectinload
from nbd_api.db.models.song import Song
from nbd_api.schemas.song import SongResponse

class SongService:
    """Service layer for a user's own songs"""

    def get_user_songs(self, db: Session, user_id: int) -> List[SongResponse]:
        """All songs owned by the user, newest upload first (no pagination)"""
        songs = (
            db.query(Song)
            .options(selectinload(Song.user), selectinload(Song.tags))
            .filter(Song.user_id == user_id)
            .order_by(Song.uploaded_at.desc(), Song.id.desc())
            .all()
        )
        return [SongResponse.model_validate(song) for song in songs]

# Create singleton instance
song_service = SongService()

# ============================================================================
# FILE: nbd_api/schemas/song.py
# ============================================================================
from typing import Optional, List
from datetime import datetime
from nbd_api.schemas.common import CamelModel, TagResponse, UserSummary

class SongResponse(CamelModel):
    """Schema for an uploaded song"""
    id: int
    title: str
    file_url: Optional[str] = None
    file_size: Optional[int] = None
    mime_type: Optional[str] = None
    uploaded_at: datetime
    user_id: int
    user: UserSummary
    tags: List[TagResponse] = []

class SongListResponse(CamelModel):
    songs: List[SongResponse]

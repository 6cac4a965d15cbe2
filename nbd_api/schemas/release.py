# ============================================================================
# FILE: nbd_api/schemas/release.py
# ============================================================================
from typing import Optional, List
from datetime import datetime
from nbd_api.schemas.common import CamelModel, TagResponse, UserSummary

class TrackResponse(CamelModel):
    """Schema for a track inside a release"""
    id: int
    title: str
    track_number: int
    file_name: str
    file_url: str
    file_size: int
    duration: Optional[int] = None
    mime_type: str

class ReleaseResponse(CamelModel):
    """Schema for release response"""
    id: int
    title: str
    description: Optional[str] = None
    release_type: str
    release_date: Optional[datetime] = None
    uploaded_at: datetime
    user_id: int
    user: UserSummary
    tags: List[TagResponse] = []
    tracks: List[TrackResponse] = []
    url: Optional[str] = None

class Pagination(CamelModel):
    page: int
    limit: Optional[int] = None
    total_count: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool

class ReleaseListResponse(CamelModel):
    releases: List[ReleaseResponse]
    pagination: Pagination

class ReleaseDetailResponse(CamelModel):
    release: ReleaseResponse

class UserReleasesResponse(CamelModel):
    """The caller's own releases, unpaginated"""
    releases: List[ReleaseResponse]

# ============================================================================
# FILE: nbd_api/schemas/follow.py
# ============================================================================
from typing import Optional, List
from datetime import datetime
from nbd_api.schemas.common import CamelModel

class FollowEntry(CamelModel):
    """The account on the other end of a follow edge"""
    username: str
    name: Optional[str] = None
    followed_at: datetime

class FollowingResponse(CamelModel):
    following: List[FollowEntry]

class FollowersResponse(CamelModel):
    followers: List[FollowEntry]

class FollowStatus(CamelModel):
    message: Optional[str] = None
    following: bool

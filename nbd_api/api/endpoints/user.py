# ============================================================================
# FILE: nbd_api/api/endpoints/user.py
# ============================================================================
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from nbd_api.db.session import get_db
from nbd_api.api.dependencies import require_current_user
from nbd_api.schemas.user import UserResponse
from nbd_api.schemas.follow import FollowingResponse, FollowersResponse
from nbd_api.schemas.song import SongListResponse
from nbd_api.schemas.release import UserReleasesResponse
from nbd_api.services.follow_service import follow_service
from nbd_api.services.song_service import song_service
from nbd_api.services.release_service import release_service
from nbd_api.core.exceptions import InternalError
from nbd_api.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/me", response_model=UserResponse)
def get_current_user_info(
    current_user: User = Depends(require_current_user)
):
    """
    Get current user information
    Requires authentication
    """
    return current_user

@router.get("/following", response_model=FollowingResponse)
def get_following(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Accounts the current user follows, most recent first
    Requires authentication
    """
    try:
        return FollowingResponse(following=follow_service.get_following(db, current_user.id))
    except Exception as e:
        logger.error(f"Error fetching following: {e}")
        raise InternalError("Failed to fetch following list")

@router.get("/followers", response_model=FollowersResponse)
def get_followers(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Accounts following the current user, most recent first
    Requires authentication
    """
    try:
        return FollowersResponse(followers=follow_service.get_followers(db, current_user.id))
    except Exception as e:
        logger.error(f"Error fetching followers: {e}")
        raise InternalError("Failed to fetch followers")

@router.get("/songs", response_model=SongListResponse)
def get_my_songs(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Songs uploaded by the current user, newest first
    Requires authentication
    """
    try:
        return SongListResponse(songs=song_service.get_user_songs(db, current_user.id))
    except Exception as e:
        logger.error(f"Error fetching user songs: {e}")
        raise InternalError("Failed to fetch songs")

@router.get("/releases", response_model=UserReleasesResponse)
def get_my_releases(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Releases owned by the current user, newest first (scheduled ones included)
    Requires authentication
    """
    try:
        return UserReleasesResponse(releases=release_service.get_user_releases(db, current_user.id))
    except Exception as e:
        logger.error(f"Error fetching user releases: {e}")
        raise InternalError("Failed to fetch releases")

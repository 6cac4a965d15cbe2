# ============================================================================
# FILE: nbd_api/api/endpoints/follow.py
# ============================================================================
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional
from nbd_api.db.session import get_db
from nbd_api.api.dependencies import get_current_user, require_current_user
from nbd_api.schemas.follow import FollowStatus
from nbd_api.services.follow_service import follow_service
from nbd_api.core.exceptions import AppException, InternalError
from nbd_api.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/{username}", response_model=FollowStatus)
def get_follow_status(
    username: str,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user)
):
    """
    Whether the caller follows `username`; anonymous callers get false
    """
    if current_user is None:
        return FollowStatus(following=False)

    try:
        return FollowStatus(following=follow_service.is_following(db, current_user.id, username))
    except Exception as e:
        logger.error(f"Error checking follow status: {e}")
        raise InternalError("Failed to check follow status")

@router.post("/{username}", response_model=FollowStatus)
def follow_user(
    username: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Follow a user
    Requires authentication
    """
    try:
        target = follow_service.follow(db, current_user, username)
        return FollowStatus(message=f"You are now following {target.username}", following=True)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error following user: {e}")
        raise InternalError("Failed to follow user")

@router.delete("/{username}", response_model=FollowStatus)
def unfollow_user(
    username: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Unfollow a user
    Requires authentication
    """
    try:
        target = follow_service.unfollow(db, current_user, username)
        return FollowStatus(message=f"You are no longer following {target.username}", following=False)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error unfollowing user: {e}")
        raise InternalError("Failed to unfollow user")

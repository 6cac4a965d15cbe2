# ============================================================================
# FILE: nbd_api/api/endpoints/releases.py
# ============================================================================
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from nbd_api.db.session import get_db
from nbd_api.api.dependencies import get_current_user
from nbd_api.schemas.release import ReleaseListResponse, ReleaseDetailResponse
from nbd_api.services.release_service import release_service
from nbd_api.core.exceptions import AppException, InternalError
from nbd_api.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=ReleaseListResponse)
def list_releases(
    limit: Optional[int] = Query(None, ge=1, description="Maximum number of releases"),
    page: int = Query(1, ge=1, description="Page number, used with limit"),
    following: Optional[str] = Query(None, description="\"true\" limits to followed accounts"),
    search: Optional[str] = Query(None, description="Match title, artist or track title"),
    tag: Optional[str] = Query(None, description="Tag name"),
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user)
):
    """
    List published releases, newest first
    Authentication is required only when following=true
    """
    try:
        return release_service.list_releases(
            db,
            viewer=current_user,
            limit=limit,
            page=page,
            following=following == "true",
            search=search,
            tag=tag,
        )
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error fetching releases: {e}")
        raise InternalError("Failed to fetch releases")

@router.get("/{release_id}", response_model=ReleaseDetailResponse)
def get_release(
    release_id: int,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user)
):
    """
    Get a single release
    Scheduled releases are only visible to their owner
    """
    try:
        return ReleaseDetailResponse(
            release=release_service.get_release(db, release_id, viewer=current_user)
        )
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error fetching release {release_id}: {e}")
        raise InternalError("Failed to fetch release")

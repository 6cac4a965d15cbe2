# ============================================================================
# FILE: nbd_api/services/release_service.py
# ============================================================================
import math
from datetime import datetime
from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload
from nbd_api.core.exceptions import NotFound, Unauthorized
from nbd_api.db.models.release import Release, Track
from nbd_api.db.models.tag import Tag
from nbd_api.db.models.user import User
from nbd_api.schemas.release import ReleaseResponse, ReleaseListResponse, Pagination
from nbd_api.services.follow_service import follow_service
from nbd_api.utils.slugify import create_release_url
import logging

logger = logging.getLogger(__name__)

release_load_full = [
    selectinload(Release.user),
    selectinload(Release.tags),
    selectinload(Release.tracks),
]

class ReleaseService:
    """Service layer for release listing"""

    def to_response(self, release: Release) -> ReleaseResponse:
        """Project a release row, adding its canonical URL"""
        response = ReleaseResponse.model_validate(release)
        response.url = create_release_url(release.id, release.title, release.user.username)
        return response

    def build_pagination(self, page: int, limit: Optional[int], total_count: int) -> Pagination:
        if limit:
            total_pages = math.ceil(total_count / limit)
        else:
            page = 1
            total_pages = 1 if total_count else 0
        return Pagination(
            page=page,
            limit=limit,
            total_count=total_count,
            total_pages=total_pages,
            has_next_page=page < total_pages,
            has_prev_page=page > 1,
        )

    def list_releases(
        self,
        db: Session,
        viewer: Optional[User] = None,
        limit: Optional[int] = None,
        page: int = 1,
        following: bool = False,
        search: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> ReleaseListResponse:
        """
        List published releases, newest upload first.

        Args:
            viewer: Authenticated caller, required when `following` is set
            limit: Maximum number of releases to return (all when None)
            page: 1-based page, used together with `limit`
            following: Only releases by accounts the viewer follows
            search: Case-insensitive match on title, artist or track title
            tag: Exact tag name
        """
        conditions = [
            or_(Release.release_date.is_(None), Release.release_date <= datetime.utcnow())
        ]

        if following:
            if viewer is None:
                raise Unauthorized("You must be logged in to filter by following")

            following_ids = follow_service.get_following_ids(db, viewer.id)
            if not following_ids:
                return ReleaseListResponse(
                    releases=[],
                    pagination=self.build_pagination(1, limit, 0),
                )
            conditions.append(Release.user_id.in_(following_ids))

        if search and search.strip():
            pattern = f"%{search.strip()}%"
            conditions.append(or_(
                Release.title.ilike(pattern),
                Release.user.has(User.username.ilike(pattern)),
                Release.tracks.any(Track.title.ilike(pattern)),
            ))

        if tag and tag.strip():
            conditions.append(Release.tags.any(Tag.name == tag.strip()))

        total_count = db.query(Release).filter(*conditions).count()

        query = (
            db.query(Release)
            .options(*release_load_full)
            .filter(*conditions)
            .order_by(Release.uploaded_at.desc(), Release.id.desc())
        )
        if limit:
            query = query.offset((page - 1) * limit).limit(limit)

        releases: List[Release] = query.all()
        logger.debug(f"Listed {len(releases)} of {total_count} releases")

        return ReleaseListResponse(
            releases=[self.to_response(release) for release in releases],
            pagination=self.build_pagination(page, limit, total_count),
        )

    def get_release(self, db: Session, release_id: int, viewer: Optional[User] = None) -> ReleaseResponse:
        """
        Fetch one release by id.
        Scheduled releases are visible only to their owner; everyone else gets 404.
        """
        release = (
            db.query(Release)
            .options(*release_load_full)
            .filter(Release.id == release_id)
            .first()
        )
        if not release:
            raise NotFound("Release not found")

        is_owner = viewer is not None and viewer.id == release.user_id
        if release.release_date and release.release_date > datetime.utcnow() and not is_owner:
            raise NotFound("Release not found")

        return self.to_response(release)

    def get_user_releases(self, db: Session, user_id: int) -> List[ReleaseResponse]:
        """All releases owned by the user, scheduled ones included, newest upload first"""
        releases = (
            db.query(Release)
            .options(*release_load_full)
            .filter(Release.user_id == user_id)
            .order_by(Release.uploaded_at.desc(), Release.id.desc())
            .all()
        )
        return [self.to_response(release) for release in releases]

# Create singleton instance
release_service = ReleaseService()

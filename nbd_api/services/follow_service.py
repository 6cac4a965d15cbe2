# ============================================================================
# FILE: nbd_api/services/follow_service.py
# ============================================================================
from typing import List
from sqlalchemy.orm import Session, joinedload
from nbd_api.core.exceptions import InvalidInput, NotFound
from nbd_api.db.models.follow import Follow
from nbd_api.db.models.user import User
from nbd_api.schemas.follow import FollowEntry
import logging

logger = logging.getLogger(__name__)

class FollowService:
    """Service layer for follow edges"""

    def get_following_ids(self, db: Session, user_id: int) -> List[int]:
        """Ids of every account `user_id` follows"""
        rows = db.query(Follow.following_id).filter(Follow.follower_id == user_id).all()
        return [row.following_id for row in rows]

    def get_following(self, db: Session, user_id: int) -> List[FollowEntry]:
        """Accounts the user follows, most recent follow first"""
        edges = (
            db.query(Follow)
            .options(joinedload(Follow.following))
            .filter(Follow.follower_id == user_id)
            .order_by(Follow.created_at.desc(), Follow.id.desc())
            .all()
        )
        return [
            FollowEntry(
                username=edge.following.username,
                name=edge.following.name,
                followed_at=edge.created_at,
            )
            for edge in edges
        ]

    def get_followers(self, db: Session, user_id: int) -> List[FollowEntry]:
        """Accounts following the user, most recent follow first"""
        edges = (
            db.query(Follow)
            .options(joinedload(Follow.follower))
            .filter(Follow.following_id == user_id)
            .order_by(Follow.created_at.desc(), Follow.id.desc())
            .all()
        )
        return [
            FollowEntry(
                username=edge.follower.username,
                name=edge.follower.name,
                followed_at=edge.created_at,
            )
            for edge in edges
        ]

    def _get_target(self, db: Session, username: str) -> User:
        target = db.query(User).filter(User.username == username).first()
        if not target:
            raise NotFound("User not found")
        return target

    def is_following(self, db: Session, follower_id: int, username: str) -> bool:
        target = db.query(User).filter(User.username == username).first()
        if not target:
            return False
        return db.query(Follow).filter(
            Follow.follower_id == follower_id,
            Follow.following_id == target.id
        ).first() is not None

    def follow(self, db: Session, follower: User, username: str) -> User:
        """Create a follow edge from `follower` to `username`"""
        target = self._get_target(db, username)

        if target.id == follower.id:
            raise InvalidInput("You cannot follow yourself")

        existing = db.query(Follow).filter(
            Follow.follower_id == follower.id,
            Follow.following_id == target.id
        ).first()
        if existing:
            raise InvalidInput("You are already following this user")

        try:
            db.add(Follow(follower_id=follower.id, following_id=target.id))
            db.commit()
            logger.info(f"User {follower.id} followed {target.id}")
            return target
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating follow: {e}")
            raise

    def unfollow(self, db: Session, follower: User, username: str) -> User:
        """Remove the follow edge from `follower` to `username`"""
        target = self._get_target(db, username)

        try:
            deleted = db.query(Follow).filter(
                Follow.follower_id == follower.id,
                Follow.following_id == target.id
            ).delete(synchronize_session=False)
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"Error removing follow: {e}")
            raise

        if deleted == 0:
            raise InvalidInput("You are not following this user")

        logger.info(f"User {follower.id} unfollowed {target.id}")
        return target

# Create singleton instance
follow_service = FollowService()

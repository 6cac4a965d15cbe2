# ============================================================================
# FILE: nbd_api/services/user_service.py
# ============================================================================
from typing import Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from nbd_api.db.models.user import User
from nbd_api.schemas.user import UserCreate
from nbd_api.core.exceptions import InvalidInput
from nbd_api.core.security import get_password_hash, verify_password
import logging

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

class UserService:
    """Service layer for user operations"""

    def create_user(self, db: Session, user_data: UserCreate) -> User:
        """Validate and create a new user account"""
        if not user_data.email or not user_data.username or not user_data.password:
            raise InvalidInput("Missing required fields")

        if len(user_data.password) < MIN_PASSWORD_LENGTH:
            raise InvalidInput(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

        email = user_data.email.strip().lower()
        existing = db.query(User).filter(
            or_(User.email == email, User.username == user_data.username)
        ).first()
        if existing:
            raise InvalidInput("User with this email or username already exists")

        try:
            user = User(
                email=email,
                username=user_data.username,
                name=user_data.display_name or None,
                bio=user_data.bio or None,
                url=user_data.url or None,
                hashed_password=get_password_hash(user_data.password),
            )
            db.add(user)
            db.commit()
            db.refresh(user)
            logger.info(f"User created: {user.username}")
            return user
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating user: {e}")
            raise

    def get_user_by_username(self, db: Session, username: str) -> Optional[User]:
        """Get user by username"""
        return db.query(User).filter(User.username == username).first()

    def get_user_by_email(self, db: Session, email: str) -> Optional[User]:
        """Get user by email (case-insensitive)"""
        return db.query(User).filter(User.email == email.strip().lower()).first()

    def authenticate_user(self, db: Session, login: str, password: str) -> Optional[User]:
        """Authenticate with username or email plus password"""
        user = self.get_user_by_username(db, login)
        if not user and "@" in login:
            user = self.get_user_by_email(db, login)
        if not user:
            return None
        if not verify_password(password, user.hashed_password):
            return None
        return user

# Create singleton instance
user_service = UserService()

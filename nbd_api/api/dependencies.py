# ============================================================================
# FILE: nbd_api/api/dependencies.py
# ============================================================================
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from nbd_api.db.session import get_db
from nbd_api.core.exceptions import Unauthorized
from nbd_api.core.security import decode_access_token
from nbd_api.db.models.user import User
from typing import Optional

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)

def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """
    Get current authenticated user from JWT token
    Returns None if no token or invalid token (allows anonymous access)
    """
    if not token:
        return None

    try:
        payload = decode_access_token(token)
    except Unauthorized:
        return None

    username = payload.get("sub")
    if username is None:
        return None

    return db.query(User).filter(User.username == username).first()

def require_current_user(
    current_user: Optional[User] = Depends(get_current_user)
) -> User:
    """
    Require authenticated user (raises 401 if not authenticated)
    Use this dependency for protected endpoints
    """
    if current_user is None:
        raise Unauthorized("You must be logged in")
    return current_user

def require_uploader(
    current_user: Optional[User] = Depends(get_current_user)
) -> User:
    """Like require_current_user, with the upload endpoint's message"""
    if current_user is None:
        raise Unauthorized("You must be logged in to upload files")
    return current_user

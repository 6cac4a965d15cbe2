# ============================================================================
# FILE: nbd_api/db/models/password_reset.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, Boolean
from datetime import datetime
from nbd_api.db.base import Base

class PasswordResetToken(Base):
    """
    Single-use password reset token.
    Tied to an email rather than a user id; the user is resolved on consumption.
    """
    __tablename__ = "password_reset_tokens"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, index=True, nullable=False)
    token = Column(String, unique=True, index=True, nullable=False)
    expires = Column(DateTime, nullable=False)
    used = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

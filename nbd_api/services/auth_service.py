# ============================================================================
# FILE: nbd_api/services/auth_service.py
# Password reset flow: issue a single-use token, then consume it
# ============================================================================
import secrets
from datetime import datetime, timedelta
from sqlalchemy import update
from sqlalchemy.orm import Session
from nbd_api.config import settings
from nbd_api.core.email_client import email_client, create_password_reset_email
from nbd_api.core.exceptions import InvalidInput, InvalidToken
from nbd_api.core.security import get_password_hash
from nbd_api.db.models.password_reset import PasswordResetToken
from nbd_api.services.user_service import user_service
import logging

logger = logging.getLogger(__name__)

RESET_REQUESTED_MESSAGE = "If an account with that email exists, we've sent a password reset link."
RESET_DONE_MESSAGE = "Password has been reset successfully"
MIN_PASSWORD_LENGTH = 6
TOKEN_BYTES = 32

TOKEN_NOT_FOUND = "Invalid or expired reset token"
TOKEN_EXPIRED = "Reset token has expired"
TOKEN_USED = "Reset token has already been used"


class PasswordResetService:
    """Service layer for the forgot/reset password flow"""

    def build_reset_url(self, token: str) -> str:
        return f"{settings.APP_BASE_URL.rstrip('/')}/reset-password?token={token}"

    def request_reset(self, db: Session, email) -> str:
        """
        Issue a reset token for `email` and mail the link.

        The returned message is identical whether or not the account exists,
        and email delivery failures never change it.
        """
        if not email or not isinstance(email, str):
            raise InvalidInput("Email is required")

        normalized_email = email.strip().lower()
        user = user_service.get_user_by_email(db, normalized_email)
        if not user:
            logger.info("Password reset requested for unknown email")
            return RESET_REQUESTED_MESSAGE

        token = secrets.token_hex(TOKEN_BYTES)
        expires = datetime.utcnow() + timedelta(minutes=settings.PASSWORD_RESET_EXPIRE_MINUTES)

        try:
            db.add(PasswordResetToken(
                email=normalized_email,
                token=token,
                expires=expires,
                used=False,
            ))
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"Error saving password reset token: {e}")
            raise

        reset_url = self.build_reset_url(token)
        email_data = create_password_reset_email(reset_url, user.email)

        try:
            email_client.send_email(
                to=user.email,
                subject=email_data["subject"],
                html_body=email_data["html"],
            )
        except Exception as e:
            logger.error(f"Failed to send password reset email: {e}")

        logger.info(f"Password reset token issued for user {user.id}")
        return RESET_REQUESTED_MESSAGE

    def reset_password(self, db: Session, token, password) -> str:
        """
        Consume a reset token and set a new password.

        The password update and the token's `used` flag are written in one
        transaction. The flag is flipped with a conditional UPDATE, so of two
        concurrent completions with the same token only one can succeed.
        """
        if not token or not password:
            raise InvalidInput("Token and password are required")

        if len(password) < MIN_PASSWORD_LENGTH:
            raise InvalidInput(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

        record = db.query(PasswordResetToken).filter(PasswordResetToken.token == token).first()
        if not record:
            raise InvalidToken(TOKEN_NOT_FOUND)

        if record.expires < datetime.utcnow():
            raise InvalidToken(TOKEN_EXPIRED)

        if record.used:
            raise InvalidToken(TOKEN_USED)

        user = user_service.get_user_by_email(db, record.email)
        if not user:
            raise InvalidToken("User not found")

        hashed_password = get_password_hash(password)

        try:
            user.hashed_password = hashed_password
            result = db.execute(
                update(PasswordResetToken)
                .where(PasswordResetToken.id == record.id, PasswordResetToken.used.is_(False))
                .values(used=True)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                # Another request consumed the token after we read it
                db.rollback()
                raise InvalidToken(TOKEN_USED)
            db.commit()
        except InvalidToken:
            raise
        except Exception as e:
            db.rollback()
            logger.error(f"Error resetting password: {e}")
            raise

        logger.info(f"Password reset for user {user.id}")
        return RESET_DONE_MESSAGE

# Create singleton instance
password_reset_service = PasswordResetService()

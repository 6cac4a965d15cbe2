# ============================================================================
# FILE: nbd_api/api/endpoints/auth.py
# ============================================================================
from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session
from datetime import timedelta
from nbd_api.db.session import get_db
from nbd_api.schemas.auth import ForgotPasswordRequest, ResetPasswordRequest
from nbd_api.schemas.common import MessageResponse
from nbd_api.schemas.user import Token
from nbd_api.services.auth_service import password_reset_service
from nbd_api.services.user_service import user_service
from nbd_api.core.exceptions import AppException, InternalError, Unauthorized
from nbd_api.core.security import create_access_token
from nbd_api.config import settings
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/forgot-password", response_model=MessageResponse)
def forgot_password(
    body: ForgotPasswordRequest,
    db: Session = Depends(get_db)
):
    """
    Start a password reset.
    Responds identically whether or not the email belongs to an account.
    """
    try:
        message = password_reset_service.request_reset(db, body.email)
        return {"message": message}
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Password reset request error: {e}")
        raise InternalError("Failed to process password reset request")

@router.post("/reset-password", response_model=MessageResponse)
def reset_password(
    body: ResetPasswordRequest,
    db: Session = Depends(get_db)
):
    """
    Complete a password reset with a token from the reset email
    """
    try:
        message = password_reset_service.reset_password(db, body.token, body.password)
        return {"message": message}
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Password reset error: {e}")
        raise InternalError("Failed to reset password")

@router.post("/login", response_model=Token)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db)
):
    """
    Login with username (or email) and password
    Returns JWT access token
    """
    user = user_service.authenticate_user(db, form_data.username, form_data.password)
    if not user:
        raise Unauthorized("Incorrect username or password")

    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(
        data={"sub": user.username}, expires_delta=access_token_expires
    )

    return {"access_token": access_token, "token_type": "bearer"}

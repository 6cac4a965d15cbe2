# ============================================================================
# FILE: nbd_api/api/endpoints/register.py
# ============================================================================
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from nbd_api.db.session import get_db
from nbd_api.schemas.user import UserCreate, UserCreated
from nbd_api.services.user_service import user_service
from nbd_api.core.exceptions import AppException, InternalError
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/register", response_model=UserCreated, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserCreate,
    db: Session = Depends(get_db)
):
    """
    Register a new user account
    """
    try:
        user = user_service.create_user(db, user_data)
        return UserCreated(message="User created successfully", user_id=user.id)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Registration error: {e}")
        raise InternalError("Internal server error")

# ============================================================================
# FILE: nbd_api/schemas/auth.py
# ============================================================================
from pydantic import BaseModel
from typing import Any, Optional

class ForgotPasswordRequest(BaseModel):
    """Schema for starting a password reset"""
    email: Any = None  # type is checked by the service

class ResetPasswordRequest(BaseModel):
    """Schema for completing a password reset"""
    token: Optional[str] = None
    password: Optional[str] = None

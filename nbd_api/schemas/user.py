# ============================================================================
# FILE: nbd_api/schemas/user.py
# ============================================================================
from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime
from nbd_api.schemas.common import CamelModel

class UserCreate(CamelModel):
    """
    Schema for user registration.
    Fields are optional so missing ones produce the API's own 400 message.
    """
    email: Optional[EmailStr] = None
    username: Optional[str] = None
    password: Optional[str] = None
    display_name: Optional[str] = None
    bio: Optional[str] = None
    url: Optional[str] = None

class UserCreated(CamelModel):
    message: str
    user_id: int

class UserResponse(CamelModel):
    """Schema for user response"""
    id: int
    username: str
    email: str
    name: Optional[str] = None
    bio: Optional[str] = None
    url: Optional[str] = None
    created_at: datetime

class Token(BaseModel):
    """Schema for JWT token response"""
    access_token: str
    token_type: str = "bearer"

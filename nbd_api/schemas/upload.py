# ============================================================================
# FILE: nbd_api/schemas/upload.py
# ============================================================================
from typing import Optional
from nbd_api.schemas.common import CamelModel

class UploadUrlRequest(CamelModel):
    """Proposed file for a client-side upload"""
    filename: Optional[str] = None
    content_type: Optional[str] = None
    file_type: Optional[str] = None
    file_size: Optional[int] = None

class UploadUrlResponse(CamelModel):
    pathname: str
    content_type: str
    file_size: Optional[int] = None

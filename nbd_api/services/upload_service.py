# ============================================================================
# FILE: nbd_api/services/upload_service.py
# Storage path negotiation for client-side uploads (no blob I/O here)
# ============================================================================
import time
from typing import Optional
from nbd_api.core.exceptions import InvalidInput
from nbd_api.schemas.upload import UploadUrlRequest, UploadUrlResponse
import logging

logger = logging.getLogger(__name__)

ALLOWED_AUDIO_TYPES = frozenset({
    "audio/mpeg", "audio/mp3", "audio/wav", "audio/flac",
    "audio/ogg", "audio/aac", "audio/m4a", "audio/mp4",
    "audio/x-m4a", "audio/mp4a-latm",
})
ALLOWED_IMAGE_TYPES = frozenset({
    "image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp",
})

FILE_TYPE_TRACK = "track"
FILE_TYPE_ARTWORK = "artwork"

class UploadService:
    """Validates a proposed upload and picks its storage path"""

    def validate_content_type(self, file_type: Optional[str], content_type: str) -> None:
        # Only tracks and artwork are checked; other file types pass through
        if file_type == FILE_TYPE_TRACK:
            if content_type not in ALLOWED_AUDIO_TYPES and not content_type.startswith("audio/"):
                raise InvalidInput("Invalid audio file type")

        if file_type == FILE_TYPE_ARTWORK:
            if content_type not in ALLOWED_IMAGE_TYPES:
                raise InvalidInput("Invalid image file type")

    def build_pathname(self, file_type: Optional[str], filename: str, now_ms: Optional[int] = None) -> str:
        if now_ms is None:
            now_ms = int(time.time() * 1000)
        folder = "artwork" if file_type == FILE_TYPE_ARTWORK else "tracks"
        return f"{folder}/{now_ms}-{filename}"

    def issue_upload_path(self, request: UploadUrlRequest, now_ms: Optional[int] = None) -> UploadUrlResponse:
        if not request.filename or not request.content_type:
            raise InvalidInput("Filename and content type are required")

        self.validate_content_type(request.file_type, request.content_type)
        pathname = self.build_pathname(request.file_type, request.filename, now_ms)
        logger.info(f"Issued upload path {pathname}")

        return UploadUrlResponse(
            pathname=pathname,
            content_type=request.content_type,
            file_size=request.file_size,
        )

# Create singleton instance
upload_service = UploadService()

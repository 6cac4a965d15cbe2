# ============================================================================
# FILE: nbd_api/api/endpoints/upload.py
# ============================================================================
from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError
from nbd_api.api.dependencies import require_uploader
from nbd_api.schemas.upload import UploadUrlRequest, UploadUrlResponse
from nbd_api.services.upload_service import upload_service
from nbd_api.core.exceptions import AppException, InternalError, InvalidInput
from nbd_api.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

async def read_upload_request(request: Request) -> UploadUrlRequest:
    """
    Parse the body by hand so the session check runs first;
    FastAPI decodes declared bodies before resolving dependencies.
    """
    try:
        payload = await request.json()
    except ValueError:
        raise InvalidInput("Invalid JSON body")

    if not isinstance(payload, dict):
        raise InvalidInput("Invalid JSON body")

    try:
        return UploadUrlRequest.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        raise InvalidInput(f"Invalid value for {field}: {first.get('msg')}")

@router.post("", response_model=UploadUrlResponse)
async def create_upload_url(
    request: Request,
    current_user: User = Depends(require_uploader)
):
    """
    Validate a proposed upload and return the storage path to upload to.
    The upload itself happens client-side against that path.
    """
    body = await read_upload_request(request)

    try:
        return upload_service.issue_upload_path(body)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Upload URL generation error: {e}")
        raise InternalError("Failed to generate upload URL")

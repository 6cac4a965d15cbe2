# ============================================================================
# FILE: nbd_api/api/router.py
# ============================================================================
from fastapi import APIRouter
from nbd_api.api.endpoints import auth, register, releases, upload, user, follow

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(register.router, tags=["auth"])
api_router.include_router(releases.router, prefix="/releases", tags=["releases"])
api_router.include_router(upload.router, prefix="/upload-url", tags=["upload"])
api_router.include_router(user.router, prefix="/user", tags=["user"])
api_router.include_router(follow.router, prefix="/follow", tags=["follow"])

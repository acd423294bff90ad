"""Health check endpoint."""
from fastapi import APIRouter, Request
from uploader.auth import get_settings

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    checks = {"app": "ok"}

    # The media root is never created by the service, only checked.
    media_root = get_settings(request).media_root
    if media_root.is_dir():
        checks["storage"] = "ok"
    else:
        checks["storage"] = f"error: {media_root} is not a directory"
        return {"status": "unhealthy", "checks": checks}

    return {"status": "ok", "checks": checks}

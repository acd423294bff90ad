"""Serve stored uploads.

Routes:
  GET /{path}  raw file bytes with a Content-Type guessed from the extension

Reads are unauthenticated; only uploading needs a token.
"""

import logging
from fastapi import APIRouter, Request, Response
from uploader.auth import get_settings
from uploader.storage import guess_content_type, resolve_media

router = APIRouter(tags=["media"])
logger = logging.getLogger(__name__)


@router.get("/{path}")
def serve_media(path: str, request: Request):
    media_root = get_settings(request).media_root
    f = resolve_media(media_root, path)
    logger.info("attempting to serve file %s", f if f is not None else media_root / path)
    if f is None:
        return Response(status_code=404)
    try:
        if not f.is_file():
            return Response(status_code=404)
        contents = f.read_bytes()
    except (OSError, ValueError):
        return Response(status_code=404)
    return Response(contents, media_type=guess_content_type(f.name))

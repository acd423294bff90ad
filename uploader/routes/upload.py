import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse
from uploader.auth import get_settings, require_token
from uploader.storage import storage_name, write_upload

router = APIRouter(tags=["upload"], dependencies=[Depends(require_token)])
logger = logging.getLogger(__name__)

FILE_FIELD = "file"


async def _read_file_part(request: Request) -> tuple[str, bytes] | None:
    """Return (filename, payload) of the first part named "file", if any."""
    async with request.form() as form:
        for key, part in form.multi_items():
            if key != FILE_FIELD:
                continue
            if isinstance(part, str):
                return "", part.encode("utf-8")
            return part.filename or "", await part.read()
    return None


@router.post("/", status_code=202, response_class=PlainTextResponse)
async def api_upload(request: Request):
    upload = await _read_file_part(request)
    if upload is None:
        return PlainTextResponse("no file found", status_code=400)

    filename, data = upload
    name = storage_name(filename)
    media_root = get_settings(request).media_root
    try:
        out = write_upload(media_root, name, data)
    except (OSError, ValueError) as e:
        logger.exception("failed to store upload %s in %s", name, media_root)
        raise HTTPException(status_code=500, detail="unable to store file") from e

    logger.info("uploading file %s (%d bytes)", out, len(data))
    return PlainTextResponse(name, status_code=202)

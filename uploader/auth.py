import logging
from fastapi import Header, HTTPException, Request
from uploader.config import AUTH_HEADER, Settings

logger = logging.getLogger(__name__)


def decode_token(value: str) -> str:
    """Turn a raw header value into a token string.

    Header values arrive latin-1 decoded; anything outside visible ASCII is
    refused.
    """
    token = value.encode("latin-1").decode("ascii")
    if not token.isprintable():
        raise ValueError("token contains control characters")
    return token


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def require_token(
    request: Request, x_api_key: str | None = Header(default=None, alias=AUTH_HEADER)
) -> str:
    if x_api_key is None:
        raise HTTPException(status_code=401, detail="unauthorized")
    try:
        token = decode_token(x_api_key)
    except ValueError as e:
        logger.error("unable to decode api key header: %r", e)
        raise HTTPException(status_code=401, detail="unauthorized") from e
    if token not in get_settings(request).tokens:
        raise HTTPException(status_code=401, detail="unauthorized")
    return token

"""Media directory helpers: naming, writing and resolving stored files.

Stored names are random and never checked for collisions; two uploads that
draw the same name overwrite each other.
"""

import mimetypes
import random
import string
from pathlib import Path, PurePosixPath

NAME_LENGTH = 10
NAME_ALPHABET = string.ascii_letters + string.digits
FALLBACK_CONTENT_TYPE = "text/plain"


def generate_name(length: int = NAME_LENGTH) -> str:
    return "".join(random.choices(NAME_ALPHABET, k=length))


def file_extension(filename: str) -> str:
    # Dotfiles such as ".bashrc" have no extension.
    name = PurePosixPath(filename.replace("\\", "/")).name
    return PurePosixPath(name).suffix[1:]


def storage_name(original_filename: str) -> str:
    return f"{generate_name()}.{file_extension(original_filename)}".lower()


def write_upload(media_root: Path, name: str, data: bytes) -> Path:
    out = media_root / name
    out.write_bytes(data)
    return out


def resolve_media(media_root: Path, path: str) -> Path | None:
    """Map a request path onto the media root, or None if it escapes it."""
    root = media_root.resolve()
    try:
        f = (root / path.lstrip("/")).resolve()
    except (OSError, ValueError):
        return None
    if f == root or not f.is_relative_to(root):
        return None
    return f


def guess_content_type(name: str) -> str:
    mime, _ = mimetypes.guess_type(name, strict=False)
    return mime or FALLBACK_CONTENT_TYPE

# app/services/uploads.py
from __future__ import annotations

import base64
import logging
import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from app.core.config import settings
from app.core.errors import DomainError

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/webp", "image/gif"}

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9.-]")


class InvalidUpload(DomainError):
    code = "invalid_upload"
    default_message = "Invalid upload"


@dataclass
class StoredImage:
    url: str
    size: int


def safe_filename(name: str) -> str:
    return _UNSAFE_CHARS.sub("_", name or "upload")


def validate_image(content_type: Optional[str], size: int, max_bytes: Optional[int] = None) -> None:
    if content_type not in ALLOWED_IMAGE_TYPES:
        raise InvalidUpload("Invalid file type. Please upload JPG, PNG, WebP, or GIF images only.")
    limit = max_bytes or settings.UPLOAD_MAX_BYTES
    if size > limit:
        raise InvalidUpload(f"File too large. Please upload images smaller than {limit // (1024 * 1024)}MB.")


def store_image(
    data: bytes,
    filename: str,
    content_type: str,
    upload_dir: Optional[str] = None,
    inline: Optional[bool] = None,
) -> StoredImage:
    validate_image(content_type, len(data))

    if settings.UPLOAD_INLINE if inline is None else inline:
        encoded = base64.b64encode(data).decode("ascii")
        return StoredImage(url=f"data:{content_type};base64,{encoded}", size=len(data))

    target_dir = Path(upload_dir or settings.UPLOAD_DIR)
    target_dir.mkdir(parents=True, exist_ok=True)
    stored_name = f"{int(time.time() * 1000)}_{safe_filename(filename)}"
    (target_dir / stored_name).write_bytes(data)

    logger.info("Stored upload %s (%d bytes)", stored_name, len(data))
    return StoredImage(url=f"/uploads/{stored_name}", size=len(data))

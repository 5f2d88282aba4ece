"""Local disk storage for uploaded product images."""

import uuid
from pathlib import Path
from typing import Optional

from fastapi import Request, UploadFile
from starlette.concurrency import run_in_threadpool

from libs.common.config import get_settings
from libs.common.errors import ValidationError
from libs.common.logging import get_logger

logger = get_logger(__name__)

UPLOADS_ROUTE_NAME = "uploads"


class UploadStorage:
    """Writes uploads under a directory with collision-free generated names."""

    def __init__(self, root: Path):
        self.root = root

    def ensure_root(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def generate_filename(original: Optional[str]) -> str:
        suffix = Path(original or "").suffix.lower()
        return f"{uuid.uuid4().hex}{suffix}"

    async def save(self, upload: UploadFile) -> str:
        """Persist an upload and return its stored filename."""
        if upload.content_type and not upload.content_type.startswith("image/"):
            raise ValidationError("File must be an image")

        data = await upload.read()
        filename = self.generate_filename(upload.filename)

        self.ensure_root()
        await run_in_threadpool((self.root / filename).write_bytes, data)
        logger.info("Stored upload %s (%d bytes)", filename, len(data))
        return filename

    def discard(self, filename: Optional[str]) -> None:
        """Remove an upload that no product ended up referencing."""
        if not filename:
            return
        (self.root / filename).unlink(missing_ok=True)
        logger.info("Discarded unreferenced upload %s", filename)


def get_upload_storage() -> UploadStorage:
    return UploadStorage(Path(get_settings().UPLOAD_DIR))


def has_file(upload: Optional[UploadFile]) -> bool:
    # Browsers submit an empty part with no filename for an untouched file input
    return upload is not None and bool(upload.filename)


def public_upload_url(request: Request, filename: str) -> str:
    """Absolute URL for a stored upload, built from the request's scheme and host."""
    return str(request.url_for(UPLOADS_ROUTE_NAME, path=filename))


async def resolve_image_source(
    request: Request,
    storage: UploadStorage,
    upload: Optional[UploadFile],
    image_url: Optional[str],
) -> tuple[Optional[str], Optional[str]]:
    """
    Turn an image source into a servable URL.

    Returns `(url, stored_filename)`. An uploaded file takes precedence over
    an `imageUrl` reference, which is returned unchanged (possibly empty or
    None) with no stored filename when no file was sent.
    """
    if has_file(upload):
        filename = await storage.save(upload)
        return public_upload_url(request, filename), filename
    return image_url, None

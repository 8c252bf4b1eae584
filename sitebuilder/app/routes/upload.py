"""
Upload Routes: image upload.

- POST /api/upload (multipart, field "image") → {"ok": true, "filename"}

No content-type or format checks; any bytes are stored and later served
as static content.
"""

from pathlib import Path
from typing import Any

from fastapi import APIRouter, File, Request, UploadFile

from sitebuilder.core.storage import save_upload
from sitebuilder.domain.errors import ErrorCodes, SiteBuilderError

api_router = APIRouter()


def get_uploads_dir(request: Request) -> Path:
    """uploads/ directory from app settings."""
    return request.app.state.settings.uploads_dir


@api_router.post("/upload")
def upload_image(
    request: Request,
    image: UploadFile | None = File(None),
) -> dict[str, Any]:
    """
    Store one image under a generated filename.

    Plain def: the file write runs in the threadpool.

    Returns:
        {"ok": True, "filename": stored name}

    Raises:
        SiteBuilderError: UPLOAD_MISSING (no file in the request)
    """
    if image is None or not image.filename:
        raise SiteBuilderError(ErrorCodes.UPLOAD_MISSING, "No file received")

    file_bytes = image.file.read()
    result = save_upload(get_uploads_dir(request), image.filename, file_bytes)

    return {"ok": True, "filename": result.filename}

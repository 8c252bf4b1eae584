"""
Storage: uploads area, asset copy, text file writes.

Layout:
- uploads/ (flat, generated names, never reused, never deleted)
- sites/<site_id>/ (one self-contained directory per site)
"""

import logging
import shutil
from pathlib import Path

from sitebuilder.core.ids import generate_upload_filename
from sitebuilder.domain.schemas import UploadResult

logger = logging.getLogger(__name__)


def ensure_dirs(*dirs: Path) -> None:
    """Create directories (parents included) if missing."""
    for d in dirs:
        d.mkdir(parents=True, exist_ok=True)


# =============================================================================
# Uploads
# =============================================================================

def save_upload(uploads_dir: Path, original_name: str | None, data: bytes) -> UploadResult:
    """
    Store uploaded bytes under a fresh generated filename.

    Args:
        uploads_dir: uploads/ directory
        original_name: client filename (only its extension is kept)
        data: file content

    Returns:
        UploadResult
    """
    uploads_dir.mkdir(parents=True, exist_ok=True)
    filename = generate_upload_filename(original_name)
    path = uploads_dir / filename

    # 'xb': never overwrite an existing upload
    with open(path, "xb") as f:
        f.write(data)

    logger.info("Stored upload %s (%d bytes, original=%r)", filename, len(data), original_name)
    return UploadResult(filename=filename, path=path, size=len(data))


def is_upload_name(filename: str) -> bool:
    """True for a bare file name (no directory parts, not . or ..)."""
    if not filename or filename in (".", ".."):
        return False
    return Path(filename).name == filename and "\\" not in filename


def resolve_upload(uploads_dir: Path, filename: str) -> Path | None:
    """
    Upload filename → existing file path.

    Only bare file names are accepted; anything path-like is treated
    as a missing upload.

    Returns:
        Path, or None when missing/unsafe
    """
    if not is_upload_name(filename):
        if filename:
            logger.warning("Rejecting path-like upload reference: %r", filename)
        return None

    path = uploads_dir / filename
    if not path.is_file():
        return None
    return path


def copy_asset(src: Path, assets_dir: Path) -> Path:
    """
    Copy an upload into a site's assets/ (same filename).

    Returns:
        destination path
    """
    dst = assets_dir / src.name
    shutil.copy2(str(src), str(dst))
    return dst


def write_text(path: Path, content: str) -> Path:
    """UTF-8 text write."""
    path.write_text(content, encoding="utf-8")
    return path

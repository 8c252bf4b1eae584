"""
ID generation: slug, site_id, upload filename.

Uniqueness is probabilistic (epoch ms + random suffix); no lookup is done.
"""

import re
import time
import uuid
from pathlib import Path

from sitebuilder.domain.constants import (
    SITE_ID_RANDOM_LENGTH,
    SLUG_FALLBACK,
    SLUG_MAX_LENGTH,
    UPLOAD_DEFAULT_EXTENSION,
    UPLOAD_RANDOM_LENGTH,
)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_EXTENSION = re.compile(r"^\.[a-z0-9]+$")
_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def slugify(title: str | None) -> str:
    """
    Title → filesystem/URL-safe slug.

    - lowercase
    - runs of non [a-z0-9] → single hyphen
    - no leading/trailing hyphen
    - at most SLUG_MAX_LENGTH characters
    - SLUG_FALLBACK when nothing is left

    Args:
        title: site title (any text)

    Returns:
        slug string
    """
    slug = _NON_ALNUM.sub("-", str(title or "").lower()).strip("-")
    # cut may leave a trailing hyphen
    slug = slug[:SLUG_MAX_LENGTH].rstrip("-")
    return slug or SLUG_FALLBACK


def to_base36(value: int) -> str:
    """Non-negative int → base36 (lowercase)."""
    if value < 0:
        raise ValueError("value must be non-negative")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def _epoch_ms() -> int:
    return time.time_ns() // 1_000_000


def _random_suffix(length: int) -> str:
    return uuid.uuid4().hex[:length]


def generate_site_id(title: str | None) -> str:
    """
    Site ID.

    Format: {slug}-{base36 epoch ms}-{random hex}

    Args:
        title: site title

    Returns:
        site_id string (also the directory name)
    """
    slug = slugify(title)
    stamp = to_base36(_epoch_ms())
    return f"{slug}-{stamp}-{_random_suffix(SITE_ID_RANDOM_LENGTH)}"


def upload_extension(original_name: str | None) -> str:
    """Lowercase extension of the client's filename, or the default."""
    suffix = Path(original_name or "").suffix.lower()
    if _EXTENSION.match(suffix):
        return suffix
    return UPLOAD_DEFAULT_EXTENSION


def generate_upload_filename(original_name: str | None) -> str:
    """
    Stored upload filename.

    Format: {epoch ms}-{random hex}{ext}
    The client's name is discarded except for its extension.
    """
    ext = upload_extension(original_name)
    return f"{_epoch_ms()}-{_random_suffix(UPLOAD_RANDOM_LENGTH)}{ext}"

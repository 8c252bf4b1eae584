"""
Data schemas for the site builder.

Wire format (JSON from the editor):
- {"type": "h1", "text": "..."}
- {"type": "p", "text": "..."}
- {"type": "image", "filename": "...", "alt": "..."}

Block identity is positional: list order == render order.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

from sitebuilder.domain.constants import (
    BLOCK_HEADING,
    BLOCK_IMAGE,
    BLOCK_PARAGRAPH,
    DEFAULT_THEME,
    THEMES,
)
from sitebuilder.domain.errors import ErrorCodes, SiteBuilderError

logger = logging.getLogger(__name__)

# =============================================================================
# Blocks
# =============================================================================

@dataclass(frozen=True)
class HeadingBlock:
    """Heading block."""
    text: str = ""
    type: str = BLOCK_HEADING


@dataclass(frozen=True)
class ParagraphBlock:
    """Paragraph block."""
    text: str = ""
    type: str = BLOCK_PARAGRAPH


@dataclass(frozen=True)
class ImageBlock:
    """
    Image block.

    filename references an upload; src is the render-time path, filled in
    only after the upload was copied into the site's assets.
    """
    filename: str = ""
    alt: str = ""
    src: str = ""
    type: str = BLOCK_IMAGE


Block = Union[HeadingBlock, ParagraphBlock, ImageBlock]


# =============================================================================
# Requests / Results
# =============================================================================

@dataclass
class SiteRequest:
    """Validated create-site request."""
    title: str
    theme: str = DEFAULT_THEME
    blocks: list[Block] = field(default_factory=list)


@dataclass
class GeneratedSite:
    """Result of one generation run."""
    site_id: str
    site_dir: Path
    files: list[Path] = field(default_factory=list)
    copied_assets: list[str] = field(default_factory=list)
    missing_assets: list[str] = field(default_factory=list)


@dataclass
class UploadResult:
    """Stored upload."""
    filename: str
    path: Path
    size: int


# =============================================================================
# Parsing
# =============================================================================

def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def parse_block(data: Any) -> Block | None:
    """
    Decoded JSON → Block.

    Args:
        data: one element of the "blocks" array

    Returns:
        Block, or None for non-objects and unknown types (rendered as nothing)
    """
    if not isinstance(data, dict):
        logger.warning("Skipping non-object block: %r", data)
        return None

    block_type = data.get("type")
    if block_type == BLOCK_HEADING:
        return HeadingBlock(text=_as_text(data.get("text")))
    if block_type == BLOCK_PARAGRAPH:
        return ParagraphBlock(text=_as_text(data.get("text")))
    if block_type == BLOCK_IMAGE:
        alt = data.get("alt", data.get("altText"))
        return ImageBlock(
            filename=_as_text(data.get("filename")),
            alt=_as_text(alt),
        )

    logger.warning("Skipping block with unknown type: %r", block_type)
    return None


def normalize_theme(theme: Any) -> str:
    """Unknown or missing theme → default theme."""
    if isinstance(theme, str) and theme in THEMES:
        return theme
    if theme:
        logger.warning("Unknown theme %r, falling back to %s", theme, DEFAULT_THEME)
    return DEFAULT_THEME


def parse_site_request(payload: Any) -> SiteRequest:
    """
    Decoded JSON body → SiteRequest.

    Args:
        payload: {"title": str, "theme": str, "blocks": list}

    Returns:
        SiteRequest

    Raises:
        SiteBuilderError: INVALID_INPUT (title missing/empty, blocks not a list)
    """
    if not isinstance(payload, dict):
        raise SiteBuilderError(ErrorCodes.INVALID_INPUT, "Invalid data", field="body")

    title = payload.get("title")
    blocks = payload.get("blocks")

    if not title:
        raise SiteBuilderError(ErrorCodes.INVALID_INPUT, "Invalid data", field="title")
    if not isinstance(blocks, list):
        raise SiteBuilderError(ErrorCodes.INVALID_INPUT, "Invalid data", field="blocks")

    parsed = [b for b in (parse_block(item) for item in blocks) if b is not None]

    return SiteRequest(
        title=_as_text(title),
        theme=normalize_theme(payload.get("theme")),
        blocks=parsed,
    )

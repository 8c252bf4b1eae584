"""
Site Routes: static site generation.

- POST /api/create-site (JSON {title, theme, blocks}) → {"ok": true, "url", "siteId"}

Failures:
- 400: title missing, blocks not a list, body not a JSON object
- 500: anything raised while generating (detail logged only)
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Request

from sitebuilder.core.generator import SiteGenerator
from sitebuilder.domain.constants import SITE_INDEX_FILENAME
from sitebuilder.domain.errors import ErrorCodes, SiteBuilderError
from sitebuilder.domain.schemas import parse_site_request

logger = logging.getLogger(__name__)

api_router = APIRouter()


def get_generator(request: Request) -> SiteGenerator:
    return request.app.state.generator


@api_router.post("/create-site")
def create_site(
    request: Request,
    payload: Any = Body(None),
) -> dict[str, Any]:
    """
    Generate a static site from the submitted block list.

    Plain def: file copies and writes run in the threadpool.

    Returns:
        {"ok": True, "url": absolute index.html URL, "siteId": site id}
    """
    site_request = parse_site_request(payload)

    try:
        site = get_generator(request).generate(site_request)
    except Exception as e:
        logger.exception("Site generation failed for title %r", site_request.title)
        raise SiteBuilderError(
            ErrorCodes.GENERATION_FAILED,
            "Failed to create site",
            title=site_request.title,
        ) from e

    url = str(request.url_for("sites", path=f"{site.site_id}/{SITE_INDEX_FILENAME}"))
    logger.info("Site created: %s", url)

    return {"ok": True, "url": url, "siteId": site.site_id}

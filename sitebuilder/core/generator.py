"""
Site generation pipeline.

Steps:
1. site_id from the title (slug + time + random)
2. sites/<site_id>/ and assets/
3. copy referenced uploads → assets/, set render-time src
4. render index.html, styles.css, script.js
5. write files

Missing uploads are skipped: nothing is copied, the reference dangles.
No rollback: a failure mid-way can leave a partial site directory.
"""

import dataclasses
import logging
from pathlib import Path

from sitebuilder.core.ids import generate_site_id
from sitebuilder.core.storage import (
    copy_asset,
    ensure_dirs,
    is_upload_name,
    resolve_upload,
    write_text,
)
from sitebuilder.domain.constants import SITE_ASSETS_DIR
from sitebuilder.domain.schemas import Block, GeneratedSite, ImageBlock, SiteRequest
from sitebuilder.render.site import SiteRenderer

logger = logging.getLogger(__name__)


class SiteGenerator:
    """
    Builds one static site per request.

    Usage:
        generator = SiteGenerator(sites_dir, uploads_dir)
        site = generator.generate(request)
    """

    def __init__(
        self,
        sites_dir: Path,
        uploads_dir: Path,
        renderer: SiteRenderer | None = None,
    ):
        self.sites_dir = sites_dir
        self.uploads_dir = uploads_dir
        self.renderer = renderer or SiteRenderer()

    def _attach_assets(
        self,
        blocks: list[Block],
        assets_dir: Path,
        site: GeneratedSite,
    ) -> list[Block]:
        """Copy image uploads into assets/ and return blocks with src set."""
        rendered: list[Block] = []
        for block in blocks:
            if not isinstance(block, ImageBlock) or not block.filename:
                rendered.append(block)
                continue

            src = resolve_upload(self.uploads_dir, block.filename)
            if src is None:
                # bare names keep their assets/ reference, path-like ones get none
                dangling = (
                    f"./{SITE_ASSETS_DIR}/{block.filename}"
                    if is_upload_name(block.filename)
                    else ""
                )
                logger.warning(
                    "Upload %r not found for site %s; asset not copied",
                    block.filename, site.site_id,
                )
                site.missing_assets.append(block.filename)
                rendered.append(dataclasses.replace(block, src=dangling))
                continue

            dst = copy_asset(src, assets_dir)
            site.copied_assets.append(dst.name)
            rendered.append(
                dataclasses.replace(block, src=f"./{SITE_ASSETS_DIR}/{dst.name}")
            )
        return rendered

    def generate(self, request: SiteRequest) -> GeneratedSite:
        """
        Generate a site.

        Args:
            request: validated SiteRequest

        Returns:
            GeneratedSite (site_id, directory, written files)

        Raises:
            OSError: filesystem failures (not rolled back)
        """
        site_id = generate_site_id(request.title)
        site_dir = self.sites_dir / site_id
        assets_dir = site_dir / SITE_ASSETS_DIR

        ensure_dirs(site_dir, assets_dir)
        site = GeneratedSite(site_id=site_id, site_dir=site_dir)

        blocks = self._attach_assets(request.blocks, assets_dir, site)
        rendered = self.renderer.render(request.title, request.theme, blocks)

        for filename, content in rendered.files().items():
            site.files.append(write_text(site_dir / filename, content))

        logger.info(
            "Site %s generated: %d blocks, %d assets copied, %d missing",
            site_id, len(blocks), len(site.copied_assets), len(site.missing_assets),
        )
        return site

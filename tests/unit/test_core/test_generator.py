"""
test_generator.py - site generation pipeline tests

DoD:
- site dir with index.html, styles.css, script.js, assets/
- referenced uploads copied, src rewritten to ./assets/<name>
- missing upload → still succeeds, nothing copied, reference kept as ./assets/<name>
- path-like reference → empty src
- request blocks are not mutated
- filesystem failure propagates (route turns it into 500)
"""

import re
from pathlib import Path
from unittest.mock import patch

import pytest

from sitebuilder.core.generator import SiteGenerator
from sitebuilder.domain.schemas import (
    HeadingBlock,
    ImageBlock,
    ParagraphBlock,
    SiteRequest,
    parse_site_request,
)


@pytest.fixture
def generator(sites_dir: Path, uploads_dir: Path) -> SiteGenerator:
    return SiteGenerator(sites_dir, uploads_dir)


class TestGenerate:

    def test_layout(self, generator: SiteGenerator, sites_dir: Path):
        site = generator.generate(SiteRequest(title="My Site", blocks=[HeadingBlock("Hi")]))

        assert site.site_dir == sites_dir / site.site_id
        assert site.site_id.startswith("my-site-")
        assert (site.site_dir / "index.html").is_file()
        assert (site.site_dir / "styles.css").is_file()
        assert (site.site_dir / "script.js").is_file()
        assert (site.site_dir / "assets").is_dir()
        assert sorted(p.name for p in site.files) == ["index.html", "script.js", "styles.css"]

    def test_copies_referenced_upload(
        self, generator: SiteGenerator, uploads_dir: Path, uploaded_png: str
    ):
        request = SiteRequest(
            title="Gallery",
            blocks=[ImageBlock(filename=uploaded_png, alt="pic")],
        )

        site = generator.generate(request)

        copied = site.site_dir / "assets" / uploaded_png
        assert copied.read_bytes() == (uploads_dir / uploaded_png).read_bytes()
        assert site.copied_assets == [uploaded_png]
        html = (site.site_dir / "index.html").read_text(encoding="utf-8")
        assert f'src="./assets/{uploaded_png}"' in html

    def test_missing_upload_degrades(self, generator: SiteGenerator):
        request = SiteRequest(
            title="Broken",
            blocks=[ImageBlock(filename="never-uploaded.png", alt="ghost")],
        )

        site = generator.generate(request)

        assert site.missing_assets == ["never-uploaded.png"]
        assert list((site.site_dir / "assets").iterdir()) == []
        html = (site.site_dir / "index.html").read_text(encoding="utf-8")
        assert 'src="./assets/never-uploaded.png"' in html
        assert "<figcaption>ghost</figcaption>" in html

    def test_path_traversal_not_copied(self, generator: SiteGenerator, data_dir: Path):
        (data_dir / "secret.txt").write_text("top secret")
        request = SiteRequest(title="t", blocks=[ImageBlock(filename="../secret.txt")])

        site = generator.generate(request)

        assert list((site.site_dir / "assets").iterdir()) == []
        assert "top secret" not in (site.site_dir / "index.html").read_text(encoding="utf-8")
        assert 'src=""' in (site.site_dir / "index.html").read_text(encoding="utf-8")
        assert site.missing_assets == ["../secret.txt"]

    def test_request_not_mutated(self, generator: SiteGenerator, uploaded_png: str):
        image = ImageBlock(filename=uploaded_png, alt="x")
        request = SiteRequest(title="t", blocks=[image])

        generator.generate(request)

        assert request.blocks[0] is image
        assert image.src == ""

    def test_same_title_distinct_sites(self, generator: SiteGenerator):
        request = SiteRequest(title="Same", blocks=[])
        first = generator.generate(request)
        second = generator.generate(request)

        assert first.site_id != second.site_id
        assert first.site_dir.exists()
        assert second.site_dir.exists()

    def test_round_trip(self, generator: SiteGenerator, uploads_dir: Path, sample_payload: dict):
        (uploads_dir / "a.png").write_bytes(b"png")

        site = generator.generate(parse_site_request(sample_payload))

        html = (site.site_dir / "index.html").read_text(encoding="utf-8")
        css = (site.site_dir / "styles.css").read_text(encoding="utf-8")
        h1 = re.search(r"<h1[^>]*>Hello</h1>", html)
        p = re.search(r"<p[^>]*>World</p>", html)
        fig = re.search(
            r'<figure[^>]*><img src="\./assets/a\.png" alt="cap"><figcaption>cap</figcaption></figure>',
            html,
        )
        assert h1 and p and fig
        assert h1.start() < p.start() < fig.start()
        assert ".theme-dark{" in css
        assert 'class="theme-dark"' in html

    def test_filesystem_error_propagates(self, generator: SiteGenerator):
        request = SiteRequest(title="t", blocks=[ParagraphBlock("x")])
        with patch(
            "sitebuilder.core.generator.write_text",
            side_effect=OSError("disk full"),
        ):
            with pytest.raises(OSError, match="disk full"):
                generator.generate(request)

    def test_round_trip_without_upload(self, generator: SiteGenerator, sample_payload: dict):
        site = generator.generate(parse_site_request(sample_payload))

        html = (site.site_dir / "index.html").read_text(encoding="utf-8")
        assert site.missing_assets == ["a.png"]
        assert re.search(
            r'<img src="\./assets/a\.png" alt="cap"><figcaption>cap</figcaption>', html
        )

"""
Static site renderer: Jinja2 templates shipped in sitebuilder/render/templates.

Outputs:
- index.html: header + blocks in order + footer
- styles.css: base palette in :root, .theme-dark override
- script.js: inert

All user text goes through autoescape (&, <, >, quotes).
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from jinja2 import Environment, PackageLoader, StrictUndefined

from sitebuilder.domain.constants import (
    DEFAULT_THEME,
    SITE_INDEX_FILENAME,
    SITE_SCRIPT_FILENAME,
    SITE_STYLES_FILENAME,
)
from sitebuilder.domain.schemas import Block, normalize_theme


@dataclass(frozen=True)
class RenderedSite:
    """Rendered file contents, keyed by output filename."""
    html: str
    css: str
    js: str

    def files(self) -> dict[str, str]:
        return {
            SITE_INDEX_FILENAME: self.html,
            SITE_STYLES_FILENAME: self.css,
            SITE_SCRIPT_FILENAME: self.js,
        }


class SiteRenderer:
    """
    Block list → static files.

    Usage:
        renderer = SiteRenderer(lang="en")
        rendered = renderer.render(title, theme, blocks)
    """

    def __init__(self, lang: str = "en", env: Environment | None = None):
        self.lang = lang
        self.env = env or Environment(
            loader=PackageLoader("sitebuilder", "render/templates"),
            autoescape=True,
            undefined=StrictUndefined,
        )

    def render_html(self, title: str, theme: str, blocks: Sequence[Block]) -> str:
        """Markup document."""
        template = self.env.get_template(SITE_INDEX_FILENAME)
        return template.render(
            lang=self.lang,
            title=title,
            theme=normalize_theme(theme),
            blocks=blocks,
            year=datetime.now().year,
            index_filename=SITE_INDEX_FILENAME,
            styles_filename=SITE_STYLES_FILENAME,
            script_filename=SITE_SCRIPT_FILENAME,
        )

    def render_css(self, theme: str = DEFAULT_THEME) -> str:
        """Stylesheet; the theme picks color-scheme, palettes are custom properties."""
        template = self.env.get_template(SITE_STYLES_FILENAME)
        return template.render(theme=normalize_theme(theme))

    def render_js(self) -> str:
        """Client script (currently inert)."""
        return self.env.get_template(SITE_SCRIPT_FILENAME).render()

    def render(self, title: str, theme: str, blocks: Sequence[Block]) -> RenderedSite:
        return RenderedSite(
            html=self.render_html(title, theme, blocks),
            css=self.render_css(theme),
            js=self.render_js(),
        )


def render_site(
    title: str,
    theme: str,
    blocks: Sequence[Block],
    lang: str = "en",
) -> RenderedSite:
    """Shortcut: render with a fresh SiteRenderer."""
    return SiteRenderer(lang=lang).render(title, theme, blocks)

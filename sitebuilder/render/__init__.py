"""
Render layer: block list + theme → static site files (Jinja2).
"""

from .site import SiteRenderer, render_site

__all__ = ["SiteRenderer", "render_site"]

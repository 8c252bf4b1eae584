"""
sitebuilder: minimal block-based website builder.

Layers:
- sitebuilder/app/ → FastAPI server, routes, browser editor (static)
- sitebuilder/core/ → ids, storage, site generation pipeline, config
- sitebuilder/render/ → Jinja2 templates for generated sites
- sitebuilder/editor/ → editor state model + HTTP client
"""

__version__ = "0.1.0"

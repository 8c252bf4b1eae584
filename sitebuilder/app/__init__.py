"""
App layer: HTTP server (FastAPI).

- sitebuilder/app/routes/ → upload + create-site API
- sitebuilder/app/static/ → browser editor (served at /builder/)
- sitebuilder/app/cli.py → startup (port, browser)
"""

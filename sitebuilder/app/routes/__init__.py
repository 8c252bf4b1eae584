"""
API routes.

- upload: POST /api/upload
- sites: POST /api/create-site
"""

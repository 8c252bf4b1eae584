"""
Domain Constants: values shared across the builder.

Filename policy, directory layout, slug rules, themes.
"""

# =============================================================================
# Site Directory Structure
# =============================================================================
# sites/<site_id>/
# ├── index.html
# ├── styles.css
# ├── script.js
# └── assets/

SITE_INDEX_FILENAME = "index.html"
SITE_STYLES_FILENAME = "styles.css"
SITE_SCRIPT_FILENAME = "script.js"
SITE_ASSETS_DIR = "assets"

# =============================================================================
# Data Root Layout
# =============================================================================

SITES_DIR = "sites"
UPLOADS_DIR = "uploads"

# URL prefixes for static serving
BUILDER_URL_PREFIX = "/builder"
SITES_URL_PREFIX = "/sites"

# =============================================================================
# Uploads
# =============================================================================

UPLOAD_FIELD_NAME = "image"
UPLOAD_DEFAULT_EXTENSION = ".bin"
UPLOAD_RANDOM_LENGTH = 6
MAX_BODY_MB = 20

# =============================================================================
# Slug & Site ID
# =============================================================================

SLUG_MAX_LENGTH = 40
SLUG_FALLBACK = "site"
SITE_ID_RANDOM_LENGTH = 6

# =============================================================================
# Block Types (wire format)
# =============================================================================

BLOCK_HEADING = "h1"
BLOCK_PARAGRAPH = "p"
BLOCK_IMAGE = "image"

# =============================================================================
# Themes
# =============================================================================

THEME_LIGHT = "light"
THEME_DARK = "dark"
THEMES = (THEME_LIGHT, THEME_DARK)
DEFAULT_THEME = THEME_LIGHT

# =============================================================================
# Server
# =============================================================================

DEFAULT_PORT = 3000
PORT_MIN = 1
PORT_MAX = 9999

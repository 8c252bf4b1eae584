"""
Core layer: ids, storage, config, site generation.
"""

from .config import Settings, load_config, load_settings, resolve_port
from .generator import SiteGenerator
from .ids import generate_site_id, generate_upload_filename, slugify
from .storage import copy_asset, ensure_dirs, is_upload_name, resolve_upload, save_upload

__all__ = [
    # config
    "Settings",
    "load_config",
    "load_settings",
    "resolve_port",
    # generator
    "SiteGenerator",
    # ids
    "generate_site_id",
    "generate_upload_filename",
    "slugify",
    # storage
    "copy_asset",
    "ensure_dirs",
    "is_upload_name",
    "resolve_upload",
    "save_upload",
]

"""
Configuration: default.yaml + environment → Settings.

Precedence (highest first):
- CLI flag (port only, see resolve_port)
- environment: PORT, SITEBUILDER_DATA_DIR, SITEBUILDER_CONFIG
- default.yaml
- built-in defaults
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from sitebuilder.domain.constants import (
    DEFAULT_PORT,
    MAX_BODY_MB,
    PORT_MAX,
    PORT_MIN,
    SITES_DIR,
    UPLOADS_DIR,
)
from sitebuilder.domain.errors import ConfigError

PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "default.yaml"
PUBLIC_DIR = Path(__file__).parent.parent / "app" / "static"


@dataclass
class Settings:
    """Resolved runtime settings."""
    sites_dir: Path
    uploads_dir: Path
    public_dir: Path = PUBLIC_DIR
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT
    max_body_bytes: int = MAX_BODY_MB * 1024 * 1024
    open_browser: bool = True
    lang: str = "en"

    @classmethod
    def for_data_dir(cls, data_dir: Path, **overrides: Any) -> "Settings":
        """Settings with sites/ and uploads/ under one data root."""
        return cls(
            sites_dir=data_dir / SITES_DIR,
            uploads_dir=data_dir / UPLOADS_DIR,
            **overrides,
        )


def load_config(config_path: Path | None = None) -> dict:
    """
    Load the YAML config file.

    Args:
        config_path: defaults to default.yaml at the project root

    Returns:
        config dict ({} when the file does not exist)
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] | None = yaml.safe_load(f)
        return data or {}


def resolve_port(
    cli_value: str | int | None,
    env: Mapping[str, str] | None = None,
    default: str | int = DEFAULT_PORT,
) -> int:
    """
    Port from CLI flag, else PORT env var, else default.

    Raises:
        ConfigError: not an integer in [PORT_MIN, PORT_MAX]
    """
    if env is None:
        env = os.environ

    raw: str | int | None = cli_value
    if raw is None or raw == "":
        raw = env.get("PORT") or default

    try:
        port = int(str(raw).strip())
    except ValueError:
        raise ConfigError(
            f"Port must be a number from {PORT_MIN} to {PORT_MAX} (got {raw!r}). "
            f"Example: sitebuilder --port=8080"
        ) from None

    if not PORT_MIN <= port <= PORT_MAX:
        raise ConfigError(
            f"Port must be a number from {PORT_MIN} to {PORT_MAX} (got {port}). "
            f"Example: sitebuilder --port=8080"
        )
    return port


def load_settings(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
    cli_port: str | int | None = None,
) -> Settings:
    """
    Build Settings from config file + environment.

    Args:
        config_path: YAML config (SITEBUILDER_CONFIG env var, else default.yaml)
        env: environment mapping (os.environ by default)
        cli_port: value of the --port flag, if given

    Raises:
        ConfigError: invalid port
    """
    if env is None:
        env = os.environ

    if config_path is None and env.get("SITEBUILDER_CONFIG"):
        config_path = Path(env["SITEBUILDER_CONFIG"])

    config = load_config(config_path)
    server = config.get("server", {}) or {}
    paths = config.get("paths", {}) or {}
    limits = config.get("limits", {}) or {}
    site = config.get("site", {}) or {}

    data_dir = Path(env.get("SITEBUILDER_DATA_DIR") or paths.get("data_dir") or ".")
    if not data_dir.is_absolute():
        data_dir = Path.cwd() / data_dir

    public_dir = Path(paths["public_dir"]) if paths.get("public_dir") else PUBLIC_DIR

    return Settings(
        sites_dir=data_dir / paths.get("sites_dir", SITES_DIR),
        uploads_dir=data_dir / paths.get("uploads_dir", UPLOADS_DIR),
        public_dir=public_dir,
        host=str(server.get("host", "127.0.0.1")),
        port=resolve_port(cli_port, env, server.get("port", DEFAULT_PORT)),
        max_body_bytes=int(float(limits.get("max_body_mb", MAX_BODY_MB)) * 1024 * 1024),
        open_browser=bool(server.get("open_browser", True)),
        lang=str(site.get("lang", "en")),
    )

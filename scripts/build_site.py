#!/usr/bin/env python
"""
build_site.py - build a site from a YAML manifest against a running builder.

Manifest:
    title: My site
    theme: dark
    blocks:
      - {type: h1, text: Hello}
      - {type: p, text: World}
      - {type: image, path: images/photo.png, alt: A photo}

Usage:
    uv run python scripts/build_site.py manifest.yaml
    uv run python scripts/build_site.py manifest.yaml --server http://localhost:8080
"""

import argparse
import logging
import os
import sys
from pathlib import Path

import httpx
import yaml
from dotenv import load_dotenv

from sitebuilder.editor.client import BuilderClient, BuilderClientError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Build a site from a YAML manifest")
    parser.add_argument("manifest", type=Path, help="manifest YAML file")
    parser.add_argument(
        "--server",
        default=f"http://localhost:{os.environ.get('PORT', '3000')}",
        help="builder base URL (default: http://localhost:$PORT)",
    )
    args = parser.parse_args(argv)

    if not args.manifest.exists():
        logger.error("Manifest not found: %s", args.manifest)
        return 1

    with open(args.manifest, encoding="utf-8") as f:
        manifest = yaml.safe_load(f) or {}

    try:
        with httpx.Client(base_url=args.server, timeout=30.0) as http:
            result = BuilderClient(http).build_from_manifest(manifest, args.manifest.parent)
    except (BuilderClientError, httpx.HTTPError, OSError) as e:
        logger.error("Build failed: %s", e)
        return 1

    print(result["url"])
    return 0


if __name__ == "__main__":
    sys.exit(main())

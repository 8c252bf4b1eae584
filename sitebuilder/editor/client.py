"""
HTTP client for the builder API (httpx).

Same contract as the browser editor:
- upload each image first (POST /api/upload) → server filename
- then submit the whole block list once (POST /api/create-site)
"""

import logging
from pathlib import Path
from typing import Any

import httpx

from sitebuilder.domain.constants import DEFAULT_THEME, UPLOAD_FIELD_NAME
from sitebuilder.editor.state import EditorState

logger = logging.getLogger(__name__)


class BuilderClientError(Exception):
    """Non-ok response from the builder API."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{status_code}] {message}")


class BuilderClient:
    """
    Thin wrapper over an httpx.Client pointed at a running builder.

    Usage:
        with httpx.Client(base_url="http://localhost:3000") as http:
            client = BuilderClient(http)
            name = client.upload_image(Path("photo.png"))
    """

    def __init__(self, http: httpx.Client):
        self.http = http

    @staticmethod
    def _json(response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            raise BuilderClientError(response.status_code, response.text[:200]) from None

        if not isinstance(data, dict):
            raise BuilderClientError(response.status_code, "unexpected response")
        if response.is_error or not data.get("ok"):
            raise BuilderClientError(response.status_code, str(data.get("error", "unknown error")))
        return data

    def upload_image(self, path: Path) -> str:
        """
        Upload one file.

        Returns:
            filename assigned by the server
        """
        with open(path, "rb") as f:
            response = self.http.post(
                "/api/upload",
                files={UPLOAD_FIELD_NAME: (path.name, f, "application/octet-stream")},
            )
        data = self._json(response)
        logger.info("Uploaded %s → %s", path.name, data["filename"])
        return str(data["filename"])

    def create_site(
        self,
        title: str,
        blocks: list[dict[str, Any]],
        theme: str = DEFAULT_THEME,
    ) -> dict[str, Any]:
        """
        Submit the block list.

        Returns:
            {"ok": True, "url": ..., "siteId": ...}
        """
        response = self.http.post(
            "/api/create-site",
            json={"title": title, "theme": theme, "blocks": blocks},
        )
        return self._json(response)

    def build_from_manifest(self, manifest: dict[str, Any], base_dir: Path) -> dict[str, Any]:
        """
        Build a site from a manifest dict.

        Manifest:
            title: str
            theme: light | dark
            blocks:
              - {type: h1, text: ...}
              - {type: p, text: ...}
              - {type: image, path: relative/or/absolute.png, alt: ...}

        Image paths are resolved against base_dir and uploaded before submit.
        """
        state = EditorState()
        for entry in manifest.get("blocks") or []:
            block_type = entry.get("type")
            if block_type == "h1":
                state.add_heading(str(entry.get("text", "")))
            elif block_type == "p":
                state.add_paragraph(str(entry.get("text", "")))
            elif block_type == "image":
                image_path = base_dir / str(entry["path"])
                filename = self.upload_image(image_path)
                state.add_image(filename, alt=str(entry.get("alt", image_path.stem)))
            else:
                logger.warning("Skipping manifest block with unknown type: %r", block_type)

        title = str(manifest.get("title") or "").strip() or "Untitled"
        return self.create_site(
            title,
            state.to_payload(),
            theme=str(manifest.get("theme") or DEFAULT_THEME),
        )

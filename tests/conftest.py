"""
Pytest fixtures for the site builder tests.

- every test gets its own data root under tmp_path (sites/, uploads/)
- TestClient is always used as a context manager so lifespan runs
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from sitebuilder.app.main import create_app
from sitebuilder.core.config import Settings

# 1x1 PNG
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c63f8ffff3f0005fe02fea7d605cf00"
    "00000049454e44ae426082"
)


# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """Project root."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml path."""
    return project_root / "default.yaml"


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Data root for sites/ and uploads/."""
    return tmp_path / "data"


@pytest.fixture
def uploads_dir(data_dir: Path) -> Path:
    path = data_dir / "uploads"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def sites_dir(data_dir: Path) -> Path:
    path = data_dir / "sites"
    path.mkdir(parents=True)
    return path


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def settings(data_dir: Path) -> Settings:
    """Settings rooted in tmp_path, small body limit for 413 tests."""
    return Settings.for_data_dir(data_dir, max_body_bytes=1024 * 1024, open_browser=False)


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    """FastAPI TestClient."""
    with TestClient(create_app(settings)) as client:
        yield client


# =============================================================================
# Data Fixtures
# =============================================================================

@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest.fixture
def uploaded_png(uploads_dir: Path) -> str:
    """An upload already sitting in uploads/ (returns its filename)."""
    name = "1700000000000-abc123.png"
    (uploads_dir / name).write_bytes(PNG_BYTES)
    return name


@pytest.fixture
def sample_payload() -> dict:
    """create-site body: heading, paragraph, image."""
    return {
        "title": "Hello Site",
        "theme": "dark",
        "blocks": [
            {"type": "h1", "text": "Hello"},
            {"type": "p", "text": "World"},
            {"type": "image", "filename": "a.png", "alt": "cap"},
        ],
    }

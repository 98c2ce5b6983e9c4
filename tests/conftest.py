"""Shared pytest fixtures for testing."""
import asyncio
import os
import tempfile
from datetime import datetime
from pathlib import Path

import pytest

# Settings are read at import time, so the environment is prepared first
_TEST_ROOT = Path(tempfile.mkdtemp(prefix="videoshare-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_ROOT / 'test.db'}"
os.environ["MEDIA_DIR"] = str(_TEST_ROOT / "media")
os.environ["SECRET_KEY"] = "test-secret-key-with-at-least-32-characters"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["DEBUG"] = "false"

from fastapi.testclient import TestClient  # noqa: E402

from videoshare.database import AsyncSessionLocal, drop_db, init_db  # noqa: E402
from videoshare.main import app  # noqa: E402
from videoshare.models.user import User  # noqa: E402
from videoshare.models.video import Video  # noqa: E402


async def _reset_database():
    await drop_db()
    await init_db()


async def _promote_to_admin(user_id: str):
    async with AsyncSessionLocal() as session:
        user = await session.get(User, user_id)
        user.is_admin = True
        await session.commit()


@pytest.fixture
def client():
    """API client backed by an empty database."""
    asyncio.run(_reset_database())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def media_root():
    return _TEST_ROOT / "media"


@pytest.fixture
def signup(client):
    """Create an account and return (auth headers, user payload)."""

    def _signup(username: str, password: str = "secret"):
        response = client.post(
            "/v1/auth/signup",
            json={"username": username, "password": password}
        )
        assert response.status_code == 201, response.text
        data = response.json()
        return {"Authorization": f"Bearer {data['access_token']}"}, data["user"]

    return _signup


@pytest.fixture
def admin(signup):
    """Signed-in admin account."""
    headers, user = signup("root_admin")
    asyncio.run(_promote_to_admin(user["id"]))
    return headers, user


@pytest.fixture
def upload_video(client):
    """Upload a small fake media file and return the created video."""

    def _upload(
        headers,
        title: str = "My Clip",
        description: str = "",
        tags: str = "",
        is_shorts: bool = False,
        filename: str = "clip.mp4",
        content_type: str = "video/mp4",
        content: bytes = b"\x00\x00\x00\x18ftypmp42"
    ):
        response = client.post(
            "/v1/videos",
            headers=headers,
            data={
                "title": title,
                "description": description,
                "tags": tags,
                "is_shorts": str(is_shorts).lower(),
            },
            files={"file": (filename, content, content_type)}
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _upload


@pytest.fixture
def make_video():
    """Build an unsaved Video for pure catalog tests."""

    def _make(
        video_id: str,
        title_en: str = "",
        title_ru: str = "",
        description_en: str = "",
        tags=None,
        is_shorts: bool = False,
        channel_name: str = "channel"
    ) -> Video:
        video = Video(
            id=video_id,
            title={"en": title_en, "ru": title_ru},
            description={"en": description_en, "ru": ""},
            tags=tags or [],
            is_shorts=is_shorts,
            views=0,
            created_at=datetime.utcnow()
        )
        video.channel = User(id=f"user_{channel_name}", username=channel_name, avatar_url="")
        return video

    return _make

"""Tests for the video catalog endpoints."""
import re
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from videoshare.core.i18n import CATEGORIES, t
from videoshare.main import app


class TestUpload:
    """Test cases for POST /v1/videos."""

    def test_upload_requires_login(self, client):
        response = client.post(
            "/v1/videos",
            data={"title": "Clip"},
            files={"file": ("clip.mp4", b"data", "video/mp4")}
        )
        assert response.status_code == 401

    def test_upload_video(self, client, signup, upload_video):
        """New videos start with zero views and both languages filled."""
        headers, user = signup("alice")

        video = upload_video(
            headers,
            title="  My   Clip ",
            description="Line one\nLine two",
            tags="gaming, fun, , Gaming"
        )

        assert video["id"].startswith("vid_")
        assert video["title"] == {"en": "My Clip", "ru": "My Clip"}
        assert video["description"] == {"en": "Line one\nLine two", "ru": "Line one\nLine two"}
        assert video["tags"] == ["gaming", "fun"]
        assert video["views"] == 0
        assert video["views_label"] == "0 views"
        assert video["media_type"] == "video"
        assert video["is_shorts"] is False
        assert video["channel_id"] == user["id"]
        assert video["channel_name"] == "alice"
        assert video["channel_avatar_url"] == user["avatar_url"]
        assert video["channel_verified"] is False
        assert video["uploaded_at"] == "Just now"
        assert re.fullmatch(r"[0-9]:[0-5][0-9]", video["duration"])
        assert re.fullmatch(r"https://picsum\.photos/seed/thumb_\d+/360/202", video["thumbnail_url"])

    def test_uploaded_file_is_served(self, client, signup, upload_video):
        headers, _ = signup("alice")
        video = upload_video(headers, content=b"fake-mp4-payload")

        assert video["video_url"].startswith("/media/videos/")
        response = client.get(video["video_url"])
        assert response.status_code == 200
        assert response.content == b"fake-mp4-payload"

    def test_audio_upload(self, client, signup, upload_video):
        headers, _ = signup("alice")

        video = upload_video(headers, filename="song.mp3", content_type="audio/mpeg")

        assert video["media_type"] == "audio"

    def test_shorts_duration(self, client, signup, upload_video):
        headers, _ = signup("alice")

        video = upload_video(headers, is_shorts=True)

        assert video["is_shorts"] is True
        assert re.fullmatch(r"0:(1[5-9]|[2-5][0-9])", video["duration"])

    def test_shorts_reject_audio(self, client, signup):
        headers, _ = signup("alice")

        response = client.post(
            "/v1/videos",
            headers=headers,
            data={"title": "Beat", "is_shorts": "true"},
            files={"file": ("beat.mp3", b"data", "audio/mpeg")}
        )

        assert response.status_code == 422
        assert response.json()["error"]["message"] == t("unsupportedFileType", "en", extension=".mp3")

    def test_title_required(self, client, signup):
        headers, _ = signup("alice")

        response = client.post(
            "/v1/videos",
            headers=headers,
            data={"title": "   "},
            files={"file": ("clip.mp4", b"data", "video/mp4")}
        )

        assert response.status_code == 422
        assert response.json()["error"]["message"] == t("titleAndVideoRequired", "en")

    def test_file_required(self, client, signup):
        headers, _ = signup("alice")

        response = client.post("/v1/videos", headers=headers, data={"title": "Clip"})

        assert response.status_code == 422
        assert response.json()["error"]["details"]["field"] == "file"

    def test_custom_thumbnail_required(self, client, signup):
        headers, _ = signup("alice")

        response = client.post(
            "/v1/videos",
            headers=headers,
            data={"title": "Clip", "use_custom_thumbnail": "true"},
            files={"file": ("clip.mp4", b"data", "video/mp4")}
        )

        assert response.status_code == 422
        assert response.json()["error"]["message"] == t("customThumbnailRequired", "en")

    def test_custom_thumbnail(self, client, signup):
        headers, _ = signup("alice")

        response = client.post(
            "/v1/videos",
            headers=headers,
            data={"title": "Clip", "use_custom_thumbnail": "true"},
            files=[
                ("file", ("clip.mp4", b"data", "video/mp4")),
                ("thumbnail", ("cover.png", b"png", "image/png")),
            ]
        )

        assert response.status_code == 201
        assert response.json()["thumbnail_url"].startswith("/media/thumbnails/")

    def test_failed_save_removes_stored_files(self, client, signup, media_root):
        """Files written before a failed commit are deleted again."""
        headers, _ = signup("alice")
        stored_before = {
            folder: set((media_root / folder).glob("*"))
            for folder in ("videos", "thumbnails")
        }
        failing_client = TestClient(app, raise_server_exceptions=False)

        with patch.object(AsyncSession, "commit", side_effect=RuntimeError("database is locked")):
            response = failing_client.post(
                "/v1/videos",
                headers=headers,
                data={"title": "Clip", "use_custom_thumbnail": "true"},
                files=[
                    ("file", ("clip.mp4", b"data", "video/mp4")),
                    ("thumbnail", ("cover.png", b"png", "image/png")),
                ]
            )

        assert response.status_code == 500
        for folder, before in stored_before.items():
            assert set((media_root / folder).glob("*")) == before
        assert client.get("/v1/videos").json()["total"] == 0


class TestFeeds:
    """Test cases for home, shorts, related and single video endpoints."""

    @pytest.fixture
    def catalog(self, signup, upload_video):
        headers, _ = signup("alice")
        return {
            "game": upload_video(headers, title="Game Night", tags="gaming"),
            "soup": upload_video(headers, title="Soup", tags="cooking"),
            "short": upload_video(headers, title="Quick Jump", tags="gaming", is_shorts=True),
        }

    def test_home_feed_all(self, client, catalog):
        response = client.get("/v1/videos")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert data["category"] == "All"
        assert data["categories"] == list(CATEGORIES)
        assert {v["id"] for v in data["videos"]} == {v["id"] for v in catalog.values()}

    def test_home_feed_category(self, client, catalog):
        """Categories match the lowercased tag."""
        response = client.get("/v1/videos", params={"category": "Gaming"})

        data = response.json()
        assert data["category"] == "Gaming"
        assert {v["id"] for v in data["videos"]} == {catalog["game"]["id"], catalog["short"]["id"]}

    def test_unknown_category(self, client, catalog):
        response = client.get("/v1/videos", params={"category": "Sports"})
        assert response.status_code == 422

    def test_shorts_feed(self, client, catalog):
        response = client.get("/v1/videos/shorts")

        data = response.json()
        assert data["total"] == 1
        assert data["videos"][0]["id"] == catalog["short"]["id"]

    def test_related_excludes_current_and_shorts(self, client, catalog):
        response = client.get(f"/v1/videos/{catalog['game']['id']}/related")

        ids = [v["id"] for v in response.json()["videos"]]
        assert ids == [catalog["soup"]["id"]]

    def test_get_video(self, client, catalog):
        response = client.get(f"/v1/videos/{catalog['soup']['id']}")

        assert response.status_code == 200
        assert response.json()["title"]["en"] == "Soup"

    def test_get_unknown_video(self, client):
        response = client.get("/v1/videos/vid_missing")

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == "NOT_FOUND"
        assert error["message"] == t("videoNotFound", "en")

    def test_views_increment(self, client, catalog):
        video_id = catalog["soup"]["id"]

        client.post(f"/v1/videos/{video_id}/views")
        response = client.post(f"/v1/videos/{video_id}/views")

        assert response.json() == {"video_id": video_id, "views": 2}
        assert client.get(f"/v1/videos/{video_id}").json()["views"] == 2

    def test_russian_labels(self, client, catalog):
        response = client.get(f"/v1/videos/{catalog['soup']['id']}", params={"lang": "ru"})

        data = response.json()
        assert data["views_label"] == "0 просмотров"
        assert data["uploaded_at"] == "Только что"


class TestSearch:
    """Test cases for GET /v1/videos/search."""

    @pytest.fixture
    def uploaded(self, signup, upload_video):
        headers, _ = signup("alice")
        return [
            upload_video(headers, title="Minecraft Speedrun", tags="gaming"),
            upload_video(headers, title="Borscht", description="Beet soup recipe", tags="cooking"),
        ]

    def test_search_title(self, client, uploaded):
        response = client.get("/v1/videos/search", params={"q": "MINECRAFT"})

        data = response.json()
        assert data["total"] == 1
        assert data["query"] == "MINECRAFT"
        assert data["message"] is None
        assert data["videos"][0]["id"] == uploaded[0]["id"]

    def test_search_description_and_tags(self, client, uploaded):
        assert client.get("/v1/videos/search", params={"q": "beet"}).json()["total"] == 1
        assert client.get("/v1/videos/search", params={"q": "cooking"}).json()["total"] == 1

    def test_blank_query(self, client, uploaded):
        response = client.get("/v1/videos/search", params={"q": "  "})
        assert response.json()["total"] == 0

    def test_no_results_message(self, client, uploaded):
        response = client.get("/v1/videos/search", params={"q": "zzz"})

        data = response.json()
        assert data["videos"] == []
        assert data["message"] == t("noResultsFoundFor", "en", query="zzz")

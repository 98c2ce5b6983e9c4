"""Tests for channel pages, profile edits and subscriptions."""
import re

from videoshare.core.i18n import t


class TestChannelPage:
    """Test cases for GET /v1/channels/{id}."""

    def test_channel_header(self, client, signup, upload_video):
        headers, user = signup("alice")
        upload_video(headers)

        response = client.get(f"/v1/channels/{user['id']}")

        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "alice"
        assert data["subscribers"] == 0
        assert data["is_verified"] is False
        assert data["is_subscribed"] is False
        assert data["video_count"] == 1

    def test_channel_page_for_signed_in_viewer(self, client, signup):
        """A viewer token marks channels the viewer follows."""
        _, channel = signup("alice")
        headers, _ = signup("bob")
        client.post(f"/v1/channels/{channel['id']}/subscription", headers=headers)

        response = client.get(f"/v1/channels/{channel['id']}", headers=headers)

        assert response.status_code == 200
        assert response.json()["is_subscribed"] is True
        assert response.json()["subscribers"] == 1

    def test_mutual_subscriptions(self, client, signup):
        """Channels that follow each other load with their own subscriptions."""
        alice_headers, alice = signup("alice")
        bob_headers, bob = signup("bob")
        client.post(f"/v1/channels/{bob['id']}/subscription", headers=alice_headers)
        client.post(f"/v1/channels/{alice['id']}/subscription", headers=bob_headers)

        page = client.get(f"/v1/channels/{bob['id']}", headers=alice_headers)
        alice_me = client.get("/v1/auth/me", headers=alice_headers)
        bob_me = client.get("/v1/auth/me", headers=bob_headers)

        assert page.status_code == 200
        assert page.json()["is_subscribed"] is True
        assert alice_me.json()["subscriptions"] == [bob["id"]]
        assert bob_me.json()["subscriptions"] == [alice["id"]]

    def test_unknown_channel(self, client):
        response = client.get("/v1/channels/user_missing")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == t("channelNotFound", "en")

    def test_channel_videos_newest_first(self, client, signup, upload_video):
        headers, user = signup("alice")
        first = upload_video(headers, title="First")
        second = upload_video(headers, title="Second")
        other_headers, _ = signup("bob")
        upload_video(other_headers, title="Not mine")

        response = client.get(f"/v1/channels/{user['id']}/videos")

        ids = [v["id"] for v in response.json()["videos"]]
        assert ids == [second["id"], first["id"]]


class TestSubscriptions:
    """Test cases for the subscribe toggle."""

    def test_subscribe_and_unsubscribe(self, client, signup):
        """Toggling twice restores the original state and count."""
        _, channel = signup("alice")
        headers, _ = signup("bob")
        url = f"/v1/channels/{channel['id']}/subscription"

        response = client.post(url, headers=headers)
        assert response.json() == {"channel_id": channel["id"], "is_subscribed": True, "subscribers": 1}
        assert client.get("/v1/auth/me", headers=headers).json()["subscriptions"] == [channel["id"]]
        page = client.get(f"/v1/channels/{channel['id']}", headers=headers).json()
        assert page["is_subscribed"] is True

        response = client.post(url, headers=headers)
        assert response.json()["is_subscribed"] is False
        assert response.json()["subscribers"] == 0
        assert client.get("/v1/auth/me", headers=headers).json()["subscriptions"] == []

    def test_self_subscription_is_noop(self, client, signup):
        headers, user = signup("alice")

        response = client.post(f"/v1/channels/{user['id']}/subscription", headers=headers)

        assert response.status_code == 200
        assert response.json()["is_subscribed"] is False
        assert response.json()["subscribers"] == 0
        assert client.get("/v1/auth/me", headers=headers).json()["subscriptions"] == []

    def test_subscription_requires_login(self, client, signup):
        _, channel = signup("alice")

        response = client.post(f"/v1/channels/{channel['id']}/subscription")

        assert response.status_code == 401

    def test_list_my_subscriptions(self, client, signup):
        _, alice = signup("alice")
        _, carol = signup("carol")
        headers, _ = signup("bob")
        client.post(f"/v1/channels/{alice['id']}/subscription", headers=headers)
        client.post(f"/v1/channels/{carol['id']}/subscription", headers=headers)

        response = client.get("/v1/channels/me/subscriptions", headers=headers)

        assert response.status_code == 200
        channels = response.json()
        assert {c["username"] for c in channels} == {"alice", "carol"}
        assert all(c["is_subscribed"] for c in channels)


class TestProfileUpdate:
    """Test cases for PATCH /v1/channels/me."""

    def test_rename_updates_videos(self, client, signup, upload_video):
        """Videos read the channel name from the owner."""
        headers, _ = signup("alice")
        video = upload_video(headers)

        response = client.patch(
            "/v1/channels/me",
            headers=headers,
            json={"username": "Alice TV", "avatar_url": "https://picsum.photos/seed/new/48/48"}
        )

        assert response.status_code == 200
        assert response.json()["username"] == "Alice TV"
        refreshed = client.get(f"/v1/videos/{video['id']}").json()
        assert refreshed["channel_name"] == "Alice TV"
        assert refreshed["channel_avatar_url"] == "https://picsum.photos/seed/new/48/48"

    def test_taken_username_suggestions(self, client, signup):
        signup("bob")
        headers, _ = signup("alice")

        response = client.patch("/v1/channels/me", headers=headers, json={"username": "Bob"})

        assert response.status_code == 409
        error = response.json()["error"]
        suggestions = error["details"]["suggestions"]
        assert len(suggestions) == 3
        assert re.fullmatch(r"Bob\d{1,2}", suggestions[0])
        assert re.fullmatch(r"Bob_\d", suggestions[1])
        assert suggestions[2] == "TheBob"
        assert error["message"] == t(
            "usernameTakenSuggestions", "en", username="Bob", suggestions=", ".join(suggestions)
        )

    def test_case_change_of_own_name(self, client, signup):
        headers, _ = signup("alice")

        response = client.patch("/v1/channels/me", headers=headers, json={"username": "ALICE"})

        assert response.status_code == 200
        assert response.json()["username"] == "ALICE"

    def test_short_username(self, client, signup):
        headers, _ = signup("alice")

        response = client.patch("/v1/channels/me", headers=headers, json={"username": "al"})

        assert response.status_code == 422

    def test_banner_cleared(self, client, signup):
        headers, _ = signup("alice")
        client.patch("/v1/channels/me", headers=headers, json={"banner_url": "https://example.com/b.png"})

        response = client.patch("/v1/channels/me", headers=headers, json={"banner_url": ""})

        assert response.json()["banner_url"] is None

    def test_avatar_upload(self, client, signup):
        headers, _ = signup("alice")

        response = client.post(
            "/v1/channels/me/avatar",
            headers=headers,
            files={"file": ("me.png", b"png", "image/png")}
        )

        assert response.status_code == 200
        avatar_url = response.json()["avatar_url"]
        assert avatar_url.startswith("/media/avatars/")
        assert client.get(avatar_url).content == b"png"

    def test_banner_upload_rejects_video(self, client, signup):
        headers, _ = signup("alice")

        response = client.post(
            "/v1/channels/me/banner",
            headers=headers,
            files={"file": ("banner.mp4", b"data", "video/mp4")}
        )

        assert response.status_code == 422

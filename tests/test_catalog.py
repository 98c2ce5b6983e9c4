"""Tests for catalog queries."""
import random
import re

import pytest

from videoshare.core import catalog


@pytest.fixture
def videos(make_video):
    """Small catalog in listing order."""
    return [
        make_video("v1", "Minecraft Speedrun", "Спидран", tags=["gaming"], channel_name="GameMaster"),
        make_video("v2", "Pasta Night", "Паста", description_en="Easy dinner", tags=["cooking"]),
        make_video("v3", "Jump", "Прыжок", tags=["gaming"], is_shorts=True),
        make_video("v4", "Synth DIY", "Синтезатор", tags=["tech", "music"], channel_name="TechTalks"),
    ]


class TestSearch:
    """Test cases for search_videos."""

    def test_matches_title_case_insensitive(self, videos):
        assert [v.id for v in catalog.search_videos(videos, "minecraft")] == ["v1"]

    def test_matches_russian_title(self, videos):
        assert [v.id for v in catalog.search_videos(videos, "паста")] == ["v2"]

    def test_matches_description_and_tags(self, videos):
        assert [v.id for v in catalog.search_videos(videos, "DINNER")] == ["v2"]
        assert [v.id for v in catalog.search_videos(videos, "gam")] == ["v1", "v3"]

    def test_blank_query_returns_nothing(self, videos):
        """Empty or whitespace-only queries match no videos."""
        assert catalog.search_videos(videos, "") == []
        assert catalog.search_videos(videos, "   ") == []
        assert catalog.search_videos(videos, None) == []


class TestCategories:
    """Test cases for home feed filtering."""

    def test_resolve_category(self):
        assert catalog.resolve_category("gaming") == "Gaming"
        assert catalog.resolve_category("AI") == "AI"
        assert catalog.resolve_category("") == "All"
        assert catalog.resolve_category("Sports") is None

    def test_all_keeps_everything(self, videos):
        assert len(catalog.filter_by_category(videos, "All")) == 4

    def test_category_matches_lowercased_tag(self, videos):
        assert [v.id for v in catalog.filter_by_category(videos, "Music")] == ["v4"]
        assert [v.id for v in catalog.filter_by_category(videos, "Gaming")] == ["v1", "v3"]

    def test_shuffle_keeps_items(self, videos):
        shuffled = catalog.shuffle_videos(videos, rng=random.Random(7))
        assert sorted(v.id for v in shuffled) == ["v1", "v2", "v3", "v4"]
        # Input order is untouched
        assert [v.id for v in videos] == ["v1", "v2", "v3", "v4"]


class TestFeeds:
    """Test cases for related videos, shorts and history filtering."""

    def test_related_excludes_current_and_shorts(self, videos):
        related = catalog.related_videos(videos, current_id="v1")
        assert [v.id for v in related] == ["v2", "v4"]

    def test_related_respects_limit(self, make_video):
        many = [make_video(f"v{i}") for i in range(15)]
        related = catalog.related_videos(many, current_id="v0", limit=10)
        assert len(related) == 10
        assert related[0].id == "v1"

    def test_related_zero_limit(self, videos):
        assert catalog.related_videos(videos, current_id="v1", limit=0) == []

    def test_shorts_feed(self, videos):
        assert [v.id for v in catalog.shorts_feed(videos)] == ["v3"]

    def test_filter_history_by_title_and_channel(self, videos):
        assert [v.id for v in catalog.filter_history(videos, "synth")] == ["v4"]
        assert [v.id for v in catalog.filter_history(videos, "gamemaster")] == ["v1"]
        assert [v.id for v in catalog.filter_history(videos, "прыж")] == ["v3"]
        assert len(catalog.filter_history(videos, "")) == 4

    def test_filter_history_ignores_description(self, videos):
        assert catalog.filter_history(videos, "dinner") == []


class TestUploadDefaults:
    """Test cases for values filled in at upload time."""

    def test_shorts_duration_range(self):
        rng = random.Random(1)
        for _ in range(50):
            duration = catalog.placeholder_duration(True, rng=rng)
            minutes, seconds = duration.split(":")
            assert minutes == "0"
            assert 15 <= int(seconds) <= 59

    def test_regular_duration_format(self):
        rng = random.Random(2)
        for _ in range(50):
            assert re.fullmatch(r"[0-9]:[0-5][0-9]", catalog.placeholder_duration(False, rng=rng))

    @pytest.mark.parametrize("content_type,expected", [
        ("audio/mpeg", "audio"),
        ("AUDIO/ogg", "audio"),
        ("video/mp4", "video"),
        (None, "video"),
    ])
    def test_detect_media_type(self, content_type, expected):
        assert catalog.detect_media_type(content_type) == expected

    def test_default_thumbnail(self):
        assert re.fullmatch(
            r"https://picsum\.photos/seed/thumb_\d+/360/202",
            catalog.default_thumbnail_url()
        )

    def test_username_suggestions(self):
        """Three alternatives: numbered, underscored and prefixed."""
        suggestions = catalog.username_suggestions("alice", rng=random.Random(3))
        assert len(suggestions) == 3
        assert re.fullmatch(r"alice\d{1,2}", suggestions[0])
        assert re.fullmatch(r"alice_\d", suggestions[1])
        assert suggestions[2] == "Thealice"

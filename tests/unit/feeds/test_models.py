"""Tests for channel and episode models."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from feedsmith.feeds.models import Channel, ChannelMetadata, Episode


def make_episode(**overrides) -> Episode:
    data = {
        "id": "12345678",
        "title": "Episodio",
        "url": "https://ivoox.com/episodio_rf_12345678_1.html",
        "audio_url": "https://www.ivoox.com/listenembeded_mn_12345678_1.mp3",
        "published": datetime(2021, 3, 5),
    }
    data.update(overrides)
    return Episode(**data)


class TestEpisode:
    """Tests for Episode model."""

    def test_defaults(self) -> None:
        """Optional fields default to empty values."""
        episode = make_episode()

        assert episode.description == ""
        assert episode.image_url is None

    def test_empty_id_rejected(self) -> None:
        """Every episode needs an id."""
        with pytest.raises(ValidationError):
            make_episode(id="")

    def test_empty_audio_url_rejected(self) -> None:
        """Every episode needs a playback URL."""
        with pytest.raises(ValidationError):
            make_episode(audio_url="")

    def test_frozen(self) -> None:
        """Episodes cannot be changed after construction."""
        episode = make_episode()

        with pytest.raises(ValidationError):
            episode.title = "Otro"  # type: ignore[misc]


class TestChannel:
    """Tests for Channel model."""

    def test_from_parts(self) -> None:
        """Metadata and episodes combine; page HTML is dropped."""
        metadata = ChannelMetadata(
            name="Show",
            author="Autor",
            site_url="https://ivoox.com/show",
            page_html="<html></html>",
        )
        episodes = [make_episode(id="11111111"), make_episode(id="22222222")]

        channel = Channel.from_parts(metadata, episodes)

        assert channel.name == "Show"
        assert channel.author == "Autor"
        assert channel.ttl_minutes == 60
        assert channel.episodes == tuple(episodes)
        assert "page_html" not in channel.model_dump()

    def test_metadata_dump_excludes_page_html(self) -> None:
        """Page HTML never ends up in serialized metadata."""
        metadata = ChannelMetadata(name="Show", site_url="https://x", page_html="<p>big</p>")

        assert "page_html" not in metadata.model_dump()
        assert "big" not in repr(metadata)

    def test_frozen(self) -> None:
        """Channels cannot be changed after construction."""
        channel = Channel(name="Show", site_url="https://x")

        with pytest.raises(ValidationError):
            channel.name = "Other"  # type: ignore[misc]

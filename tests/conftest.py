"""Shared test fixtures."""

from unittest.mock import AsyncMock

import pytest

from youtube_mcp.models import Transcript, TranscriptSegment
from youtube_mcp.services import YouTubeServices


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the host's YouTube settings out of every test."""
    for name in ("YOUTUBE_API_KEY", "YOUTUBE_TRANSCRIPT_LANG", "YOUTUBE_MCP_TRANSPORT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_segments():
    return [
        TranscriptSegment(text="Hello world", start=0.0, duration=2.5),
        TranscriptSegment(text="this is a test", start=2.5, duration=3.0),
        TranscriptSegment(text="of the transcript", start=5.5, duration=2.0),
    ]


@pytest.fixture
def sample_transcript(sample_segments):
    return Transcript(
        video_id="dQw4w9WgXcQ",
        language="en",
        is_generated=False,
        segments=sample_segments,
        text="Hello world this is a test of the transcript",
    )


def make_stub_services() -> YouTubeServices:
    """Services whose methods are AsyncMocks returning fixed data.

    ``transcripts.get_transcript`` echoes the arguments it received.
    """
    videos = AsyncMock()
    videos.get_video.return_value = {
        "id": "dQw4w9WgXcQ",
        "snippet": {"title": "Test video"},
        "url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    }
    videos.search_videos.return_value = [
        {"id": {"videoId": "dQw4w9WgXcQ"}, "url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ"}
    ]

    transcripts = AsyncMock()
    transcripts.get_transcript.side_effect = lambda video_id, language: {
        "videoId": video_id,
        "language": language,
    }

    channels = AsyncMock()
    channels.get_channel.return_value = {"id": "UC123", "snippet": {"title": "Test channel"}}
    channels.list_videos.return_value = [{"id": {"videoId": "vid00000001"}}]

    playlists = AsyncMock()
    playlists.get_playlist.return_value = {"id": "PL123", "snippet": {"title": "Test playlist"}}
    playlists.get_playlist_items.return_value = [{"contentDetails": {"videoId": "vid00000001"}}]

    return YouTubeServices(
        videos=videos,
        transcripts=transcripts,
        channels=channels,
        playlists=playlists,
    )


@pytest.fixture
def stub_services():
    return make_stub_services()


@pytest.fixture
def stub_factory():
    return make_stub_services

"""Tests for the transcript service with mocked youtube-transcript-api."""

from unittest.mock import MagicMock, patch

import pytest
from youtube_transcript_api import NoTranscriptFound, TranscriptsDisabled

from youtube_mcp.errors import TranscriptUnavailableError
from youtube_mcp.services.transcripts import TranscriptService


class MockSnippet:
    def __init__(self, text, start, duration):
        self.text = text
        self.start = start
        self.duration = duration


class MockFetched:
    def __init__(self, snippets, language_code="en", is_generated=False):
        self.snippets = snippets
        self.language_code = language_code
        self.is_generated = is_generated

    def __iter__(self):
        return iter(self.snippets)


@pytest.fixture
def mock_fetched():
    return MockFetched([MockSnippet("Hello", 0.0, 2.0), MockSnippet("World", 2.0, 3.0)])


class TestTranscriptService:
    @pytest.mark.asyncio
    async def test_get_transcript_success(self, mock_fetched):
        service = TranscriptService()
        with patch.object(service, "_fetch", return_value=mock_fetched):
            result = await service.get_transcript("dQw4w9WgXcQ", "en")
        assert result.video_id == "dQw4w9WgXcQ"
        assert result.language == "en"
        assert len(result.segments) == 2
        assert result.segments[0].text == "Hello"
        assert result.text == "Hello World"

    @pytest.mark.asyncio
    async def test_serializes_camel_case(self, mock_fetched):
        service = TranscriptService()
        with patch.object(service, "_fetch", return_value=mock_fetched):
            result = await service.get_transcript("dQw4w9WgXcQ", "en")
        data = result.model_dump(by_alias=True)
        assert data["videoId"] == "dQw4w9WgXcQ"
        assert data["isGenerated"] is False

    @pytest.mark.asyncio
    async def test_reports_fetched_language(self):
        service = TranscriptService()
        fetched = MockFetched([MockSnippet("Hi", 0.0, 1.0)], language_code="en", is_generated=True)
        with patch.object(service, "_fetch", return_value=fetched):
            result = await service.get_transcript("dQw4w9WgXcQ", "de")
        assert result.language == "en"
        assert result.is_generated is True

    @pytest.mark.asyncio
    async def test_url_is_normalized(self, mock_fetched):
        service = TranscriptService()
        fetch = MagicMock(return_value=mock_fetched)
        with patch.object(service, "_fetch", fetch):
            await service.get_transcript("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=30", "en")
        fetch.assert_called_once_with("dQw4w9WgXcQ", "en")

    @pytest.mark.asyncio
    async def test_transcripts_disabled(self):
        service = TranscriptService()
        with patch.object(service, "_fetch", side_effect=TranscriptsDisabled("vid123456789")):
            with pytest.raises(TranscriptUnavailableError, match="No transcript available"):
                await service.get_transcript("vid123456789", "en")

    @pytest.mark.asyncio
    async def test_no_transcript_found(self):
        service = TranscriptService()
        error = NoTranscriptFound("vid123456789", ["xx"], MagicMock())
        with patch.object(service, "_fetch", side_effect=error):
            with pytest.raises(TranscriptUnavailableError):
                await service.get_transcript("vid123456789", "xx")

    def test_fetch_falls_back_to_english(self):
        service = TranscriptService()
        with patch("youtube_mcp.services.transcripts.YouTubeTranscriptApi") as MockApi:
            service._fetch("dQw4w9WgXcQ", "de")
        MockApi.return_value.fetch.assert_called_once_with("dQw4w9WgXcQ", languages=["de", "en"])

    def test_fetch_closes_its_session(self):
        service = TranscriptService()
        with patch("youtube_mcp.services.transcripts.requests.Session") as MockSession, \
                patch("youtube_mcp.services.transcripts.YouTubeTranscriptApi") as MockApi:
            service._fetch("dQw4w9WgXcQ", "en")
        session = MockSession.return_value.__enter__.return_value
        MockApi.assert_called_once_with(http_client=session)
        MockSession.return_value.__exit__.assert_called_once()

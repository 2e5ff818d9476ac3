"""Transcript fetching using youtube-transcript-api."""

import asyncio
import logging

import requests
from youtube_transcript_api import CouldNotRetrieveTranscript, YouTubeTranscriptApi

from youtube_mcp.config import DEFAULT_TRANSCRIPT_LANGUAGE
from youtube_mcp.errors import TranscriptUnavailableError
from youtube_mcp.models import Transcript, TranscriptSegment
from youtube_mcp.utils import normalize_video_id

logger = logging.getLogger(__name__)


class TranscriptService:
    async def get_transcript(self, video_id: str, language: str) -> Transcript:
        video_id = normalize_video_id(video_id)
        loop = asyncio.get_running_loop()
        try:
            fetched = await loop.run_in_executor(None, self._fetch, video_id, language)
        except CouldNotRetrieveTranscript as e:
            raise TranscriptUnavailableError(
                f"No transcript available for {video_id}: {e}"
            ) from e

        segments = [
            TranscriptSegment(text=s.text, start=s.start, duration=s.duration)
            for s in fetched
        ]
        return Transcript(
            video_id=video_id,
            language=fetched.language_code,
            is_generated=fetched.is_generated,
            segments=segments,
            text=" ".join(s.text for s in segments),
        )

    def _fetch(self, video_id: str, language: str):
        """Synchronous fetch in executor, on a session closed before returning."""
        logger.debug(f"Fetching transcript {video_id} ({language})")
        with requests.Session() as session:
            api = YouTubeTranscriptApi(http_client=session)
            return api.fetch(video_id, languages=[language, DEFAULT_TRANSCRIPT_LANGUAGE])

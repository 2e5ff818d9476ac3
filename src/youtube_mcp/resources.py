"""MCP resources: transcripts by URI and a usage guide."""

from youtube_mcp.config import EffectiveConfig
from youtube_mcp.registry import ResourceEntry
from youtube_mcp.services import YouTubeServices
from youtube_mcp.utils import to_json_text

TRANSCRIPT_URI = "youtube://transcript/{videoId}"
HELP_URI = "youtube://help"

HELP_TEXT = """# YouTube MCP Server - Help Guide

## Available Tools

### videos_getVideo
Details, statistics and URL of one video.
- Example: videos_getVideo(videoId="dQw4w9WgXcQ", parts=["snippet", "statistics"])

### videos_searchVideos
Search YouTube for videos.
- Example: videos_searchVideos(query="python asyncio", maxResults=5)

### transcripts_getTranscript
Timestamped transcript of a video. Without `language` the server default is used.
- Example: transcripts_getTranscript(videoId="dQw4w9WgXcQ", language="de")

### channels_getChannel / channels_listVideos
Channel information and its most recent uploads.
- Example: channels_listVideos(channelId="UC_x5XG1OV2P6uZZ5FSM9Ttw", maxResults=10)

### playlists_getPlaylist / playlists_getPlaylistItems
Playlist information and the videos it contains.
- Example: playlists_getPlaylistItems(playlistId="PL...", maxResults=25)

## Resources
- youtube://transcript/{videoId} - transcript as JSON
- youtube://help - this guide

## Tips
- maxResults accepts 1-50
- Tools other than transcripts need a YouTube Data API key (YOUTUBE_API_KEY or apiKey in the server config)
"""


def build_resources(services: YouTubeServices, config: EffectiveConfig) -> list[ResourceEntry]:
    async def transcript(videoId: str) -> str:
        result = await services.transcripts.get_transcript(videoId, config.transcript_language)
        return to_json_text(result)

    def help_guide() -> str:
        return HELP_TEXT

    return [
        ResourceEntry(
            "transcript",
            TRANSCRIPT_URI,
            "Transcript of a YouTube video in the server's default language",
            transcript,
        ),
        ResourceEntry(
            "help",
            HELP_URI,
            "Usage guide for the YouTube MCP server with examples for all tools",
            help_guide,
            mime_type="text/markdown",
        ),
    ]

"""The seven read-only YouTube tools.

Each handler makes exactly one service call and returns its result as a JSON
string, which FastMCP wraps in a single text content block. Service errors are
left to propagate so that the client sees a tool error, not a success payload.
"""

from typing import Annotated

from pydantic import Field

from youtube_mcp.config import EffectiveConfig
from youtube_mcp.registry import ToolEntry
from youtube_mcp.services import YouTubeServices
from youtube_mcp.utils import to_json_text

MAX_RESULTS_LIMIT = 50

VideoId = Annotated[str, Field(min_length=1, description="The YouTube video ID")]
ChannelId = Annotated[str, Field(min_length=1, description="The YouTube channel ID")]
PlaylistId = Annotated[str, Field(min_length=1, description="The YouTube playlist ID")]
MaxResults = Annotated[
    int | None,
    Field(ge=1, le=MAX_RESULTS_LIMIT, description="Maximum number of results to return"),
]


def build_tools(services: YouTubeServices, config: EffectiveConfig) -> list[ToolEntry]:
    """Tool entries bound to one server instance's services and config."""

    async def get_video(
        videoId: VideoId,
        parts: Annotated[
            list[str] | None,
            Field(description="Parts of the video to retrieve (e.g. snippet, statistics)"),
        ] = None,
    ) -> str:
        return to_json_text(await services.videos.get_video(videoId, parts))

    async def search_videos(
        query: Annotated[str, Field(min_length=1, description="Search query")],
        maxResults: MaxResults = None,
    ) -> str:
        return to_json_text(await services.videos.search_videos(query, maxResults))

    async def get_transcript(
        videoId: VideoId,
        language: Annotated[
            str | None,
            Field(description="Language code for the transcript (e.g. en, de, es). Defaults to the server's configured language"),
        ] = None,
    ) -> str:
        result = await services.transcripts.get_transcript(
            videoId, language or config.transcript_language
        )
        return to_json_text(result)

    async def get_channel(channelId: ChannelId) -> str:
        return to_json_text(await services.channels.get_channel(channelId))

    async def list_channel_videos(channelId: ChannelId, maxResults: MaxResults = None) -> str:
        return to_json_text(await services.channels.list_videos(channelId, maxResults))

    async def get_playlist(playlistId: PlaylistId) -> str:
        return to_json_text(await services.playlists.get_playlist(playlistId))

    async def get_playlist_items(playlistId: PlaylistId, maxResults: MaxResults = None) -> str:
        return to_json_text(
            await services.playlists.get_playlist_items(playlistId, maxResults)
        )

    return [
        ToolEntry(
            "videos_getVideo",
            "Get Video Details",
            "Get detailed information about a YouTube video including URL",
            get_video,
        ),
        ToolEntry(
            "videos_searchVideos",
            "Search Videos",
            "Search for videos on YouTube and return results with URLs",
            search_videos,
        ),
        ToolEntry(
            "transcripts_getTranscript",
            "Get Video Transcript",
            "Get the transcript of a YouTube video",
            get_transcript,
        ),
        ToolEntry(
            "channels_getChannel",
            "Get Channel Information",
            "Get information about a YouTube channel",
            get_channel,
        ),
        ToolEntry(
            "channels_listVideos",
            "List Channel Videos",
            "Get videos from a specific channel",
            list_channel_videos,
        ),
        ToolEntry(
            "playlists_getPlaylist",
            "Get Playlist Information",
            "Get information about a YouTube playlist",
            get_playlist,
        ),
        ToolEntry(
            "playlists_getPlaylistItems",
            "Get Playlist Items",
            "Get videos in a YouTube playlist",
            get_playlist_items,
        ),
    ]

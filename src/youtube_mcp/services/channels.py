"""Channel lookups."""

from youtube_mcp.services.api import YouTubeAPI
from youtube_mcp.utils import channel_url, video_url

DEFAULT_CHANNEL_VIDEOS = 50


class ChannelService:
    def __init__(self, api: YouTubeAPI):
        self._api = api

    async def get_channel(self, channel_id: str) -> dict:
        item = await self._api.get_single(
            "channels",
            "Channel",
            channel_id,
            part="snippet,statistics,contentDetails",
            id=channel_id,
        )
        return {**item, "url": channel_url(channel_id)}

    async def list_videos(self, channel_id: str, max_results: int | None = None) -> list[dict]:
        """Most recent uploads of a channel, newest first."""
        data = await self._api.get(
            "search",
            part="snippet",
            channelId=channel_id,
            order="date",
            type="video",
            maxResults=max_results or DEFAULT_CHANNEL_VIDEOS,
        )
        results = []
        for item in data.get("items", []):
            vid = item.get("id", {}).get("videoId")
            results.append({**item, "url": video_url(vid) if vid else None})
        return results

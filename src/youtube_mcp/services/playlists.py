"""Playlist lookups."""

from youtube_mcp.services.api import YouTubeAPI
from youtube_mcp.utils import playlist_url, video_url

DEFAULT_PLAYLIST_ITEMS = 50


class PlaylistService:
    def __init__(self, api: YouTubeAPI):
        self._api = api

    async def get_playlist(self, playlist_id: str) -> dict:
        item = await self._api.get_single(
            "playlists",
            "Playlist",
            playlist_id,
            part="snippet,contentDetails",
            id=playlist_id,
        )
        return {**item, "url": playlist_url(playlist_id)}

    async def get_playlist_items(
        self, playlist_id: str, max_results: int | None = None
    ) -> list[dict]:
        data = await self._api.get(
            "playlistItems",
            part="snippet,contentDetails",
            playlistId=playlist_id,
            maxResults=max_results or DEFAULT_PLAYLIST_ITEMS,
        )
        results = []
        for item in data.get("items", []):
            vid = item.get("contentDetails", {}).get("videoId")
            results.append({**item, "url": video_url(vid) if vid else None})
        return results

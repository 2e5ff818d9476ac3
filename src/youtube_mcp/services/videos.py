"""Video lookups and search."""

from youtube_mcp.services.api import YouTubeAPI
from youtube_mcp.utils import normalize_video_id, video_url

DEFAULT_VIDEO_PARTS = ["snippet", "contentDetails", "statistics"]
DEFAULT_SEARCH_RESULTS = 10


class VideoService:
    def __init__(self, api: YouTubeAPI):
        self._api = api

    async def get_video(self, video_id: str, parts: list[str] | None = None) -> dict:
        """Video resource for ``video_id`` (a bare ID or a watch URL), with its URL."""
        video_id = normalize_video_id(video_id)
        item = await self._api.get_single(
            "videos",
            "Video",
            video_id,
            part=",".join(parts or DEFAULT_VIDEO_PARTS),
            id=video_id,
        )
        return {**item, "url": video_url(video_id)}

    async def search_videos(self, query: str, max_results: int | None = None) -> list[dict]:
        data = await self._api.get(
            "search",
            part="snippet",
            q=query,
            type="video",
            maxResults=max_results or DEFAULT_SEARCH_RESULTS,
        )
        results = []
        for item in data.get("items", []):
            vid = item.get("id", {}).get("videoId")
            results.append({**item, "url": video_url(vid) if vid else None})
        return results

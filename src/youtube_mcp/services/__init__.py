"""YouTube data services used by the tool handlers."""

from dataclasses import dataclass

from youtube_mcp.config import EffectiveConfig
from .api import YouTubeAPI
from .channels import ChannelService
from .playlists import PlaylistService
from .transcripts import TranscriptService
from .videos import VideoService


@dataclass(frozen=True)
class YouTubeServices:
    videos: VideoService
    transcripts: TranscriptService
    channels: ChannelService
    playlists: PlaylistService

    @classmethod
    def from_config(cls, config: EffectiveConfig) -> "YouTubeServices":
        """Build all four services for one server instance. Performs no I/O."""
        api = YouTubeAPI(config)
        return cls(
            videos=VideoService(api),
            transcripts=TranscriptService(),
            channels=ChannelService(api),
            playlists=PlaylistService(api),
        )


__all__ = [
    "YouTubeAPI",
    "YouTubeServices",
    "VideoService",
    "TranscriptService",
    "ChannelService",
    "PlaylistService",
]

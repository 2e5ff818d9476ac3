"""Utility functions."""

import json
import re
from typing import Any

from pydantic_core import to_jsonable_python

WATCH_URL = "https://www.youtube.com/watch?v={}"
CHANNEL_URL = "https://www.youtube.com/channel/{}"
PLAYLIST_URL = "https://www.youtube.com/playlist?list={}"


def extract_video_id(url_or_id: str) -> str | None:
    """Extract YouTube video ID from URL or return as-is if valid ID."""
    patterns = [
        r"(?:v=|/v/|youtu\.be/)([a-zA-Z0-9_-]{11})",
        r"(?:embed/)([a-zA-Z0-9_-]{11})",
        r"(?:shorts/)([a-zA-Z0-9_-]{11})",
    ]
    for pattern in patterns:
        match = re.search(pattern, url_or_id)
        if match:
            return match.group(1)
    if re.match(r"^[a-zA-Z0-9_-]{11}$", url_or_id):
        return url_or_id
    return None


def normalize_video_id(url_or_id: str) -> str:
    """Video ID from a URL, or the input unchanged when no ID pattern matches."""
    return extract_video_id(url_or_id) or url_or_id.strip()


def video_url(video_id: str) -> str:
    return WATCH_URL.format(video_id)


def channel_url(channel_id: str) -> str:
    return CHANNEL_URL.format(channel_id)


def playlist_url(playlist_id: str) -> str:
    return PLAYLIST_URL.format(playlist_id)


def to_json_text(value: Any) -> str:
    """Serialize a service result (dicts, lists or pydantic models) as indented JSON."""
    return json.dumps(to_jsonable_python(value, by_alias=True), indent=2, ensure_ascii=False)

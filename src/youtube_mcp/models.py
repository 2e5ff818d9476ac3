"""Data models for transcript results."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TranscriptSegment(_CamelModel):
    text: str
    start: float
    duration: float


class Transcript(_CamelModel):
    video_id: str
    language: str
    is_generated: bool = False
    segments: list[TranscriptSegment] = []
    text: str = ""

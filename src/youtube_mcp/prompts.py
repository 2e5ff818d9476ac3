"""MCP prompt templates. Pure string templating, no I/O."""

from typing import Annotated

from mcp.server.fastmcp.prompts.base import Message, UserMessage
from pydantic import Field

from youtube_mcp.registry import PromptEntry


def summarize_video(
    videoId: Annotated[str, Field(description="YouTube video ID to summarize")],
) -> list[Message]:
    return [
        UserMessage(
            f"Please use the videos_getVideo tool to fetch the details of YouTube video {videoId}, "
            f"then the transcripts_getTranscript tool to fetch its transcript."
        ),
        UserMessage(
            """Then provide a comprehensive summary including:
1. Main topic and key points
2. Important quotes or statements
3. A brief conclusion

Keep the summary concise but informative."""
        ),
    ]


def analyze_channel(
    channelId: Annotated[str, Field(description="YouTube channel ID to analyze")],
) -> list[Message]:
    return [
        UserMessage(
            f"Please use the channels_getChannel tool to fetch information about YouTube channel {channelId}, "
            f"then the channels_listVideos tool to fetch its recent uploads."
        ),
        UserMessage(
            """Then analyze the channel:
1. What topics does the channel cover?
2. How often does it publish?
3. Which recent videos stand out and why?
4. Who is the likely audience?"""
        ),
    ]


def compare_videos(
    videoId1: Annotated[str, Field(description="First YouTube video ID to compare")],
    videoId2: Annotated[str, Field(description="Second YouTube video ID to compare")],
) -> list[Message]:
    return [
        UserMessage(
            f"""Please use the transcripts_getTranscript tool to fetch transcripts for these two videos:
- Video 1: {videoId1}
- Video 2: {videoId2}"""
        ),
        UserMessage(
            """Then compare them:
1. What topics does each video cover?
2. Where do they agree or disagree?
3. Which provides more depth on the subject?
4. Key differences in perspective or approach"""
        ),
    ]


PROMPTS = [
    PromptEntry(
        "summarize_video",
        "Summarize Video",
        "Generate a comprehensive summary of a YouTube video from its details and transcript",
        summarize_video,
    ),
    PromptEntry(
        "analyze_channel",
        "Analyze Channel",
        "Analyze a YouTube channel's content and recent uploads",
        analyze_channel,
    ),
    PromptEntry(
        "compare_videos",
        "Compare Videos",
        "Compare the content of two YouTube videos side by side",
        compare_videos,
    ),
]

"""
Video Metadata Domain Model
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class VideoMetadata:
    """
    Title and description of a single YouTube video.
    video_id is the identifier that was requested, not the one echoed back.
    """
    video_id: str
    title: str
    description: str

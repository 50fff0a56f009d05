"""
YouTube API integration module
"""

from .video_info import VideoMetadata
from .youtube_client import YouTubeClient

__all__ = ["VideoMetadata", "YouTubeClient"]

"""
YouTube API Client
Looks up a single video's snippet through the YouTube Data API v3.
"""

import logging

import httplib2
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import HttpRequest

from .video_info import VideoMetadata
from ..config.app_config import DEFAULT_TIMEOUT, DEFAULT_YOUTUBE_BASE_URL
from ..errors import ConnectionFailedError, HttpStatusError, NotFoundError, ParseError

logger = logging.getLogger(__name__)

# Method path from the bundled discovery document, relative to the API root
VIDEOS_PATH = "youtube/v3/videos"


class YouTubeClient:
    """
    YouTube Data API client for video metadata lookups.

    One videos.list request per lookup; no retries, no pagination.
    base_url is the API root (e.g. https://www.googleapis.com/); the
    discovery document supplies the youtube/v3/ path.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_YOUTUBE_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT
    ):
        """Initialize the YouTube API service."""
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._http = httplib2.Http(timeout=timeout)
        # static_discovery uses the bundled discovery document, so building
        # the service performs no network I/O
        self._service = build(
            'youtube',
            'v3',
            developerKey=api_key,
            http=self._http,
            client_options={"api_endpoint": self._base_url},
            static_discovery=True
        )

    @property
    def videos_url(self) -> str:
        return self._base_url + VIDEOS_PATH

    def build_video_request(self, video_id: str) -> HttpRequest:
        """Prepare the videos.list request without sending it."""
        return self._service.videos().list(part="snippet", id=video_id)

    def fetch_video_info(self, video_id: str) -> VideoMetadata:
        """
        Fetch title and description for a single video.

        Raises:
            ConnectionFailedError: On DNS, connection or timeout failures
            HttpStatusError: If the API answers with a non-success status
            ParseError: If the response body is not the expected JSON shape
            NotFoundError: If the response contains no items
        """
        logger.info(f"Fetching video metadata for: {video_id}")
        try:
            response = self.build_video_request(video_id).execute(num_retries=0)
        except HttpError as e:
            raise HttpStatusError(int(e.resp.status), self.videos_url) from e
        except (httplib2.HttpLib2Error, OSError) as e:
            raise ConnectionFailedError(self.videos_url, str(e)) from e
        finally:
            self._http.close()

        if not isinstance(response, dict):
            raise ParseError(
                f"Expected a JSON object, got {type(response).__name__}",
                self.videos_url
            )

        items = response.get("items") or []
        if not isinstance(items, list):
            raise ParseError("Field 'items' must be a list", self.videos_url)
        if not items:
            raise NotFoundError(video_id)

        item = items[0]
        if not isinstance(item, dict):
            raise ParseError(f"Unexpected video item: {item!r}", self.videos_url)

        snippet = item.get("snippet") or {}
        if not isinstance(snippet, dict):
            raise ParseError(f"Unexpected snippet: {snippet!r}", self.videos_url)

        echoed_id = item.get("id")
        if echoed_id and echoed_id != video_id:
            logger.debug(f"API echoed video ID {echoed_id!r} for request {video_id!r}")

        return VideoMetadata(
            video_id=video_id,
            title=snippet.get("title", ""),
            description=snippet.get("description", "")
        )

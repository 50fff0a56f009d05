"""
Application Configuration Model
Credentials and target video for a single lookup run
"""

DEFAULT_TIMEOUT = 10.0
DEFAULT_YOUTUBE_BASE_URL = "https://www.googleapis.com/"
DEFAULT_DEEPL_BASE_URL = "https://api-free.deepl.com/v2"


class AppConfig:
    """
    Immutable configuration object for the Lookup Pipeline.

    Field values are taken as-is from the config file; empty keys or
    identifiers are left for the API clients to reject.
    """

    def __init__(
        self,
        deepl_api_key: str = "",
        youtube_api_key: str = "",
        youtube_video_id: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        youtube_base_url: str = DEFAULT_YOUTUBE_BASE_URL,
        deepl_base_url: str = DEFAULT_DEEPL_BASE_URL
    ):
        """
        Initialize AppConfig.

        Args:
            deepl_api_key: DeepL authentication key
            youtube_api_key: YouTube Data API key
            youtube_video_id: ID of the video to look up
            timeout: Connect/read timeout in seconds for every HTTP call
            youtube_base_url: Root URL of the YouTube Data API
            deepl_base_url: Base URL of the DeepL v2 API
        """
        self._deepl_api_key = deepl_api_key
        self._youtube_api_key = youtube_api_key
        self._youtube_video_id = youtube_video_id
        self._timeout = timeout
        self._youtube_base_url = youtube_base_url
        self._deepl_base_url = deepl_base_url

    @property
    def deepl_api_key(self) -> str:
        """DeepL API key."""
        return self._deepl_api_key

    @property
    def youtube_api_key(self) -> str:
        """YouTube API key."""
        return self._youtube_api_key

    @property
    def youtube_video_id(self) -> str:
        """Identifier of the video to look up."""
        return self._youtube_video_id

    @property
    def timeout(self) -> float:
        """HTTP timeout in seconds."""
        return self._timeout

    @property
    def youtube_base_url(self) -> str:
        return self._youtube_base_url

    @property
    def deepl_base_url(self) -> str:
        return self._deepl_base_url

    def with_timeout(self, timeout: float) -> "AppConfig":
        """Return a copy of this configuration with a different timeout."""
        return AppConfig(
            deepl_api_key=self._deepl_api_key,
            youtube_api_key=self._youtube_api_key,
            youtube_video_id=self._youtube_video_id,
            timeout=timeout,
            youtube_base_url=self._youtube_base_url,
            deepl_base_url=self._deepl_base_url
        )

    def __repr__(self) -> str:
        """String representation for debugging. API keys are never shown."""
        return (
            f"AppConfig(youtube_video_id={self.youtube_video_id!r}, "
            f"timeout={self.timeout}, "
            f"youtube_base_url={self.youtube_base_url!r}, "
            f"deepl_base_url={self.deepl_base_url!r})"
        )

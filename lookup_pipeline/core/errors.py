"""
Error taxonomy for the Lookup Pipeline
Every failure carries an ErrorKind plus the context needed to report it.
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Union


class ErrorKind(Enum):
    """Tag identifying which step of the pipeline failed and how."""
    READ = "read"
    PARSE = "parse"
    CONNECTION = "connection"
    HTTP_STATUS = "http_status"
    NOT_FOUND = "not_found"
    NO_TRANSLATION = "no_translation"


class LookupPipelineError(Exception):
    """Base class for all errors raised by the pipeline."""
    kind: ErrorKind


class ReadError(LookupPipelineError):
    """Raised when the configuration file cannot be opened or read."""
    kind = ErrorKind.READ

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        message = f"Cannot read configuration file: {self.path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ParseError(LookupPipelineError):
    """Raised when content is not valid structured data or has the wrong shape."""
    kind = ErrorKind.PARSE

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{message} [{source}]"
        super().__init__(message)


class ConnectionFailedError(LookupPipelineError):
    """Raised on transport-level failures: DNS, refused connection, timeout."""
    kind = ErrorKind.CONNECTION

    def __init__(self, url: str, reason: str = ""):
        self.url = url
        self.reason = reason
        message = f"Connection to {url} failed"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class HttpStatusError(LookupPipelineError):
    """Raised when a service answers with a non-success HTTP status."""
    kind = ErrorKind.HTTP_STATUS

    def __init__(self, status_code: int, url: str = ""):
        self.status_code = status_code
        self.url = url
        message = f"HTTP request failed with status code: {status_code}"
        if url:
            message += f" ({url})"
        super().__init__(message)


class NotFoundError(LookupPipelineError):
    """Raised when a video lookup succeeds but returns no items."""
    kind = ErrorKind.NOT_FOUND

    def __init__(self, video_id: str):
        self.video_id = video_id
        super().__init__(f"Video with ID {video_id!r} not found")


class NoTranslationError(LookupPipelineError):
    """Raised when a translate call succeeds but returns no translations."""
    kind = ErrorKind.NO_TRANSLATION

    def __init__(self, target_lang: str = ""):
        self.target_lang = target_lang
        message = "No translations found"
        if target_lang:
            message += f" for target language {target_lang}"
        super().__init__(message)

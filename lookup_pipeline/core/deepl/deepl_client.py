"""
DeepL API Client
Supported-language listing and single-segment text translation.
"""

import logging
from typing import Any, List

import requests

from .language import Language, TranslationResult
from ..config.app_config import DEFAULT_DEEPL_BASE_URL, DEFAULT_TIMEOUT
from ..errors import (
    ConnectionFailedError,
    HttpStatusError,
    NoTranslationError,
    ParseError,
)

logger = logging.getLogger(__name__)


class DeepLClient:
    """
    DeepL REST API client.

    Every call opens its own session, sends exactly one request and closes
    the session before returning or raising.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_DEEPL_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @property
    def languages_url(self) -> str:
        return f"{self._base_url}/languages"

    @property
    def translate_url(self) -> str:
        return f"{self._base_url}/translate"

    def _headers(self) -> dict:
        return {"Authorization": f"DeepL-Auth-Key {self._api_key}"}

    def _request(self, method: str, url: str, **kwargs) -> Any:
        """Send one request and return the decoded JSON body."""
        try:
            with requests.Session() as session:
                with session.request(
                    method,
                    url,
                    headers=self._headers(),
                    timeout=self._timeout,
                    **kwargs
                ) as response:
                    if not 200 <= response.status_code < 300:
                        raise HttpStatusError(response.status_code, url)
                    try:
                        return response.json()
                    except ValueError as e:
                        raise ParseError(f"Response body is not valid JSON: {e}", url) from e
        except requests.RequestException as e:
            raise ConnectionFailedError(url, str(e)) from e

    def get_languages(self) -> List[Language]:
        """
        Fetch the full list of languages supported by DeepL.

        Order is preserved as returned; no filtering, deduplication or sorting.

        Raises:
            ConnectionFailedError: On transport failures
            HttpStatusError: If DeepL answers with a non-success status
            ParseError: If the body is not a JSON array of {language, name}
        """
        logger.info("Fetching DeepL supported languages")
        data = self._request("GET", self.languages_url)

        if not isinstance(data, list):
            raise ParseError(
                f"Expected a JSON array of languages, got {type(data).__name__}",
                self.languages_url
            )

        languages = []
        for entry in data:
            if not isinstance(entry, dict):
                raise ParseError(f"Unexpected language entry: {entry!r}", self.languages_url)
            code = entry.get("language", "")
            name = entry.get("name", "")
            if not isinstance(code, str) or not isinstance(name, str):
                raise ParseError(f"Unexpected language entry: {entry!r}", self.languages_url)
            languages.append(Language(code=code, name=name))

        logger.info(f"DeepL supports {len(languages)} languages")
        return languages

    def translate_text(self, text: str, target_lang: str) -> TranslationResult:
        """
        Translate a single text segment into target_lang.

        target_lang is passed through unchecked; DeepL rejects unknown codes.

        Raises:
            ConnectionFailedError: On transport failures
            HttpStatusError: If DeepL answers with a non-success status
            ParseError: If the body cannot be decoded
            NoTranslationError: If DeepL returns an empty translations list
        """
        logger.info(f"Translating {len(text)} characters to {target_lang}")
        # json= sets Content-Type: application/json
        data = self._request(
            "POST",
            self.translate_url,
            json={"text": [text], "target_lang": target_lang}
        )

        if not isinstance(data, dict):
            raise ParseError(
                f"Expected a JSON object, got {type(data).__name__}",
                self.translate_url
            )

        translations = data.get("translations") or []
        if not isinstance(translations, list):
            raise ParseError("Field 'translations' must be a list", self.translate_url)
        if not translations:
            raise NoTranslationError(target_lang)

        first = translations[0]
        if not isinstance(first, dict) or not isinstance(first.get("text", ""), str):
            raise ParseError(f"Unexpected translation entry: {first!r}", self.translate_url)

        return TranslationResult(
            text=first.get("text", ""),
            detected_source_language=first.get("detected_source_language")
        )

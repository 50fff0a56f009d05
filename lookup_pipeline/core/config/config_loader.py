"""
Configuration Loader
Loads JSON (or YAML) configuration files into an AppConfig
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .app_config import (
    AppConfig,
    DEFAULT_DEEPL_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_YOUTUBE_BASE_URL,
)
from ..errors import ParseError, ReadError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}
CREDENTIAL_FIELDS = ("deepl_api_key", "youtube_api_key", "youtube_video_id")


class ConfigLoader:
    """
    Loads configuration from a JSON or YAML file.

    Responsibilities:
    - Read the whole configuration file
    - Parse it according to its suffix (.yaml/.yml -> YAML, anything else -> JSON)
    - Check field types, defaulting absent fields
    - Return an AppConfig instance
    """

    def __init__(self, config_path: Union[str, Path]):
        """
        Initialize ConfigLoader with path to config file.

        Args:
            config_path: Path to the configuration file
        """
        self._config_path = Path(config_path)

    def load(self) -> AppConfig:
        """
        Load configuration from file.

        Returns:
            AppConfig: Configuration object

        Raises:
            ReadError: If the file cannot be opened or read
            ParseError: If the content is malformed or has the wrong shape
        """
        config_data = self._parse(self._read())

        credentials = {
            field: self._validate_string(config_data, field, "")
            for field in CREDENTIAL_FIELDS
        }

        config = AppConfig(
            timeout=self._validate_timeout(config_data),
            youtube_base_url=self._validate_string(
                config_data, "youtube_base_url", DEFAULT_YOUTUBE_BASE_URL
            ),
            deepl_base_url=self._validate_string(
                config_data, "deepl_base_url", DEFAULT_DEEPL_BASE_URL
            ),
            **credentials
        )
        logger.debug(f"Loaded {config!r} from {self._config_path}")
        return config

    def _read(self) -> str:
        """Read the full file content."""
        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                return f.read()
        except OSError as e:
            raise ReadError(self._config_path, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise ParseError(f"File is not valid UTF-8 text: {e}", str(self._config_path)) from e

    def _parse(self, content: str) -> Dict[str, Any]:
        """Parse file content and check it is a mapping."""
        source = str(self._config_path)

        if self._config_path.suffix.lower() in YAML_SUFFIXES:
            try:
                data = yaml.safe_load(content)
            except yaml.YAMLError as e:
                raise ParseError(f"Invalid YAML syntax: {e}", source) from e
        else:
            try:
                data = json.loads(content)
            except json.JSONDecodeError as e:
                raise ParseError(f"Invalid JSON syntax: {e}", source) from e

        if not isinstance(data, dict):
            raise ParseError(
                f"Configuration must be an object/mapping, got {type(data).__name__}",
                source
            )

        return data

    def _validate_string(self, config: Dict[str, Any], field: str, default: str) -> str:
        """Return a string field, or the default when it is absent or null."""
        value = config.get(field)

        if value is None:
            return default

        if not isinstance(value, str):
            raise ParseError(
                f"Field '{field}' must be a string, got {type(value).__name__}",
                str(self._config_path)
            )

        return value

    def _validate_timeout(self, config: Dict[str, Any]) -> float:
        """Validate the optional timeout field."""
        timeout = config.get("timeout")

        if timeout is None:
            return DEFAULT_TIMEOUT

        # bool is an int subclass
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise ParseError(
                f"Field 'timeout' must be a number, got {type(timeout).__name__}",
                str(self._config_path)
            )

        if timeout <= 0:
            raise ParseError(
                f"Field 'timeout' must be greater than 0, got {timeout}",
                str(self._config_path)
            )

        return float(timeout)

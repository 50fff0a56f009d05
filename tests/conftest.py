import json
from pathlib import Path

import pytest


@pytest.fixture
def write_config(tmp_path):
    """Factory fixture: writes a config file and returns its path."""

    def _write(data, name: str = "config.json") -> Path:
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def full_config():
    return {
        "deepl_api_key": "deepl-key:fx",
        "youtube_api_key": "yt-key",
        "youtube_video_id": "dQw4w9WgXcQ",
    }

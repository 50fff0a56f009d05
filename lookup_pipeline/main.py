"""
YouTube/DeepL Lookup Pipeline - Entry Point
Lists DeepL's supported languages, then prints a YouTube video's title and description.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from lookup_pipeline.core.config import AppConfig, ConfigLoader
from lookup_pipeline.core.deepl import DeepLClient, Language, TranslationResult
from lookup_pipeline.core.errors import LookupPipelineError
from lookup_pipeline.core.youtube import VideoMetadata, YouTubeClient

DEFAULT_CONFIG_PATH = Path("config.json")

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> logging.Logger:
    """Configure logging with console and optional file handlers."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers
    )

    return logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="List DeepL languages and look up a YouTube video's metadata."
    )
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH,
                        help="Path to the JSON (or YAML) config file. Default: ./config.json")
    parser.add_argument("--timeout", type=float, default=None,
                        help="Connect/read timeout in seconds for each HTTP call (overrides config).")
    parser.add_argument("--translate", type=str, default=None, metavar="TEXT",
                        help="Also translate TEXT with DeepL after the video lookup.")
    parser.add_argument("--target-lang", type=str, default="DE",
                        help="Target language code for --translate. Default: DE")
    parser.add_argument("--log-file", type=Path, default=None,
                        help="Append log records to this file as well as the console.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    args = parser.parse_args(argv)
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be greater than 0")
    return args


def _abort(step: str, error: Exception) -> NoReturn:
    """Report a failed step and stop the pipeline."""
    if isinstance(error, LookupPipelineError):
        logger.error(f"{step} failed [{error.kind.value}]: {error}")
    else:
        logger.exception(f"Unexpected error during {step.lower()}: {error}")
    sys.exit(1)


def load_configuration(config_path: Path) -> AppConfig:
    """Load the configuration file."""
    logger.info(f"Loading configuration from: {config_path}")
    try:
        config = ConfigLoader(config_path).load()
    except Exception as e:
        _abort("Loading configuration", e)

    logger.info(f"  Video ID: {config.youtube_video_id!r}")
    logger.info(f"  Timeout: {config.timeout}s")
    return config


def list_languages(config: AppConfig) -> List[Language]:
    """Fetch and print DeepL's supported languages in the order returned."""
    client = DeepLClient(config.deepl_api_key, config.deepl_base_url, config.timeout)
    try:
        languages = client.get_languages()
    except Exception as e:
        _abort("Fetching DeepL languages", e)

    print("DeepL Supported Languages:")
    for language in languages:
        print(f"Code: {language.code}, Name: {language.name}")
    return languages


def lookup_video(config: AppConfig) -> VideoMetadata:
    """Fetch and print the configured video's title and description."""
    try:
        client = YouTubeClient(config.youtube_api_key, config.youtube_base_url, config.timeout)
        video = client.fetch_video_info(config.youtube_video_id)
    except Exception as e:
        _abort("Fetching YouTube video", e)

    print(f"Title: {video.title}")
    print(f"Description: {video.description}")
    return video


def translate(config: AppConfig, text: str, target_lang: str) -> TranslationResult:
    """Translate text with DeepL and print the result."""
    client = DeepLClient(config.deepl_api_key, config.deepl_base_url, config.timeout)
    try:
        result = client.translate_text(text, target_lang)
    except Exception as e:
        _abort("Translating text", e)

    if result.detected_source_language:
        logger.info(f"  Detected source language: {result.detected_source_language}")
    print(f"Translated text: {result.text}")
    return result


def main(argv: Optional[List[str]] = None) -> None:
    """Main execution entry for the Lookup Pipeline."""
    args = parse_args(argv)
    setup_logging(verbose=args.verbose, log_file=args.log_file)

    logger.info("Starting...")

    config = load_configuration(args.config)
    if args.timeout is not None:
        config = config.with_timeout(args.timeout)

    list_languages(config)
    lookup_video(config)

    if args.translate is not None:
        translate(config, args.translate, args.target_lang)

    logger.info("Lookup complete")


if __name__ == "__main__":
    main()

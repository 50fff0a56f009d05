"""
DeepL API integration module
"""

from .deepl_client import DeepLClient
from .language import Language, TranslationResult

__all__ = ["DeepLClient", "Language", "TranslationResult"]

"""
DeepL Domain Models
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Language:
    """A language supported by DeepL, e.g. Language(code="DE", name="German")."""
    code: str
    name: str


@dataclass(frozen=True)
class TranslationResult:
    """First translation returned for a single-segment translate request."""
    text: str
    detected_source_language: Optional[str] = None

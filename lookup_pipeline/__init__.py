"""
YouTube/DeepL Lookup Pipeline
Fetches DeepL's supported languages and a single YouTube video's metadata.
"""

__version__ = "0.1.0"

"""
Configuration module for the Lookup Pipeline
"""

from .app_config import AppConfig
from .config_loader import ConfigLoader

__all__ = ["AppConfig", "ConfigLoader"]

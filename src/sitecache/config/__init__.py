"""Configuration loading for sitecache."""

from .loader import load_config
from .model import SitecacheConfig

__all__ = ["SitecacheConfig", "load_config"]

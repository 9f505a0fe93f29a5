"""Cache key and dependency models."""

from .deps import DependencySet
from .path import ResourcePath

__all__ = ["DependencySet", "ResourcePath"]

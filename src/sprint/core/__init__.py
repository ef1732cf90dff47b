"""Core infrastructure modules."""

from .global_paths import GlobalPath

__all__ = ["GlobalPath"]

# Config is imported from its own module to avoid a cycle with util.log
# To use: from sprint.core.config import ConfigManager

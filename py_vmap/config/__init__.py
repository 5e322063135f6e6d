"""
Configuration for map rendering.
"""

from .config import Settings, settings

__all__ = ['Settings', 'settings']

"""
Core package for grant store configuration.
"""

from .config import StoreConfig

__all__ = ["StoreConfig"]

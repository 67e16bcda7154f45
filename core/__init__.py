"""
Core package - Shared building blocks.
Contains the singleton base used by process-wide components.
"""

from core.base.singleton import Singleton, SingletonMeta

__all__ = [
    "Singleton",
    "SingletonMeta",
]

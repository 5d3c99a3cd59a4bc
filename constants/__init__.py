"""
Constants package for Medal Watch.
"""

from .enums import MedalClass, PollerState, MEDAL_CLASSES

__all__ = [
    "MedalClass",
    "PollerState",
    "MEDAL_CLASSES",
]

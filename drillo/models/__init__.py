"""Data models for Drillo."""

from .activity import ActivityEvent
from .stats import VocabularyStats
from .vocabulary import VocabularyEntry

__all__ = [
    "VocabularyEntry",
    "ActivityEvent",
    "VocabularyStats",
]

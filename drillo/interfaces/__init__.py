"""Interface protocols for Drillo."""

from .presenter import PresenterProtocol
from .store import VocabularyStore

__all__ = ["PresenterProtocol", "VocabularyStore"]

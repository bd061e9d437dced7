"""Business logic services for Drillo."""

from .persistence import PersistenceBridge
from .report_service import ReportService
from .scoring import ScoreModel, accuracy_ratio
from .selector import WeightedSelector
from .session import SessionState
from .sqlite_store import SQLiteVocabularyStore
from .stats_service import StatsService
from .translation_service import TranslationService, normalize_input_for_translation

__all__ = [
    "ScoreModel",
    "accuracy_ratio",
    "WeightedSelector",
    "SessionState",
    "PersistenceBridge",
    "SQLiteVocabularyStore",
    "StatsService",
    "TranslationService",
    "normalize_input_for_translation",
    "ReportService",
]

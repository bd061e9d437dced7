"""Priority scoring for vocabulary entries."""

import logging
from collections.abc import Iterable
from datetime import date

from drillo.config import DrilloConfig
from drillo.exceptions import InvalidStateError
from drillo.models import VocabularyEntry
from drillo.utils import days_since

logger = logging.getLogger(__name__)


def accuracy_ratio(correct: int, wrong: int, epsilon: float) -> float:
    """Return correct / (correct + wrong + epsilon).

    The epsilon keeps the ratio defined for entries without attempts,
    where it evaluates to 0.0.
    """
    return correct / (correct + wrong + epsilon)


class ScoreModel:
    """Turn attempt counters and last activity into a priority score.

    Higher scores mean the entry is more urgent to practise. The score
    combines how often the entry was answered wrongly with how long it has
    been since it was last seen.
    """

    def __init__(self, config: DrilloConfig):
        """Initialize the score model.

        Args:
            config: Configuration providing weights, epsilon and rounding
        """
        self.config = config

    def wrongness(self, entry: VocabularyEntry) -> float:
        """Return 1 - accuracy, which is 1.0 for untested entries.

        Raises:
            InvalidStateError: If the entry has negative counters
        """
        if entry.correct_attempts < 0 or entry.wrong_attempts < 0:
            raise InvalidStateError(
                f"Entry {entry.id} has negative attempt counters "
                f"({entry.correct_attempts} correct, {entry.wrong_attempts} wrong)"
            )
        return 1 - accuracy_ratio(
            entry.correct_attempts, entry.wrong_attempts, self.config.epsilon
        )

    def recency_fraction(self, entry: VocabularyEntry, today: date) -> float:
        """Return days since last seen, clamped to the cap and scaled to [0, 1]."""
        cap = self.config.recency_cap_days
        elapsed = min(max(days_since(entry.last_seen, today), 0), cap)
        return elapsed / cap

    def score(self, entry: VocabularyEntry, today: date) -> float:
        """Compute the rounded priority score of an entry.

        Args:
            entry: Entry to score
            today: Reference date for the recency term

        Returns:
            Non-negative score rounded to the configured precision
        """
        raw = (
            self.wrongness(entry) * self.config.accuracy_weight
            + self.recency_fraction(entry, today) * self.config.recency_weight
        )
        return round(raw, self.config.rounding_digits)

    def update_score(self, entry: VocabularyEntry, today: date) -> float:
        """Recompute and store the score of a single entry."""
        entry.score = self.score(entry, today)
        return entry.score

    def update_all_scores(self, entries: Iterable[VocabularyEntry], today: date) -> None:
        """Recompute the score of every entry in one pass."""
        count = 0
        for entry in entries:
            self.update_score(entry, today)
            count += 1
        logger.debug(f"Recomputed scores for {count} entries")

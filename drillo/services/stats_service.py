"""Service for summarizing vocabulary progress."""

import logging
import statistics
from collections.abc import Sequence
from datetime import date

from drillo.config import DrilloConfig
from drillo.models import ActivityEvent, VocabularyEntry, VocabularyStats
from drillo.services.scoring import accuracy_ratio
from drillo.utils import days_since

logger = logging.getLogger(__name__)


def _quartiles(values: list[float]) -> tuple[float, float]:
    """Return (Q1, Q3) with linear interpolation between order statistics."""
    if len(values) == 1:
        return values[0], values[0]
    q1, _, q3 = statistics.quantiles(values, n=4, method="inclusive")
    return q1, q3


class StatsService:
    """Derive summary metrics from the vocabulary and its history.

    Read-only: nothing passed in is modified.
    """

    def __init__(self, config: DrilloConfig):
        self.config = config

    def summarize(
        self,
        vocabulary: Sequence[VocabularyEntry],
        history: Sequence[ActivityEvent],
        today: date,
    ) -> VocabularyStats:
        """Compute accuracy, recency and staleness metrics.

        Args:
            vocabulary: All vocabulary entries
            history: Durable plus buffered activity events
            today: Reference date for recency

        Returns:
            VocabularyStats with every float rounded to the configured precision.
            An empty vocabulary yields zeroed distribution metrics; a single
            entry yields a standard deviation of 0.0.
        """
        digits = self.config.rounding_digits
        total = len(vocabulary)
        tested = sum(1 for entry in vocabulary if entry.is_tested)

        stats = VocabularyStats(
            total_words=total,
            tested_words=tested,
            untested_words=total - tested,
            total_events=len(history),
            staleness_days=self.config.staleness_days,
        )

        if history:
            correct_events = sum(1 for event in history if event.correct)
            stats.event_accuracy = round(correct_events / len(history), digits)

        if total == 0:
            return stats

        accuracies = [
            accuracy_ratio(e.correct_attempts, e.wrong_attempts, self.config.epsilon)
            for e in vocabulary
        ]
        recencies = [float(days_since(e.last_seen, today)) for e in vocabulary]

        q1_accuracy, _ = _quartiles(accuracies)
        _, q3_recency = _quartiles(recencies)
        std_dev = statistics.stdev(accuracies) if total > 1 else 0.0
        stale = sum(1 for days in recencies if days > self.config.staleness_days)

        stats.mean_accuracy = round(statistics.fmean(accuracies), digits)
        stats.q1_accuracy = round(q1_accuracy, digits)
        stats.std_dev_accuracy = round(std_dev, digits)
        stats.mean_recency = round(statistics.fmean(recencies), digits)
        stats.q3_recency = round(q3_recency, digits)
        stats.stale_fraction = round(stale / total, digits)
        return stats

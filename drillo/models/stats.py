"""Data models for vocabulary statistics."""

from dataclasses import dataclass

DISPLAY_NAMES = {
    "total_words": "Total Words",
    "tested_words": "Tested Words",
    "untested_words": "Untested Words",
    "mean_accuracy": "Average Accuracy",
    "q1_accuracy": "Q1 Accuracy",
    "std_dev_accuracy": "Std Dev Accuracy",
    "mean_recency": "Average Recency",
    "q3_recency": "Q3 Recency",
    "stale_fraction": "Stale Fraction (> {staleness_days} days)",
    "total_events": "Recorded Attempts",
    "event_accuracy": "Attempt Accuracy",
}


@dataclass
class VocabularyStats:
    """Summary metrics over the vocabulary and its activity history."""

    total_words: int = 0
    tested_words: int = 0
    untested_words: int = 0
    mean_accuracy: float = 0.0
    q1_accuracy: float = 0.0
    std_dev_accuracy: float = 0.0  # 0.0 when fewer than two entries
    mean_recency: float = 0.0  # Days since last seen
    q3_recency: float = 0.0
    stale_fraction: float = 0.0  # 0.0 to 1.0
    total_events: int = 0
    event_accuracy: float = 0.0
    staleness_days: int = 10  # Threshold behind stale_fraction, not a metric

    def as_dict(self) -> dict[str, int | float]:
        """Return the metrics keyed by metric name, in display order."""
        return {name: getattr(self, name) for name in DISPLAY_NAMES}

    def display_items(self) -> list[tuple[str, int | float]]:
        """Return (label, value) pairs for presentation."""
        return [
            (label.format(staleness_days=self.staleness_days), getattr(self, name))
            for name, label in DISPLAY_NAMES.items()
        ]

"""Data models for vocabulary entries."""

from dataclasses import dataclass, field
from datetime import date


@dataclass
class VocabularyEntry:
    """A word pair together with its practice statistics."""

    id: int
    source_text: str  # Word the user is prompted with
    target_text: str  # Expected translation
    correct_attempts: int = 0
    wrong_attempts: int = 0
    last_activity: date | None = None  # None until the first attempt
    score: float = 0.0  # Derived priority, recomputed on every load
    date_added: date = field(default_factory=date.today)

    @property
    def total_attempts(self) -> int:
        """Number of recorded attempts for this entry."""
        return self.correct_attempts + self.wrong_attempts

    @property
    def is_tested(self) -> bool:
        """Check if the entry has at least one attempt."""
        return self.total_attempts > 0

    @property
    def last_seen(self) -> date:
        """Date of the last attempt, or the date added for untested entries."""
        return self.last_activity if self.last_activity is not None else self.date_added

    def __str__(self) -> str:
        return f"{self.source_text} -> {self.target_text}"

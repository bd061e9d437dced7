"""Data model for recorded practice attempts."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ActivityEvent:
    """A single timestamped practice attempt against a vocabulary entry."""

    id: int
    word_id: int
    correct: bool
    timestamp: datetime

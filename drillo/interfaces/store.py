"""Protocol for durable vocabulary storage."""

from collections.abc import Sequence
from typing import Protocol

from drillo.models import ActivityEvent, VocabularyEntry


class VocabularyStore(Protocol):
    """Interface for the durable store behind a drilling session.

    Implementations own table creation and the row codec. Every write either
    fully succeeds or raises PersistenceError with nothing applied.
    """

    def load_vocabulary(self) -> list[VocabularyEntry]:
        """Load every vocabulary entry in insertion (id) order.

        Raises:
            DataIntegrityError: If a stored row cannot be decoded.
        """
        ...

    def load_max_activity_id(self) -> int:
        """Return the highest stored activity event id, or 0 if none exist."""
        ...

    def load_activity_events(self) -> list[ActivityEvent]:
        """Load the durable activity history in id order."""
        ...

    def write_vocabulary(self, entries: Sequence[VocabularyEntry]) -> None:
        """Insert or overwrite the given entries, keyed by id."""
        ...

    def append_activity_events(self, events: Sequence[ActivityEvent]) -> None:
        """Append events with their explicit ids."""
        ...

    def save(self, entries: Sequence[VocabularyEntry], events: Sequence[ActivityEvent]) -> None:
        """Write entries and append events as a single atomic unit."""
        ...

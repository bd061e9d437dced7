"""In-memory working set for one drilling session."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import date, datetime
from typing import TYPE_CHECKING

from drillo.exceptions import DuplicateEntryError, InvalidStateError, ValidationError
from drillo.models import ActivityEvent, VocabularyEntry

if TYPE_CHECKING:
    from drillo.services.scoring import ScoreModel

logger = logging.getLogger(__name__)


def _no_history() -> list[ActivityEvent]:
    return []


class SessionState:
    """Vocabulary and not-yet-persisted activity for the running session.

    The session exclusively owns the vocabulary list and the event buffer;
    all mutation goes through its methods. New event ids continue from the
    highest id that existed durably when the session was loaded, so merging
    durable and buffered history never produces a duplicate id.
    """

    def __init__(
        self,
        vocabulary: Sequence[VocabularyEntry] = (),
        max_persisted_id: int = 0,
        history_loader: Callable[[], list[ActivityEvent]] = _no_history,
    ):
        """Initialize the session state.

        Args:
            vocabulary: Entries loaded from durable storage
            max_persisted_id: Highest activity event id in durable storage
            history_loader: Callable returning the durable activity history
        """
        if max_persisted_id < 0:
            raise InvalidStateError(f"max_persisted_id must not be negative, got {max_persisted_id}")
        self._vocabulary: list[VocabularyEntry] = list(vocabulary)
        self._buffer: list[ActivityEvent] = []
        self._max_persisted_id = max_persisted_id
        self._history_loader = history_loader

    @property
    def entries(self) -> list[VocabularyEntry]:
        """The vocabulary, in insertion order.

        Callers must not add or remove items from this list; use
        append_entry and record_attempt instead.
        """
        return self._vocabulary

    @property
    def max_persisted_id(self) -> int:
        """Highest activity event id known to be durable."""
        return self._max_persisted_id

    @property
    def pending_count(self) -> int:
        """Number of buffered events waiting for a flush."""
        return len(self._buffer)

    def is_empty(self) -> bool:
        """Check if the vocabulary has no entries."""
        return not self._vocabulary

    def entry_by_id(self, word_id: int) -> VocabularyEntry | None:
        """Return the entry with the given id, or None."""
        for entry in self._vocabulary:
            if entry.id == word_id:
                return entry
        return None

    def has_entry(self, source_text: str) -> bool:
        """Check if a source text already exists, ignoring case and surrounding spaces."""
        key = source_text.strip().casefold()
        return any(entry.source_text.casefold() == key for entry in self._vocabulary)

    # === Activity events ===

    def record_event(self, word_id: int, correct: bool, now: datetime) -> ActivityEvent:
        """Buffer a new activity event with the next safe id.

        Args:
            word_id: Id of the practised entry
            correct: Whether the answer was correct
            now: Creation time of the event

        Returns:
            The buffered event
        """
        event = ActivityEvent(
            id=self._max_persisted_id + len(self._buffer) + 1,
            word_id=word_id,
            correct=correct,
            timestamp=now.replace(microsecond=0),
        )
        self._buffer.append(event)
        return event

    def record_attempt(
        self, word_id: int, correct: bool, now: datetime, scorer: ScoreModel
    ) -> ActivityEvent:
        """Apply a completed practice attempt.

        Updates the entry's counters and last activity, recomputes its score
        and buffers the matching event.

        Raises:
            InvalidStateError: If no entry has the given id
        """
        entry = self.entry_by_id(word_id)
        if entry is None:
            raise InvalidStateError(f"No vocabulary entry with id {word_id}")

        if correct:
            entry.correct_attempts += 1
        else:
            entry.wrong_attempts += 1
        entry.last_activity = now.date()
        scorer.update_score(entry, now.date())

        return self.record_event(word_id, correct, now)

    def pending_events(self) -> tuple[ActivityEvent, ...]:
        """Snapshot of the buffered events, oldest first."""
        return tuple(self._buffer)

    def mark_persisted(self, count: int) -> None:
        """Acknowledge that the oldest count buffered events are now durable.

        Raises:
            InvalidStateError: If count exceeds the buffer size
        """
        if count < 0 or count > len(self._buffer):
            raise InvalidStateError(
                f"Cannot mark {count} events as persisted with {len(self._buffer)} buffered"
            )
        del self._buffer[:count]
        self._max_persisted_id += count

    def merged_activity_history(self) -> list[ActivityEvent]:
        """Return durable history followed by the buffered events."""
        return list(self._history_loader()) + list(self._buffer)

    # === Vocabulary ===

    def append_entry(self, source_text: str, target_text: str, today: date) -> VocabularyEntry:
        """Add a new word pair with zeroed statistics.

        Args:
            source_text: Word the user will be prompted with
            target_text: Expected translation
            today: Date recorded as date_added

        Returns:
            The new entry

        Raises:
            ValidationError: If either text is empty
            DuplicateEntryError: If the source text already exists
        """
        source_text = source_text.strip()
        target_text = target_text.strip()
        if not source_text or not target_text:
            raise ValidationError("Source and target text must not be empty")
        if self.has_entry(source_text):
            raise DuplicateEntryError(source_text)

        next_id = max((entry.id for entry in self._vocabulary), default=0) + 1
        entry = VocabularyEntry(
            id=next_id,
            source_text=source_text,
            target_text=target_text,
            date_added=today,
        )
        self._vocabulary.append(entry)
        logger.info(f"Added entry {entry.id}: {entry}")
        return entry

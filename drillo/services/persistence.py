"""Synchronization between the session and durable storage."""

import logging

from drillo.exceptions import PersistenceError
from drillo.interfaces import VocabularyStore
from drillo.models import VocabularyEntry
from drillo.services.session import SessionState

logger = logging.getLogger(__name__)


class PersistenceBridge:
    """Load session state at startup and flush it on request.

    Flushing writes the whole vocabulary and appends the buffered events in
    one store transaction. The session buffer is only cleared after that
    write succeeds, so a failed flush can simply be retried.
    """

    def __init__(self, store: VocabularyStore):
        """Initialize the bridge.

        Args:
            store: Durable vocabulary store
        """
        self.store = store

    def load(self) -> tuple[list[VocabularyEntry], int]:
        """Read the vocabulary and the highest stored activity id.

        Returns:
            Tuple of (vocabulary, max_persisted_id)

        Raises:
            DataIntegrityError: If stored rows are malformed
            PersistenceError: If the store cannot be read
        """
        vocabulary = self.store.load_vocabulary()
        max_id = self.store.load_max_activity_id()
        logger.info(f"Loaded {len(vocabulary)} entries, last activity id {max_id}")
        return vocabulary, max_id

    def open_session(self) -> SessionState:
        """Load durable state into a new session."""
        vocabulary, max_id = self.load()
        return SessionState(vocabulary, max_id, history_loader=self.store.load_activity_events)

    def flush(self, state: SessionState) -> int:
        """Persist the vocabulary and all buffered events.

        Args:
            state: Session to flush

        Returns:
            Number of events made durable

        Raises:
            PersistenceError: If the write failed; the session is unchanged
        """
        events = state.pending_events()
        try:
            self.store.save(state.entries, events)
        except PersistenceError:
            logger.error(f"Flush failed, keeping {len(events)} buffered events for retry")
            raise

        state.mark_persisted(len(events))
        logger.info(
            f"Flushed {len(state.entries)} entries and {len(events)} events "
            f"(last activity id {state.max_persisted_id})"
        )
        return len(events)

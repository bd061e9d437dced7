"""Helpers shared by the CLI subcommands."""

import logging

from drillo.config import DrilloConfig
from drillo.services import PersistenceBridge, SessionState, SQLiteVocabularyStore

logger = logging.getLogger(__name__)


def open_session(config: DrilloConfig) -> tuple[PersistenceBridge, SessionState]:
    """Initialize the database and load a session from it.

    Raises:
        PersistenceError: If the database cannot be created or read
        DataIntegrityError: If stored rows are malformed
    """
    store = SQLiteVocabularyStore(config.db_path)
    if not store.is_available():
        logger.info(f"No vocabulary database at {config.db_path}, creating a new one")
    store.initialize()
    bridge = PersistenceBridge(store)
    return bridge, bridge.open_session()

"""SQLite-backed durable store for vocabulary and activity history."""

import logging
import sqlite3
from collections.abc import Sequence
from datetime import date
from pathlib import Path

from drillo.exceptions import DataIntegrityError, PersistenceError
from drillo.models import ActivityEvent, VocabularyEntry
from drillo.utils import (
    format_last_activity,
    format_timestamp,
    parse_last_activity,
    parse_timestamp,
)

logger = logging.getLogger(__name__)

# Column names used by databases created before the columns were renamed
LEGACY_COLUMN_NAMES = {"english": "source_text", "german": "target_text"}

VOCABULARY_COLUMNS = (
    "id",
    "source_text",
    "target_text",
    "correct_attempts",
    "wrong_attempts",
    "last_activity",
    "score",
    "date_added",
)


class SQLiteVocabularyStore:
    """Durable store using a single SQLite database file.

    Implements VocabularyStore protocol.

    Each public method opens its own connection. Writes run inside one
    transaction per call and are rolled back on any error.
    """

    def __init__(self, db_path: Path):
        """Initialize the store.

        Args:
            db_path: Path to the SQLite database file
        """
        self._db_path = Path(db_path)

    def initialize(self) -> None:
        """Create the database, tables and index if they don't exist.

        Raises:
            PersistenceError: If the database cannot be created
        """
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = self._connect()
            try:
                with conn:
                    self._create_tables(conn)
                    self._rename_legacy_columns(conn)
            finally:
                conn.close()
        except (sqlite3.Error, OSError) as e:
            raise PersistenceError(f"Cannot initialize database at {self._db_path}: {e}") from e
        logger.info(f"Vocabulary database initialized at {self._db_path}")

    def is_available(self) -> bool:
        """Check if the database file exists."""
        return self._db_path.exists()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def _create_tables(self, conn: sqlite3.Connection) -> None:
        conn.execute("""
            CREATE TABLE IF NOT EXISTS vocabulary (
                id INTEGER PRIMARY KEY,
                source_text TEXT NOT NULL,
                target_text TEXT NOT NULL,
                correct_attempts INTEGER NOT NULL DEFAULT 0,
                wrong_attempts INTEGER NOT NULL DEFAULT 0,
                last_activity TEXT NOT NULL DEFAULT 'Not tested',
                score REAL NOT NULL DEFAULT 0.0,
                date_added TEXT NOT NULL
            )
        """)
        conn.execute("""
            CREATE TABLE IF NOT EXISTS activity_log (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                word_id INTEGER NOT NULL,
                correct INTEGER NOT NULL,
                timestamp TEXT NOT NULL
            )
        """)
        conn.execute("""
            CREATE INDEX IF NOT EXISTS idx_activity_timestamp
            ON activity_log(timestamp)
        """)

    def _rename_legacy_columns(self, conn: sqlite3.Connection) -> None:
        """Rename the english/german text columns of older databases."""
        existing = {row["name"] for row in conn.execute("PRAGMA table_info(vocabulary)")}
        for old_name, new_name in LEGACY_COLUMN_NAMES.items():
            if old_name not in existing or new_name in existing:
                continue
            conn.execute(f"ALTER TABLE vocabulary RENAME COLUMN {old_name} TO {new_name}")
            logger.info(f"Renamed vocabulary column {old_name} -> {new_name}")

    # === Reads ===

    def load_vocabulary(self) -> list[VocabularyEntry]:
        """Load all entries ordered by id.

        Raises:
            DataIntegrityError: If a row holds a malformed date or negative counters
            PersistenceError: If the database cannot be read
        """
        rows = self._fetch_all("SELECT * FROM vocabulary ORDER BY id ASC")
        return [self._row_to_entry(row) for row in rows]

    def load_max_activity_id(self) -> int:
        """Return the highest activity id, or 0 for an empty log."""
        rows = self._fetch_all("SELECT COALESCE(MAX(id), 0) AS max_id FROM activity_log")
        return int(rows[0]["max_id"])

    def load_activity_events(self) -> list[ActivityEvent]:
        """Load the activity log ordered by id."""
        rows = self._fetch_all("SELECT * FROM activity_log ORDER BY id ASC")
        return [self._row_to_event(row) for row in rows]

    def _fetch_all(self, query: str) -> list[sqlite3.Row]:
        try:
            conn = self._connect()
            try:
                return conn.execute(query).fetchall()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise PersistenceError(f"Cannot read from {self._db_path}: {e}") from e

    # === Writes ===

    def write_vocabulary(self, entries: Sequence[VocabularyEntry]) -> None:
        """Insert new entries and overwrite existing ones by id."""
        self.save(entries, ())

    def append_activity_events(self, events: Sequence[ActivityEvent]) -> None:
        """Append events keeping their explicit ids."""
        self.save((), events)

    def save(self, entries: Sequence[VocabularyEntry], events: Sequence[ActivityEvent]) -> None:
        """Write entries and append events in a single transaction.

        Raises:
            PersistenceError: If any write fails; nothing is applied
        """
        try:
            conn = self._connect()
            try:
                with conn:
                    conn.executemany(
                        """INSERT OR REPLACE INTO vocabulary
                           (id, source_text, target_text, correct_attempts,
                            wrong_attempts, last_activity, score, date_added)
                           VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
                        [self._entry_to_row(entry) for entry in entries],
                    )
                    conn.executemany(
                        """INSERT INTO activity_log (id, word_id, correct, timestamp)
                           VALUES (?, ?, ?, ?)""",
                        [
                            (e.id, e.word_id, int(e.correct), format_timestamp(e.timestamp))
                            for e in events
                        ],
                    )
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise PersistenceError(f"Cannot write to {self._db_path}: {e}") from e

    # === Row codec ===

    @staticmethod
    def _entry_to_row(entry: VocabularyEntry) -> tuple:
        return (
            entry.id,
            entry.source_text,
            entry.target_text,
            entry.correct_attempts,
            entry.wrong_attempts,
            format_last_activity(entry.last_activity),
            entry.score,
            entry.date_added.isoformat(),
        )

    @staticmethod
    def _row_to_entry(row: sqlite3.Row) -> VocabularyEntry:
        missing = [name for name in VOCABULARY_COLUMNS if name not in row.keys()]
        if missing:
            raise DataIntegrityError(f"Vocabulary table is missing columns: {', '.join(missing)}")

        row_id = row["id"]
        correct, wrong = row["correct_attempts"], row["wrong_attempts"]
        if not (isinstance(correct, int) and isinstance(wrong, int)) or correct < 0 or wrong < 0:
            raise DataIntegrityError(
                f"Vocabulary row {row_id} has invalid attempt counters ({correct!r}, {wrong!r})"
            )
        for column in ("source_text", "target_text"):
            value = row[column]
            if not isinstance(value, str) or not value.strip():
                raise DataIntegrityError(f"Vocabulary row {row_id} has an empty {column}: {value!r}")
        try:
            last_activity = parse_last_activity(row["last_activity"])
        except ValueError as e:
            raise DataIntegrityError(
                f"Vocabulary row {row_id} has a malformed last_activity: {row['last_activity']!r}"
            ) from e
        try:
            date_added = date.fromisoformat(row["date_added"])
        except (TypeError, ValueError) as e:
            raise DataIntegrityError(
                f"Vocabulary row {row_id} has a malformed date_added: {row['date_added']!r}"
            ) from e

        return VocabularyEntry(
            id=row_id,
            source_text=row["source_text"],
            target_text=row["target_text"],
            correct_attempts=correct,
            wrong_attempts=wrong,
            last_activity=last_activity,
            score=0.0,  # Stored scores are a cache; callers recompute
            date_added=date_added,
        )

    @staticmethod
    def _row_to_event(row: sqlite3.Row) -> ActivityEvent:
        try:
            timestamp = parse_timestamp(row["timestamp"])
        except ValueError as e:
            raise DataIntegrityError(
                f"Activity row {row['id']} has a malformed timestamp: {row['timestamp']!r}"
            ) from e
        return ActivityEvent(
            id=row["id"],
            word_id=row["word_id"],
            correct=bool(row["correct"]),
            timestamp=timestamp,
        )

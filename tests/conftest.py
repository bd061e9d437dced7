"""Pytest configuration and shared fixtures."""

from datetime import date, datetime

import pytest

from drillo.config import DrilloConfig
from drillo.exceptions import PersistenceError
from drillo.models import ActivityEvent, VocabularyEntry
from drillo.presenters import NullPresenter

TODAY = date(2025, 6, 15)
NOW = datetime(2025, 6, 15, 12, 30, 0)


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def test_config(temp_dir):
    """Provide a test configuration with temporary paths."""
    return DrilloConfig(
        db_path=temp_dir / "database.db",
        report_path=temp_dir / "report.html",
        log_dir=temp_dir / "log",
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def make_entry():
    """Factory fixture for creating VocabularyEntry instances with sensible defaults."""

    def _make(
        id=1,
        source_text="dog",
        target_text="der Hund",
        correct_attempts=0,
        wrong_attempts=0,
        last_activity=None,
        score=0.0,
        date_added=TODAY,
    ):
        return VocabularyEntry(
            id=id,
            source_text=source_text,
            target_text=target_text,
            correct_attempts=correct_attempts,
            wrong_attempts=wrong_attempts,
            last_activity=last_activity,
            score=score,
            date_added=date_added,
        )

    return _make


class InMemoryStore:
    """A real VocabularyStore implementation kept in memory, with failure injection."""

    def __init__(self, entries=None, events=None):
        self.rows = {entry.id: entry for entry in (entries or [])}
        self.events = list(events or [])
        self.fail_on_save = False
        self.save_calls = 0

    def load_vocabulary(self):
        return [
            VocabularyEntry(**vars(self.rows[row_id])) for row_id in sorted(self.rows)
        ]

    def load_max_activity_id(self):
        return max((event.id for event in self.events), default=0)

    def load_activity_events(self):
        return list(self.events)

    def write_vocabulary(self, entries):
        self.save(entries, ())

    def append_activity_events(self, events):
        self.save((), events)

    def save(self, entries, events):
        self.save_calls += 1
        if self.fail_on_save:
            raise PersistenceError("simulated write failure")
        existing = {event.id for event in self.events}
        if any(event.id in existing for event in events):
            raise PersistenceError("duplicate activity id")
        for entry in entries:
            self.rows[entry.id] = VocabularyEntry(**vars(entry))
        self.events.extend(events)


@pytest.fixture
def memory_store():
    """Provide an empty in-memory store."""
    return InMemoryStore()


@pytest.fixture
def make_store():
    """Factory fixture for in-memory stores pre-filled with entries and events."""
    return InMemoryStore


@pytest.fixture
def make_event():
    """Factory fixture for ActivityEvent instances."""

    def _make(id=1, word_id=1, correct=True, timestamp=NOW):
        return ActivityEvent(id=id, word_id=word_id, correct=correct, timestamp=timestamp)

    return _make


class ScriptedPresenter:
    """A real PresenterProtocol implementation that replays answers and records output."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.infos = []
        self.successes = []
        self.warnings = []
        self.errors = []
        self.stats = []

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_success(self, message: str) -> None:
        self.successes.append(message)

    def show_warning(self, message: str) -> None:
        self.warnings.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def show_stats(self, stats) -> None:
        self.stats.append(stats)

    def prompt(self, message: str) -> str:
        self.prompts.append(message)
        if not self.answers:
            raise EOFError("script exhausted")
        return self.answers.pop(0)


@pytest.fixture
def scripted_presenter():
    """Factory fixture for presenters that replay a list of answers."""
    return ScriptedPresenter

"""Interactive drilling loop modelled as a mode state machine."""

from __future__ import annotations

import logging
import string
from collections.abc import Callable
from datetime import date, datetime
from enum import Enum

from drillo.config import DrilloConfig
from drillo.exceptions import (
    DrilloException,
    DuplicateEntryError,
    InvalidStateError,
    PersistenceError,
    ValidationError,
)
from drillo.interfaces import PresenterProtocol
from drillo.services import (
    PersistenceBridge,
    ReportService,
    ScoreModel,
    SessionState,
    StatsService,
    TranslationService,
    WeightedSelector,
    normalize_input_for_translation,
)

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Modes of the drilling loop, keyed by the letter the user types."""

    MENU = "m"
    VOCABULARY = "v"
    TEST = "t"
    PREVIEW = "p"
    QUIT = "q"


MENU_LEGEND = (
    "At any point, you can switch modes by typing:\n"
    "  [m] Mode\n"
    "  [v] Vocabulary\n"
    "  [t] Test\n"
    "  [p] Preview\n"
    "  [q] Quit"
)

# Every handler takes the session and returns the next mode, or None to stop
ModeHandler = Callable[[SessionState], Mode | None]


def parse_mode(text: str) -> Mode | None:
    """Return the mode selected by text, or None if it is not a mode key."""
    try:
        return Mode(text.strip().lower())
    except ValueError:
        return None


class DrillLoop:
    """Drive one interactive session from startup to a successful save.

    Each mode is a handler with the same signature. The loop calls the
    handler for the current mode and moves to whatever mode it returns.
    Quitting flushes the session; a failed flush returns to the menu with
    all buffered attempts intact.
    """

    def __init__(
        self,
        config: DrilloConfig,
        session: SessionState,
        bridge: PersistenceBridge,
        presenter: PresenterProtocol,
        scorer: ScoreModel | None = None,
        selector: WeightedSelector | None = None,
        stats_service: StatsService | None = None,
        report_service: ReportService | None = None,
        translation_service: TranslationService | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the loop.

        Args:
            config: Configuration
            session: Session state loaded by the bridge
            bridge: Persistence bridge used to flush on quit
            presenter: Input/output presenter
            scorer: Score model (built from config if omitted)
            selector: Weighted selector (built from config if omitted)
            stats_service: Statistics aggregator (built from config if omitted)
            report_service: HTML report writer (built from config if omitted)
            translation_service: Translation lookup (built from config if omitted)
            clock: Source of the current time
        """
        self.config = config
        self.session = session
        self.bridge = bridge
        self.presenter = presenter
        self.scorer = scorer or ScoreModel(config)
        self.selector = selector or WeightedSelector(config)
        self.stats_service = stats_service or StatsService(config)
        self.report_service = report_service or ReportService(config)
        self.translation_service = translation_service or TranslationService(config)
        self._clock = clock

        self._handlers: dict[Mode, ModeHandler] = {
            Mode.MENU: self._menu_mode,
            Mode.VOCABULARY: self._vocabulary_mode,
            Mode.TEST: self._test_mode,
            Mode.PREVIEW: self._preview_mode,
            Mode.QUIT: self._quit_mode,
        }
        missing = set(Mode) - set(self._handlers)
        if missing:
            raise InvalidStateError(f"No handler for modes: {sorted(m.name for m in missing)}")

    def _today(self) -> date:
        return self._clock().date()

    def run(self, start_mode: Mode = Mode.MENU) -> None:
        """Score the vocabulary and run modes until the session is saved."""
        self.scorer.update_all_scores(self.session.entries, self._today())
        self.presenter.show_info("\nWelcome to Drillo!")

        mode: Mode | None = start_mode
        while mode is not None:
            logger.debug(f"Entering mode {mode.name}")
            next_mode = self._handlers[mode](self.session)
            if next_mode is not None:
                self.presenter.show_info("\nSwitching mode...\n")
            mode = next_mode

    def _ask(self, message: str) -> tuple[str, Mode | None]:
        """Prompt the user and report whether the answer is a mode switch."""
        answer = self.presenter.prompt(message)
        return answer, parse_mode(answer)

    # === Mode handlers ===

    def _menu_mode(self, session: SessionState) -> Mode | None:
        while True:
            self.presenter.show_info(MENU_LEGEND)
            _, mode = self._ask("> ")
            if mode is not None:
                return mode
            self.presenter.show_warning("Invalid mode!")

    def _vocabulary_mode(self, session: SessionState) -> Mode | None:
        self.presenter.show_info("Vocabulary mode")
        self.presenter.show_info("-" * 19)

        while True:
            specifier, mode = self._ask("Non-noun specifier: ")
            if mode is not None:
                return mode
            if len(specifier) == 1 and specifier in string.punctuation:
                break
            self.presenter.show_warning("Specifier has to be a single punctuation character!")

        while True:
            user_input, mode = self._ask(f"\n({specifier}) Word to translate: ")
            if mode is not None:
                return mode

            word, noun_mode = normalize_input_for_translation(user_input, specifier)
            if not word:
                continue
            if session.has_entry(word):
                self.presenter.show_warning("Duplicate. Please provide another word!")
                continue

            suggestion = self.translation_service.suggest(word, noun_mode)
            if suggestion is None:
                self.presenter.show_warning(f"No translation found for \"{word}\"")
                target, mode = self._ask(f'Enter translation for "{word}": ')
                if mode is not None:
                    return mode
                self._add_entry(session, word, target)
                continue

            self.presenter.show_info(f"{self.config.source_language.upper()}: {word}")
            self.presenter.show_info(f"{self.config.target_language.upper()}: {suggestion}")
            confirm, mode = self._ask("\nAccept this translation? [y/n]: ")
            if mode is not None:
                return mode

            answer = confirm.strip().lower()
            if answer in ("y", "yes"):
                self._add_entry(session, word, suggestion)
            elif answer in ("n", "no"):
                target, mode = self._ask(f'Enter translation for "{word}": ')
                if mode is not None:
                    return mode
                self._add_entry(session, word, target)
            else:
                self.presenter.show_warning("Invalid input. Skipping...")

    def _add_entry(self, session: SessionState, source_text: str, target_text: str) -> None:
        try:
            entry = session.append_entry(source_text, target_text, self._today())
        except (DuplicateEntryError, ValidationError) as e:
            self.presenter.show_warning(str(e))
            return
        self.presenter.show_success(f"Added {entry}")

    def _test_mode(self, session: SessionState) -> Mode | None:
        self.presenter.show_info("Test mode")
        self.presenter.show_info("-" * 13)

        if session.is_empty():
            self.presenter.show_warning("The vocabulary is empty. Add words in vocabulary mode first.")
            return Mode.MENU

        self.presenter.show_info(f"# words: {len(session.entries)}")
        source_label = self.config.source_language.upper()
        target_label = self.config.target_language.upper()

        while True:
            try:
                index = self.selector.select(session.entries)
            except InvalidStateError as e:
                self.presenter.show_error(str(e))
                return Mode.MENU

            entry = session.entries[index]
            self.presenter.show_info(f"\n{source_label}: {entry.source_text}")
            answer, mode = self._ask(f"{target_label}: ")
            if mode is not None:
                return mode

            correct = answer.strip() == entry.target_text
            session.record_attempt(entry.id, correct, self._clock(), self.scorer)
            if correct:
                self.presenter.show_success("Correct!")
            else:
                self.presenter.show_warning(f"Incorrect! Expected: {entry.target_text}")

    def _preview_mode(self, session: SessionState) -> Mode | None:
        self.presenter.show_info("Preview mode")
        self.presenter.show_info("-" * 16)

        try:
            history = session.merged_activity_history()
        except DrilloException as e:
            self.presenter.show_error(f"Could not read activity history: {e}")
            return Mode.MENU

        stats = self.stats_service.summarize(session.entries, history, self._today())
        self.presenter.show_stats(stats)

        try:
            path = self.report_service.write(session.entries, stats)
            self.presenter.show_info(f"\nReport written to {path}")
        except OSError as e:
            self.presenter.show_error(f"Could not write report: {e}")

        _, mode = self._ask("\nPress Enter for the menu or type a mode key: ")
        return mode or Mode.MENU

    def _quit_mode(self, session: SessionState) -> Mode | None:
        self.presenter.show_info("Saving data...")
        try:
            count = self.bridge.flush(session)
        except PersistenceError as e:
            self.presenter.show_error(f"Could not save: {e}")
            self.presenter.show_warning(
                f"{session.pending_count} unsaved attempts are kept. Quit again to retry."
            )
            return Mode.MENU

        self.presenter.show_success(f"Saved {len(session.entries)} words and {count} attempts")
        self.presenter.show_info("Program terminated!")
        return None

"""Tests for the command-line interface."""

import logging
import sqlite3
from datetime import date
from unittest.mock import patch

import pytest

from drillo.cli.commands.common import open_session
from drillo.cli.main import build_config, create_parser, main
from drillo.config import ConfigManager
from drillo.services import PersistenceBridge, SQLiteVocabularyStore


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Detach handlers installed by setup_logging after each test."""
    yield
    logger = logging.getLogger("drillo")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def config_file(test_config, tmp_path):
    """Write a configuration file pointing at temporary paths."""
    path = tmp_path / "config.json"
    ConfigManager(path).save_config(test_config)
    return path


@pytest.fixture
def seeded_db(test_config):
    """Store one untested entry in the test database."""
    store = SQLiteVocabularyStore(test_config.db_path)
    store.initialize()
    bridge = PersistenceBridge(store)
    session = bridge.open_session()
    session.append_entry("dog", "der Hund", date(2025, 6, 15))
    bridge.flush(session)
    return test_config.db_path


class TestParser:
    """Tests for argument parsing."""

    def test_drill_defaults_to_menu(self):
        args = create_parser().parse_args(["drill"])
        assert args.command == "drill"
        assert args.mode == "m"

    def test_report_options(self):
        args = create_parser().parse_args(["report", "--output", "out.html", "--open"])
        assert args.output == "out.html"
        assert args.open is True

    def test_build_config_overrides(self, config_file, tmp_path):
        args = create_parser().parse_args(
            ["--config", str(config_file), "--db", str(tmp_path / "other.db"), "report", "--open"]
        )
        config = build_config(args)
        assert config.db_path == tmp_path / "other.db"
        assert config.open_report_in_browser is True


class TestMain:
    """Tests for main dispatch."""

    def test_no_command_returns_one(self, capsys):
        assert main([]) == 1

    def test_stats(self, config_file, seeded_db, capsys):
        assert main(["--config", str(config_file), "stats"]) == 0
        output = capsys.readouterr().out
        assert "Total Words" in output

    def test_stats_creates_missing_database(self, config_file, test_config, capsys):
        assert main(["--config", str(config_file), "stats"]) == 0
        assert test_config.db_path.exists()

    def test_report(self, config_file, seeded_db, tmp_path, capsys):
        output_path = tmp_path / "reports" / "vocab.html"
        assert main(["--config", str(config_file), "report", "--output", str(output_path)]) == 0
        assert "der Hund" in output_path.read_text(encoding="utf-8")

    def test_drill_quit_saves(self, config_file, seeded_db, capsys):
        with patch("builtins.input", side_effect=["q"]):
            assert main(["--config", str(config_file), "drill"]) == 0
        assert "Program terminated!" in capsys.readouterr().out

    def test_drill_test_mode_records_attempt(self, config_file, seeded_db, capsys):
        with patch("builtins.input", side_effect=["der Hund", "q"]):
            assert main(["--config", str(config_file), "drill", "--mode", "t"]) == 0
        events = SQLiteVocabularyStore(seeded_db).load_activity_events()
        assert len(events) == 1
        assert events[0].correct is True

    def test_drill_abandoned_session(self, config_file, seeded_db, capsys):
        with patch("builtins.input", side_effect=["der Hund", EOFError()]):
            assert main(["--config", str(config_file), "drill", "--mode", "t"]) == 1
        assert SQLiteVocabularyStore(seeded_db).load_activity_events() == []

    def test_corrupt_database_reports_error(self, config_file, test_config, capsys):
        test_config.db_path.write_text("not a database", encoding="utf-8")
        assert main(["--config", str(config_file), "stats"]) == 1
        assert "[ERROR]" in capsys.readouterr().out

    def test_writes_log_file(self, config_file, test_config, capsys):
        main(["--config", str(config_file), "stats"])
        assert (test_config.log_dir / "drillo.log").exists()

    def test_stats_on_english_german_database(self, config_file, test_config, capsys):
        conn = sqlite3.connect(test_config.db_path)
        with conn:
            conn.execute(
                "CREATE TABLE vocabulary (id INTEGER PRIMARY KEY, english TEXT, german TEXT, "
                "correct_attempts INTEGER, wrong_attempts INTEGER, last_activity TEXT, "
                "score REAL, date_added TEXT)"
            )
            conn.execute(
                "INSERT INTO vocabulary VALUES (1, 'dog', 'der Hund', 1, 0, '2025-06-10', 0.0, '2025-06-01')"
            )
        conn.close()

        assert main(["--config", str(config_file), "stats"]) == 0
        assert "[ERROR]" not in capsys.readouterr().out


class TestOpenSession:
    """Tests for the shared session helper."""

    def test_logs_new_database(self, test_config, caplog):
        with caplog.at_level(logging.INFO, logger="drillo"):
            open_session(test_config)
        assert "creating a new one" in caplog.text
        assert test_config.db_path.exists()

    def test_existing_database_not_reported_as_new(self, test_config, caplog):
        open_session(test_config)
        with caplog.at_level(logging.INFO, logger="drillo"):
            open_session(test_config)
        assert "creating a new one" not in caplog.text

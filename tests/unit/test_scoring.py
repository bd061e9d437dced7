"""Tests for ScoreModel."""

from datetime import date, timedelta

import pytest

from drillo.config import DrilloConfig
from drillo.exceptions import InvalidStateError
from drillo.services.scoring import ScoreModel, accuracy_ratio

TODAY = date(2025, 6, 15)


@pytest.fixture
def scorer():
    """Score model with default weights."""
    return ScoreModel(DrilloConfig())


class TestAccuracyRatio:
    """Tests for the epsilon-guarded accuracy ratio."""

    def test_zero_attempts_is_zero(self):
        assert accuracy_ratio(0, 0, 1e-6) == 0.0

    def test_all_correct_is_close_to_one(self):
        assert accuracy_ratio(10, 0, 1e-6) == pytest.approx(1.0, abs=1e-6)

    def test_mixed(self):
        assert accuracy_ratio(8, 2, 1e-6) == pytest.approx(0.8, abs=1e-6)


class TestWrongness:
    """Tests for the accuracy term."""

    def test_untested_entry_is_maximal(self, scorer, make_entry):
        """Entries with zero attempts should have wrongness exactly 1."""
        assert scorer.wrongness(make_entry()) == 1

    def test_all_correct_is_near_zero(self, scorer, make_entry):
        entry = make_entry(correct_attempts=5)
        assert scorer.wrongness(entry) == pytest.approx(0.0, abs=1e-6)

    def test_negative_counters_raise(self, scorer, make_entry):
        entry = make_entry(correct_attempts=-1)
        with pytest.raises(InvalidStateError):
            scorer.wrongness(entry)


class TestRecencyFraction:
    """Tests for the recency term."""

    def test_tested_today_is_zero(self, scorer, make_entry):
        entry = make_entry(correct_attempts=1, last_activity=TODAY)
        assert scorer.recency_fraction(entry, TODAY) == 0

    def test_thirty_days_is_one(self, scorer, make_entry):
        entry = make_entry(correct_attempts=1, last_activity=TODAY - timedelta(days=30))
        assert scorer.recency_fraction(entry, TODAY) == 1

    def test_beyond_cap_is_one(self, scorer, make_entry):
        entry = make_entry(correct_attempts=1, last_activity=TODAY - timedelta(days=400))
        assert scorer.recency_fraction(entry, TODAY) == 1

    def test_future_date_clamps_to_zero(self, scorer, make_entry):
        entry = make_entry(correct_attempts=1, last_activity=TODAY + timedelta(days=3))
        assert scorer.recency_fraction(entry, TODAY) == 0

    def test_untested_uses_date_added(self, scorer, make_entry):
        entry = make_entry(date_added=TODAY - timedelta(days=15))
        assert scorer.recency_fraction(entry, TODAY) == pytest.approx(0.5)

    def test_monotonic_non_decreasing(self, scorer, make_entry):
        fractions = [
            scorer.recency_fraction(
                make_entry(correct_attempts=1, last_activity=TODAY - timedelta(days=d)), TODAY
            )
            for d in range(0, 40)
        ]
        assert fractions == sorted(fractions)


class TestScore:
    """Tests for the combined score."""

    def test_worked_example(self, scorer, make_entry):
        """8 correct, 2 wrong, last seen 5 days ago scores 0.19."""
        entry = make_entry(
            correct_attempts=8, wrong_attempts=2, last_activity=TODAY - timedelta(days=5)
        )
        assert scorer.score(entry, TODAY) == 0.19

    def test_new_entry_added_today(self, scorer, make_entry):
        """A fresh entry is dominated by the accuracy weight."""
        assert scorer.score(make_entry(), TODAY) == 0.6

    def test_maximum_score(self, scorer, make_entry):
        entry = make_entry(date_added=TODAY - timedelta(days=60))
        assert scorer.score(entry, TODAY) == 1.0

    def test_rounded_to_configured_digits(self, make_entry):
        scorer = ScoreModel(DrilloConfig(rounding_digits=4))
        entry = make_entry(
            correct_attempts=8, wrong_attempts=2, last_activity=TODAY - timedelta(days=5)
        )
        assert scorer.score(entry, TODAY) == 0.1867

    def test_custom_weights(self, make_entry):
        scorer = ScoreModel(DrilloConfig(accuracy_weight=1.0, recency_weight=1.0))
        entry = make_entry(date_added=TODAY - timedelta(days=30))
        assert scorer.score(entry, TODAY) == 2.0

    def test_never_negative(self, scorer, make_entry):
        entry = make_entry(correct_attempts=100, last_activity=TODAY + timedelta(days=10))
        assert scorer.score(entry, TODAY) >= 0


class TestUpdateScores:
    """Tests for update_score and update_all_scores."""

    def test_update_score_stores_value(self, scorer, make_entry):
        entry = make_entry()
        result = scorer.update_score(entry, TODAY)
        assert entry.score == result == 0.6

    def test_update_all_scores(self, scorer, make_entry):
        entries = [
            make_entry(id=1),
            make_entry(id=2, correct_attempts=10, last_activity=TODAY),
        ]
        scorer.update_all_scores(entries, TODAY)
        assert entries[0].score == 0.6
        assert entries[1].score == 0.0

    def test_update_all_scores_is_idempotent(self, scorer, make_entry):
        entries = [
            make_entry(id=i, correct_attempts=i, wrong_attempts=3, last_activity=TODAY - timedelta(days=i))
            for i in range(1, 8)
        ]
        scorer.update_all_scores(entries, TODAY)
        first = [e.score for e in entries]
        scorer.update_all_scores(entries, TODAY)
        assert [e.score for e in entries] == first

    def test_update_all_scores_ignores_stale_stored_score(self, scorer, make_entry):
        entry = make_entry(score=42.0)
        scorer.update_all_scores([entry], TODAY)
        assert entry.score == 0.6

    def test_empty_collection_is_noop(self, scorer):
        scorer.update_all_scores([], TODAY)

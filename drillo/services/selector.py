"""Weighted random selection of the next word to practise."""

import math
import random
from collections.abc import Sequence

from drillo.config import DrilloConfig
from drillo.exceptions import InvalidStateError
from drillo.models import VocabularyEntry


class WeightedSelector:
    """Sample one entry, biased toward high scores.

    Each score gets independent uniform jitter so that mid-priority words
    are not starved and ties are broken randomly. Weights are floored at a
    small positive minimum so every entry stays reachable.
    """

    def __init__(self, config: DrilloConfig, rng: random.Random | None = None):
        """Initialize the selector.

        Args:
            config: Configuration providing noise amplitude and minimum weight
            rng: Random source (a fresh unseeded one if omitted)
        """
        self.config = config
        self._rng = rng or random.Random()

    def weights(self, entries: Sequence[VocabularyEntry]) -> list[float]:
        """Compute the jittered selection weight of every entry.

        Raises:
            InvalidStateError: If a score is missing, negative or NaN
        """
        digits = self.config.rounding_digits + 1
        weights = []
        for entry in entries:
            score = entry.score
            if score is None or math.isnan(score) or score < 0:
                raise InvalidStateError(f"Entry {entry.id} has an invalid score: {score!r}")
            noise = self._rng.random() * self.config.noise_amplitude
            weights.append(max(round(score + noise, digits), self.config.min_weight))
        return weights

    def select(self, entries: Sequence[VocabularyEntry]) -> int:
        """Draw the index of the entry to practise next.

        Args:
            entries: Non-empty vocabulary with scores already computed

        Returns:
            Zero-based index into entries

        Raises:
            InvalidStateError: If entries is empty or holds an invalid score
        """
        if not entries:
            raise InvalidStateError("Cannot select a word from an empty vocabulary")

        weights = self.weights(entries)
        return self._rng.choices(range(len(entries)), weights=weights, k=1)[0]

"""Configuration classes for Drillo."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class DrilloConfig:
    """Immutable configuration for scoring, selection and storage.

    All configuration is frozen (immutable) so that scoring and selection
    behave identically for the whole lifetime of a session.
    """

    # Scoring settings
    accuracy_weight: float = 0.6
    recency_weight: float = 0.4
    epsilon: float = 1e-6  # Guards the accuracy ratio for untested words
    recency_cap_days: int = 30  # Beyond this recency contributes its maximum
    rounding_digits: int = 2

    # Selection settings
    noise_amplitude: float = 0.15  # Jitter added to each score before the draw
    min_weight: float = 0.001  # No entry ever gets a zero selection weight

    # Statistics settings
    staleness_days: int = 10

    # Storage settings
    db_path: Path = field(default_factory=lambda: Path.home() / ".drillo" / "database.db")
    report_path: Path = field(
        default_factory=lambda: Path.home() / ".drillo" / "vocabulary_table.html"
    )
    log_dir: Path = field(default_factory=lambda: Path.home() / ".drillo" / "log")
    open_report_in_browser: bool = False

    # Translation settings
    translate_url: str = "https://translate.googleapis.com/translate_a/single"
    source_language: str = "en"
    target_language: str = "de"
    translate_timeout: float = 10.0

    def __post_init__(self):
        """Convert string paths to Path objects and check tunables."""
        if isinstance(self.db_path, str):
            object.__setattr__(self, "db_path", Path(self.db_path))
        if isinstance(self.report_path, str):
            object.__setattr__(self, "report_path", Path(self.report_path))
        if isinstance(self.log_dir, str):
            object.__setattr__(self, "log_dir", Path(self.log_dir))

        if self.epsilon <= 0:
            raise ValueError(f"epsilon must be positive, got {self.epsilon}")
        if self.min_weight <= 0:
            raise ValueError(f"min_weight must be positive, got {self.min_weight}")
        if self.accuracy_weight < 0 or self.recency_weight < 0:
            raise ValueError("scoring weights must not be negative")
        if self.noise_amplitude < 0:
            raise ValueError(f"noise_amplitude must not be negative, got {self.noise_amplitude}")
        if self.recency_cap_days <= 0:
            raise ValueError(f"recency_cap_days must be positive, got {self.recency_cap_days}")

"""Null presenter for testing (no output)."""

from drillo.models import VocabularyStats


class NullPresenter:
    """Present output to nowhere and answer every prompt with "q".

    Answering "q" means any loop driven by this presenter quits at the
    first prompt instead of blocking.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_stats(self, stats: VocabularyStats) -> None:
        """Display vocabulary statistics (no-op)."""
        pass

    def prompt(self, message: str) -> str:
        """Answer with the quit key."""
        return "q"

"""Presenter protocol for terminal interaction."""

from typing import Protocol

from drillo.models import VocabularyStats


class PresenterProtocol(Protocol):
    """Interface for talking to the user (console, tests, etc).

    This protocol abstracts all input and output, allowing the drilling loop
    to run unchanged against a real terminal or a scripted test double.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_success(self, message: str) -> None:
        """Display a success message.

        Args:
            message: The success message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_stats(self, stats: VocabularyStats) -> None:
        """Display vocabulary statistics.

        Args:
            stats: The statistics to display
        """
        ...

    def prompt(self, message: str) -> str:
        """Ask the user for a line of input.

        Args:
            message: Prompt text shown before the cursor

        Returns:
            The line entered by the user, without the trailing newline
        """
        ...

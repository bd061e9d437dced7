"""Console presenter for terminal interaction."""

from drillo.models import VocabularyStats


class ConsolePresenter:
    """Present output to and read input from the console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_stats(self, stats: VocabularyStats) -> None:
        """Display vocabulary statistics as an aligned two-column list."""
        items = stats.display_items()
        width = max(len(label) for label, _ in items)
        print("\nVocabulary Statistics:")
        print("=" * (width + 12))
        for label, value in items:
            print(f"  {label:<{width}}  {value}")

    def prompt(self, message: str) -> str:
        """Read one line of input after showing message."""
        return input(message)

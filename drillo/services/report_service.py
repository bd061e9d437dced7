"""HTML report of the vocabulary table and statistics."""

import html
import logging
import webbrowser
from collections.abc import Sequence
from pathlib import Path

from drillo.config import DrilloConfig
from drillo.models import VocabularyEntry, VocabularyStats
from drillo.services.scoring import accuracy_ratio
from drillo.utils import format_last_activity

logger = logging.getLogger(__name__)

TABLE_HEADER = ["ID", "Source", "Target", "✅", "❌", "Last Seen", "Score", "Added"]

PAGE_STYLE = """
body { font-family: sans-serif; margin: 2em; }
table { border-collapse: collapse; margin-bottom: 2em; }
th, td { border-bottom: 1px solid #ccc; padding: 4px 10px; text-align: left; }
th { border-bottom: 2px solid #333; }
.weak { color: red; font-weight: bold; }
"""


class ReportService:
    """Render the vocabulary as a standalone HTML page.

    Target words of entries whose accuracy falls below the first accuracy
    quartile are highlighted.
    """

    def __init__(self, config: DrilloConfig):
        self.config = config

    def is_weak(self, entry: VocabularyEntry, threshold: float) -> bool:
        """Check if an entry's accuracy is below the highlight threshold."""
        accuracy = accuracy_ratio(entry.correct_attempts, entry.wrong_attempts, self.config.epsilon)
        return accuracy < threshold

    def render(self, vocabulary: Sequence[VocabularyEntry], stats: VocabularyStats) -> str:
        """Build the HTML page.

        Args:
            vocabulary: Entries to list
            stats: Summary metrics; q1_accuracy is the highlight threshold

        Returns:
            Complete HTML document
        """
        header_cells = "".join(f"<th>{html.escape(h)}</th>" for h in TABLE_HEADER)
        rows = [self._render_row(entry, stats.q1_accuracy) for entry in vocabulary]
        metric_rows = "".join(
            f"<tr><td>{html.escape(label)}</td><td>{value}</td></tr>"
            for label, value in stats.display_items()
        )

        return (
            "<!DOCTYPE html>\n"
            '<html>\n<head>\n<meta charset="utf-8">\n'
            "<title>Drillo Vocabulary</title>\n"
            f"<style>{PAGE_STYLE}</style>\n"
            "</head>\n<body>\n"
            "<h1>Vocabulary</h1>\n"
            f"<table>\n<thead><tr>{header_cells}</tr></thead>\n"
            f"<tbody>\n{''.join(rows)}</tbody>\n</table>\n"
            "<h2>Statistics</h2>\n"
            f"<table>\n<tbody>\n{metric_rows}\n</tbody>\n</table>\n"
            "</body>\n</html>\n"
        )

    def _render_row(self, entry: VocabularyEntry, threshold: float) -> str:
        target_class = ' class="weak"' if self.is_weak(entry, threshold) else ""
        cells = [
            f"<td>{entry.id}</td>",
            f"<td>{html.escape(entry.source_text)}</td>",
            f"<td{target_class}>{html.escape(entry.target_text)}</td>",
            f"<td>{entry.correct_attempts}</td>",
            f"<td>{entry.wrong_attempts}</td>",
            f"<td>{html.escape(format_last_activity(entry.last_activity))}</td>",
            f"<td>{entry.score:.{self.config.rounding_digits}f}</td>",
            f"<td>{entry.date_added.isoformat()}</td>",
        ]
        return f"<tr>{''.join(cells)}</tr>\n"

    def write(
        self,
        vocabulary: Sequence[VocabularyEntry],
        stats: VocabularyStats,
        output_path: Path | None = None,
    ) -> Path:
        """Render the report and write it to disk.

        Args:
            vocabulary: Entries to list
            stats: Summary metrics
            output_path: Destination (defaults to config.report_path)

        Returns:
            Path of the written report
        """
        path = Path(output_path) if output_path else self.config.report_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(vocabulary, stats), encoding="utf-8")
        logger.info(f"Wrote vocabulary report to {path}")

        if self.config.open_report_in_browser:
            webbrowser.open(path.resolve().as_uri())
        return path

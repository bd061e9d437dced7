"""CLI command for writing the HTML vocabulary report."""

from datetime import date

from drillo.cli.commands.common import open_session
from drillo.config import DrilloConfig
from drillo.exceptions import DrilloException
from drillo.presenters import ConsolePresenter
from drillo.services import ReportService, ScoreModel, StatsService


def report_command(args, config: DrilloConfig) -> int:
    """Execute the report subcommand.

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    today = date.today()

    try:
        _, session = open_session(config)
        history = session.merged_activity_history()
    except DrilloException as e:
        presenter.show_error(f"Could not load vocabulary: {e}")
        return 1

    ScoreModel(config).update_all_scores(session.entries, today)
    stats = StatsService(config).summarize(session.entries, history, today)

    try:
        path = ReportService(config).write(session.entries, stats)
    except OSError as e:
        presenter.show_error(f"Could not write report: {e}")
        return 1

    presenter.show_success(f"Report written to {path}")
    return 0

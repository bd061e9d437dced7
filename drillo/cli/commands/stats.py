"""CLI command for printing vocabulary statistics."""

from datetime import date

from drillo.cli.commands.common import open_session
from drillo.config import DrilloConfig
from drillo.exceptions import DrilloException
from drillo.presenters import ConsolePresenter
from drillo.services import StatsService


def stats_command(args, config: DrilloConfig) -> int:
    """Execute the stats subcommand.

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()

    try:
        _, session = open_session(config)
        history = session.merged_activity_history()
    except DrilloException as e:
        presenter.show_error(f"Could not load vocabulary: {e}")
        return 1

    stats = StatsService(config).summarize(session.entries, history, date.today())
    presenter.show_stats(stats)
    return 0

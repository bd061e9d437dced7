"""CLI command for an interactive drilling session."""

import logging

from drillo.cli.commands.common import open_session
from drillo.config import DrilloConfig
from drillo.exceptions import DrilloException
from drillo.orchestration import DrillLoop, Mode
from drillo.presenters import ConsolePresenter

logger = logging.getLogger(__name__)


def drill_command(args, config: DrilloConfig) -> int:
    """Execute the drill subcommand.

    Args:
        args: Parsed command-line arguments
        config: Loaded configuration

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()

    try:
        bridge, session = open_session(config)
    except DrilloException as e:
        presenter.show_error(f"Could not load vocabulary: {e}")
        return 1

    loop = DrillLoop(config, session, bridge, presenter)
    try:
        loop.run(start_mode=Mode(args.mode))
    except (KeyboardInterrupt, EOFError):
        presenter.show_warning(f"\nSession abandoned, {session.pending_count} unsaved attempts discarded")
        logger.info(f"Session abandoned with {session.pending_count} buffered events")
        return 1
    except DrilloException as e:
        presenter.show_error(f"Error: {e}")
        return 1

    return 0

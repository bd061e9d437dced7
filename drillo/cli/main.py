"""Main CLI entry point for drillo."""

import argparse
import sys
from pathlib import Path

from drillo import __version__
from drillo.cli.commands import drill, report, stats
from drillo.cli.logging_setup import setup_logging
from drillo.config import ConfigManager, DrilloConfig
from drillo.config.config_manager import DEFAULT_CONFIG_FILE


def build_config(args) -> DrilloConfig:
    """Load the configuration file and apply command-line overrides."""
    overrides = {}
    if getattr(args, "db", None):
        overrides["db_path"] = Path(args.db)
    if getattr(args, "output", None):
        overrides["report_path"] = Path(args.output)
    if getattr(args, "open", False):
        overrides["open_report_in_browser"] = True
    return ConfigManager(Path(args.config)).load_config(**overrides)


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="drillo",
        description="Adaptive vocabulary drilling in the terminal",
        epilog="Use 'drillo <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_FILE),
        help="Path to the JSON configuration file",
    )
    parser.add_argument("--db", help="Path to the vocabulary database (overrides config)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # drillo drill
    drill_parser = subparsers.add_parser(
        "drill",
        help="Start an interactive session",
        description="Add words and practise them, steered by accuracy and recency",
    )
    drill_parser.add_argument(
        "--mode",
        choices=["m", "v", "t", "p"],
        default="m",
        help="Mode to start in (m=menu, v=vocabulary, t=test, p=preview)",
    )

    # drillo stats
    subparsers.add_parser(
        "stats",
        help="Print vocabulary statistics",
        description="Summarize accuracy and recency over the stored vocabulary",
    )

    # drillo report
    report_parser = subparsers.add_parser(
        "report",
        help="Write the HTML vocabulary report",
        description="Render the vocabulary table and statistics as an HTML page",
    )
    report_parser.add_argument("--output", help="Report path (overrides config)")
    report_parser.add_argument(
        "--open",
        action="store_true",
        help="Open the report in the default browser",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = build_config(args)
    setup_logging(config.log_dir, verbose=args.verbose)

    # Dispatch to appropriate command
    if args.command == "drill":
        return drill.drill_command(args, config)
    elif args.command == "stats":
        return stats.stats_command(args, config)
    elif args.command == "report":
        return report.report_command(args, config)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())

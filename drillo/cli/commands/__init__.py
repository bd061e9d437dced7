"""CLI subcommands for Drillo."""

"""Command line interface for Drillo."""

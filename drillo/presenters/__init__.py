"""Presenter implementations for user interaction."""

from .console_presenter import ConsolePresenter
from .null_presenter import NullPresenter

__all__ = [
    "ConsolePresenter",
    "NullPresenter",
]

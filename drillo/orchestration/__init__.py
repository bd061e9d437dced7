"""Orchestration layer for interactive drilling."""

from .drill_loop import MENU_LEGEND, DrillLoop, Mode, parse_mode

__all__ = ["DrillLoop", "Mode", "MENU_LEGEND", "parse_mode"]

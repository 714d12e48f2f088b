"""Console handlers for bridge repositories."""

from __future__ import annotations

from .rich_console import CONSOLE_STYLE_THEMES, RichConsoleHandler

__all__ = ["CONSOLE_STYLE_THEMES", "RichConsoleHandler"]

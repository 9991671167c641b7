"""Utility modules for showlog."""

from .formatters import format_dir_entry, format_nuke_entry

__all__ = ["format_dir_entry", "format_nuke_entry"]

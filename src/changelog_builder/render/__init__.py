"""
Markdown rendering of changelog sections.
"""

from .renderer import format_entry, render_changelog  # noqa: F401

"""
Configuration loading for changelog_builder.

Provides a loader for the optional ``.changelog_config.json`` file located
in the repository root. See :mod:`changelog_builder.config.loader` for
implementation details.
"""

from .loader import ChangelogConfig, ConfigError, load_config  # noqa: F401

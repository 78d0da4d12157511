"""
Commit line parsing.

See :mod:`changelog_builder.parsing.commit_parser`.
"""

from .commit_parser import parse_commit_line, parse_commits  # noqa: F401

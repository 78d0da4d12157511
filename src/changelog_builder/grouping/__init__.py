"""
Grouping logic for changelog entries.

This package attributes commits to components, filters out PRs already
recorded in the changelog, and buckets entries by change type and
component. See :mod:`changelog_builder.grouping.grouper` for the
bucketing rules.
"""

from .component_resolver import resolve_components  # noqa: F401
from .dedup_filter import filter_existing_entries  # noqa: F401
from .record_model import ChangelogSection, CommitRecord, GroupKey  # noqa: F401

"""
Bucketing of commit records into changelog sections.

Each (record, component) pair is filed under a :class:`GroupKey` made of
a bucket label and the component name:

* ``feat`` commits go to ``Added``,
* maintenance types (chore, style, refactor, test, build, ci, revert)
  are left out,
* everything else, including commits without a type, goes to ``Fixed``.

A commit attributed to several components is listed once per component.
Sections are ordered by the ``"bucket|component"`` string of their key and
keep entries in commit order.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from changelog_builder.config.loader import ChangelogConfig
from changelog_builder.grouping.record_model import ChangelogSection, CommitRecord, GroupKey
from changelog_builder.render.renderer import format_entry


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


IGNORED_TYPES = frozenset({"chore", "style", "refactor", "test", "build", "ci", "revert"})
ADDED = "Added"
FIXED = "Fixed"


def generate_key(component: str, change_type: Optional[str]) -> Optional[GroupKey]:
    """Return the key ``component`` is filed under, or None if ignored."""
    if change_type in IGNORED_TYPES:
        return None
    bucket = ADDED if change_type == "feat" else FIXED
    return GroupKey(bucket=bucket, component=component)


def group_records(
    records: Iterable[CommitRecord],
    config: ChangelogConfig,
    verbose: bool = False,
) -> List[ChangelogSection]:
    """Group records into sorted changelog sections.

    Parameters
    ----------
    records : Iterable[CommitRecord]
        Records in log order, already filtered against the changelog.
    config : ChangelogConfig
        Supplies the PR URL used in every entry.
    verbose : bool
        Log the resulting sections.

    Returns
    -------
    List[ChangelogSection]
        One section per key, sorted by ``str(key)``.
    """
    grouped: Dict[GroupKey, List[str]] = {}
    for record in records:
        # sorted for reproducible logs; each component maps to its own key
        for component in sorted(record.component_names):
            key = generate_key(component, record.change_type)
            if key is None:
                continue
            grouped.setdefault(key, []).append(format_entry(record, config.pr_url_template))

    sections = [
        ChangelogSection(bucket=key.bucket, component=key.component, entries=entries)
        for key, entries in sorted(grouped.items(), key=lambda item: str(item[0]))
    ]
    if verbose:
        logger.info("Sorted messages by type and component name:")
        for section in sections:
            logger.info("%s|%s: %s", section.bucket, section.component, section.entries)
    return sections

"""
Removal of commits whose PR is already recorded in the changelog.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from changelog_builder.grouping.record_model import CommitRecord


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


PR_ALREADY_EXISTS_MESSAGE = "Filtered PR number %s. An entry already exists in the changelog."


def pr_reference(pr_number: str) -> str:
    """Return the text every rendered entry uses to cite ``pr_number``."""
    return f"PR #{pr_number}"


def filter_existing_entries(
    records: Iterable[CommitRecord],
    changelog_text: str,
    verbose: bool = False,
) -> List[CommitRecord]:
    """Drop records whose PR reference already occurs in ``changelog_text``.

    This is a plain substring check against the whole document; the
    existing changelog is not parsed. Order of the kept records is
    preserved.
    """
    kept: List[CommitRecord] = []
    for record in records:
        if pr_reference(record.pr_number) not in changelog_text:
            kept.append(record)
        elif verbose:
            logger.info(PR_ALREADY_EXISTS_MESSAGE, record.pr_number)
    return kept

"""
Rendering of grouped changelog sections into Markdown.

The produced block has the heading hierarchy the changelog has always
used::

    # 46.7.0 - Month DD, YYYY

    ## Added

    #### salesforcedx-vscode-core

    - Improve hover text ([PR #1234](https://github.com/.../pull/1234))

The date is a placeholder that the release manager fills in by hand.
"""

from __future__ import annotations

from typing import Iterable

from changelog_builder.grouping.dedup_filter import pr_reference
from changelog_builder.grouping.record_model import ChangelogSection, CommitRecord


LOG_HEADER = "# {release} - Month DD, YYYY\n"
TYPE_HEADER = "\n## {bucket}\n"
SECTION_HEADER = "\n#### {component}\n"
ENTRY_FORMAT = "- {message} ([{reference}]({url}{pr_number}))"


def format_entry(record: CommitRecord, pr_url_template: str) -> str:
    """Return the bullet line for ``record``."""
    return ENTRY_FORMAT.format(
        message=record.message,
        reference=pr_reference(record.pr_number),
        url=pr_url_template,
        pr_number=record.pr_number,
    )


def render_changelog(release: str, sections: Iterable[ChangelogSection]) -> str:
    """Render the changelog block for ``release``.

    Parameters
    ----------
    release : str
        Release version shown in the top heading, e.g. ``46.7.0``.
    sections : Iterable[ChangelogSection]
        Sections sorted so that equal buckets are contiguous, as returned
        by :func:`changelog_builder.grouping.grouper.group_records`.

    Returns
    -------
    str
        The Markdown block, ready to be prepended to the changelog.
    """
    parts = [LOG_HEADER.format(release=release)]
    last_bucket = None
    for section in sections:
        if section.bucket != last_bucket:
            parts.append(TYPE_HEADER.format(bucket=section.bucket))
            last_bucket = section.bucket
        parts.append(SECTION_HEADER.format(component=section.component))
        for entry in section.entries:
            parts.append(f"\n{entry}\n")
    parts.append("\n")
    return "".join(parts)

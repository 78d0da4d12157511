"""
Changelog generation pipeline.

:func:`build_changelog` turns the raw commit lines of a release into the
Markdown block for that release: commits are parsed and attributed to
components, PRs already present in the changelog are dropped, and the
rest is grouped and rendered.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from changelog_builder.config.loader import ChangelogConfig
from changelog_builder.grouping.dedup_filter import filter_existing_entries
from changelog_builder.grouping.grouper import group_records
from changelog_builder.parsing.commit_parser import parse_commits
from changelog_builder.render.renderer import render_changelog


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


def build_changelog(
    release: str,
    commit_lines: Iterable[Optional[str]],
    files_lookup: Callable[[str], List[str]],
    existing_changelog: str,
    config: ChangelogConfig,
    verbose: bool = False,
) -> str:
    """Build the changelog block for ``release``.

    Parameters
    ----------
    release : str
        Release version used in the top heading.
    commit_lines : Iterable[Optional[str]]
        ``git log --oneline`` lines, newest first.
    files_lookup : Callable[[str], List[str]]
        Returns the paths changed by a commit id.
    existing_changelog : str
        Current changelog text, used to skip PRs already documented.
    config : ChangelogConfig
        Attribution and rendering settings.
    verbose : bool
        Log the intermediate results of every step.

    Returns
    -------
    str
        The rendered block.
    """
    records = parse_commits(commit_lines, files_lookup, config, verbose=verbose)
    logger.debug("Parsed %d commit record(s)", len(records))
    records = filter_existing_entries(records, existing_changelog, verbose=verbose)
    logger.debug("%d record(s) remain after removing documented PRs", len(records))
    sections = group_records(records, config, verbose=verbose)
    return render_changelog(release, sections)

"""
Parsing of ``git log --oneline`` lines into commit records.

Commit subjects are free text, so extraction is heuristic. The patterns
below are matched exactly as the existing changelog tooling always has:

* the PR token is the first ``(#<digits>)`` anywhere in the line,
* the commit id is the alphanumeric run at the start of the line,
* the change type is the first ``word:`` or ``word(scope):`` in what
  remains (searched, not anchored).

Lines that lack a PR token or a commit id are skipped without error.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, List, Optional

from changelog_builder.config.loader import ChangelogConfig
from changelog_builder.grouping.component_resolver import resolve_components
from changelog_builder.grouping.record_model import CommitRecord


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


PR_REGEX = re.compile(r"(\(#\d+\))")
COMMIT_REGEX = re.compile(r"^([\da-zA-Z]+)")
TYPE_REGEX = re.compile(r"([a-zA-Z]+)(?:\([a-zA-Z]+\))?:")


def _capitalize_first(text: str) -> str:
    # str.capitalize() would lowercase the rest of the subject
    return text[:1].upper() + text[1:]


def parse_commit_line(line: Optional[str]) -> Optional[CommitRecord]:
    """Parse a single commit line.

    Parameters
    ----------
    line : Optional[str]
        A line such as ``"ab12cd3 feat: improve hover text (#1234)"``.

    Returns
    -------
    Optional[CommitRecord]
        The parsed record without file information, or None if the line
        has no PR token or no leading commit id.
    """
    if not line:
        return None
    pr_match = PR_REGEX.search(line)
    commit_match = COMMIT_REGEX.search(line)
    if not (pr_match and commit_match):
        return None

    message = line.replace(commit_match.group(0), "", 1).replace(pr_match.group(0), "", 1)
    change_type = None
    type_match = TYPE_REGEX.search(message)
    if type_match:
        change_type = type_match.group(1)
        message = message.replace(type_match.group(0), "", 1)

    return CommitRecord(
        pr_number=re.sub(r"\D", "", pr_match.group(0)),
        commit_id=commit_match.group(0),
        change_type=change_type,
        message=_capitalize_first(message.strip()),
    )


def parse_commits(
    lines: Iterable[Optional[str]],
    files_lookup: Callable[[str], List[str]],
    config: ChangelogConfig,
    verbose: bool = False,
) -> List[CommitRecord]:
    """Parse commit lines and attribute each record to its components.

    Parameters
    ----------
    lines : Iterable[Optional[str]]
        Raw commit lines in log order.
    files_lookup : Callable[[str], List[str]]
        Returns the paths touched by a commit id, typically
        :meth:`GitClient.get_files_changed`.
    config : ChangelogConfig
        Component attribution settings.
    verbose : bool
        Log every line and its parse result.
    """
    records: List[CommitRecord] = []
    for line in lines:
        record = parse_commit_line(line)
        if record is not None:
            record.files_changed = list(files_lookup(record.commit_id))
            record.component_names = resolve_components(record.files_changed, config)
            records.append(record)
        if verbose:
            logger.info("Commit: %s", line)
            logger.info("Commit record: %s", record)
    return records

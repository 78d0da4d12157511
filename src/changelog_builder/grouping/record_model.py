"""
Data models for changelog grouping.

A :class:`CommitRecord` is the structured form of one commit line. Records
are bucketed under a :class:`GroupKey` and emitted as an ordered list of
:class:`ChangelogSection` objects, which the renderer turns into text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set


@dataclass
class CommitRecord:
    """Representation of a parsed commit.

    Attributes
    ----------
    pr_number : str
        Pull request number, digits only.
    commit_id : str
        Abbreviated commit hash.
    change_type : Optional[str]
        Conventional Commit type (feat, fix, chore, ...) if present.
    message : str
        Subject text with the first letter capitalised.
    files_changed : List[str]
        Paths touched by the commit.
    component_names : Set[str]
        Components the commit is attributed to.
    """

    pr_number: str
    commit_id: str
    change_type: Optional[str]
    message: str
    files_changed: List[str] = field(default_factory=list)
    component_names: Set[str] = field(default_factory=set)


@dataclass(frozen=True)
class GroupKey:
    """Bucket label and component a changelog entry is filed under."""

    bucket: str
    component: str

    def __str__(self) -> str:
        return f"{self.bucket}|{self.component}"


@dataclass
class ChangelogSection:
    """Entries for one component within one bucket, in commit order."""

    bucket: str
    component: str
    entries: List[str] = field(default_factory=list)

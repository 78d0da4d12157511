"""
Release branch selection.

Release branches are remote branches named ``<prefix><version>``, for
example ``origin/release/v46.7.0``. The release to document is either the
version passed on the command line or the most recently created release
branch; the previous release is the branch created just before it.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from changelog_builder.config.loader import ChangelogConfig
from changelog_builder.vcs.git_client import GitClient


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


VERSION_PATTERN = r"\d{2}\.\d{1,2}\.\d"


class ReleaseError(Exception):
    """Raised when the release or the previous release cannot be determined."""

    pass


def to_release_branch(version: str, config: ChangelogConfig) -> str:
    """Return the remote branch name for ``version``."""
    return config.release_branch_prefix + version


def release_version(branch: str, config: ChangelogConfig) -> str:
    """Strip the release prefix from ``branch``."""
    return branch.replace(config.release_branch_prefix, "", 1)


def changelog_branch_name(branch: str, config: ChangelogConfig) -> str:
    """Return the local branch the changelog for ``branch`` is written on."""
    return config.changelog_branch_prefix + release_version(branch, config)


def validate_release_branch(branch: Optional[str], config: ChangelogConfig) -> str:
    """Check that ``branch`` names a release and return it.

    Raises
    ------
    ReleaseError
        If ``branch`` is empty or does not look like
        ``<prefix>xx.yy.z``.
    """
    pattern = "^" + re.escape(config.release_branch_prefix) + VERSION_PATTERN
    if not (branch and re.match(pattern, branch)):
        raise ReleaseError(f"Invalid release '{branch}'. Expected format [xx.yy.z].")
    return branch


def _release_branches(client: GitClient, config: ChangelogConfig) -> List[str]:
    return client.list_remote_branches(config.release_branch_prefix)


def get_release_branch(
    client: GitClient,
    config: ChangelogConfig,
    override: Optional[str] = None,
) -> str:
    """Return the release branch to document.

    Parameters
    ----------
    client : GitClient
        Used to list release branches when no override is given.
    config : ChangelogConfig
        Supplies the release branch prefix.
    override : Optional[str]
        Release version such as ``46.7.0`` given by the user.
    """
    if override:
        branch: Optional[str] = to_release_branch(override, config)
    else:
        branches = _release_branches(client, config)
        branch = branches[0] if branches else None
    logger.debug("Candidate release branch: %s", branch)
    return validate_release_branch(branch, config)


def get_previous_release_branch(
    client: GitClient,
    release_branch: str,
    config: ChangelogConfig,
) -> str:
    """Return the release branch created right before ``release_branch``.

    Raises
    ------
    ReleaseError
        If ``release_branch`` is not listed or is the oldest release.
    """
    branches = _release_branches(client, config)
    if release_branch in branches:
        index = branches.index(release_branch)
        if index + 1 < len(branches):
            return branches[index + 1]
    raise ReleaseError("Unable to retrieve previous release.")

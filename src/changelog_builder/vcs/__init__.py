"""
Version control system (VCS) integration.

Contains the Git client used to discover release branches, list the
commits unique to a release, look up the files each commit touched, and
publish the generated changelog.
"""

from .git_client import GitClient, GitError  # noqa: F401

"""
Git client implementation for changelog_builder.

This module wraps the Git operations the changelog generator depends on:
listing release branches, querying the commits unique to a release,
listing the files touched by a commit, and preparing and publishing the
changelog branch. All subprocess calls go through :meth:`GitClient._run`
so that unit tests can mock them easily.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional


logger = logging.getLogger(__name__)
# Attach a null handler to avoid logging errors when the root logger is not
# configured. Logs will propagate to the root when configured by the CLI.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class GitError(Exception):
    """Raised when a Git command fails."""

    pass


def _split_lines(output: str) -> List[str]:
    return [line.strip() for line in output.splitlines() if line.strip()]


class GitClient:
    """Client for interacting with a Git repository."""

    def __init__(self, repo_root: Path) -> None:
        self.repo_root = repo_root

    # ------------------------------------------------------------------
    # Static helpers
    # ------------------------------------------------------------------
    @staticmethod
    def find_repo_root(start: Path) -> Optional[Path]:
        """Find the root of the Git repository starting from ``start``.

        Walk upwards until a ``.git`` directory is found or the filesystem
        root is reached.
        """
        current = start.resolve()
        while True:
            if (current / ".git").exists():
                return current
            if current.parent == current:
                # reached filesystem root
                return None
            current = current.parent

    # ------------------------------------------------------------------
    # Basic Git commands
    # ------------------------------------------------------------------
    def _run(self, args: List[str], check: bool = True) -> subprocess.CompletedProcess:
        """Run a Git command in the repository root.

        Raises
        ------
        GitError
            If the command exits with a non-zero status when ``check`` is True.
        """
        full_cmd = ["git"] + args
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding='utf-8',
                errors='replace',  # Replace invalid characters instead of failing
            )
        except FileNotFoundError as e:
            logger.error("Git executable not found: %s", e)
            raise GitError(f"Git executable not found: {e}") from e

        if check and result.returncode != 0:
            logger.error(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
            raise GitError(result.stderr.strip() or result.stdout.strip())
        return result

    # ------------------------------------------------------------------
    # History queries
    # ------------------------------------------------------------------
    def list_remote_branches(self, prefix: str) -> List[str]:
        """List remote branches starting with ``prefix``, newest first.

        Parameters
        ----------
        prefix : str
            Branch prefix such as ``origin/release/v``.

        Returns
        -------
        List[str]
            Branch names sorted in reverse order of creation date, so the
            first entry is the latest branch.
        """
        result = self._run(
            ["branch", "--remotes", "--list", "--sort=-creatordate", f"{prefix}*"],
            check=True,
        )
        return _split_lines(result.stdout)

    def get_commits(self, release_branch: str, previous_branch: str) -> List[str]:
        """Return one-line summaries of commits that differ between two branches.

        ``--cherry-pick`` with the symmetric difference omits commits that
        were cherry-picked onto both branches, so only the changes new to
        the release remain.
        """
        result = self._run(
            ["log", "--cherry-pick", "--oneline", f"{release_branch}...{previous_branch}"],
            check=True,
        )
        return _split_lines(result.stdout)

    def get_files_changed(self, commit_id: str) -> List[str]:
        """Return the paths touched by ``commit_id``."""
        result = self._run(["show", "--pretty=", "--name-only", commit_id], check=True)
        return _split_lines(result.stdout)

    # ------------------------------------------------------------------
    # Branch operations
    # ------------------------------------------------------------------
    def branch_exists(self, branch_name: str) -> bool:
        """Return True if a local branch named ``branch_name`` exists."""
        result = self._run(["branch", "--list", branch_name], check=False)
        return bool(result.stdout.strip())

    def checkout_changelog_branch(self, branch_name: str, start_point: str) -> bool:
        """Switch to the changelog branch, creating it from ``start_point``.

        If the branch already exists it is checked out as is, so that new
        changes are appended to a previous run.

        Returns
        -------
        bool
            True if the branch was created, False if it already existed.
        """
        if self.branch_exists(branch_name):
            self._run(["checkout", branch_name], check=True)
            return False
        self._run(["checkout", "-b", branch_name, start_point], check=True)
        return True

    # ------------------------------------------------------------------
    # Committing, pushing, requesting a pull
    # ------------------------------------------------------------------
    def commit_all(self, message: str) -> None:
        """Commit all tracked modifications with ``message``."""
        self._run(["commit", "-a", "-m", message], check=True)

    def push(self, branch_name: str, remote: str = "origin") -> None:
        """Push ``branch_name`` to ``remote``."""
        self._run(["push", remote, branch_name], check=True)

    def request_pull(self, start: str, branch_name: str, remote: str = "origin") -> str:
        """Generate a pull request summary for ``branch_name`` against ``start``.

        Returns
        -------
        str
            The text produced by ``git request-pull``.
        """
        result = self._run(["request-pull", start, remote, branch_name], check=True)
        return result.stdout

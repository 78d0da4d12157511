"""
Command line interface for the changelog_builder tool.

This module defines the ``main`` function which is used as the entry
point when executing the ``build-changelog`` command. It determines the
release and previous release branches, prepares the changelog branch,
collects the commits unique to the release, and prepends the generated
section to the changelog file.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import List, Optional

import click

from changelog_builder import __version__
from changelog_builder.config.loader import ChangelogConfig, ConfigError, load_config
from changelog_builder.generator import build_changelog
from changelog_builder.release import (
    ReleaseError,
    changelog_branch_name,
    get_previous_release_branch,
    get_release_branch,
    release_version,
)
from changelog_builder.store import ChangelogError, ChangelogStore
from changelog_builder.vcs.git_client import GitClient, GitError

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_GENERIC_ERROR = 1
EXIT_INVALID_RELEASE = 2
EXIT_NO_REPO = 3
EXIT_NO_PREVIOUS_RELEASE = 4
EXIT_CONFIG_ERROR = 5
EXIT_VCS_FAILURE = 6
EXIT_CHANGELOG_ERROR = 7


NEXT_STEPS = [
    "1) Remove entries that shouldn't be included in the release.",
    "2) Add documentation links as needed.",
    "   Format: [Doc Title](https://forcedotcom.github.io/salesforcedx-vscode/articles/doc-link-here)",
    "3) Move entries to the 'Added' or 'Fixed' section header.",
    "4) Commit, push, and open your PR for team review.",
]


# ---------------------------------------------------------------------------
# Progress and status display utilities
# ---------------------------------------------------------------------------

class ProgressIndicator:
    """Report the start and duration of a step."""

    def __init__(self, message: str):
        self.message = message
        self.start_time = None

    def __enter__(self):
        self.start_time = time.time()
        click.echo(f"→ {self.message}...")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            elapsed = time.time() - self.start_time
            click.echo(f"  ✓ Done ({elapsed:.1f}s)")
        return False


def print_step(step_num: int, total_steps: int, message: str):
    """Print a step indicator."""
    click.echo(f"\n{'='*60}")
    click.echo(f"Step {step_num}/{total_steps}: {message}")
    click.echo(f"{'='*60}")


def print_info(message: str, indent: int = 0):
    """Print an info message."""
    prefix = "  " * indent
    click.echo(f"{prefix}ℹ {message}")


def print_success(message: str, indent: int = 0):
    """Print a success message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✓ {message}")


def print_error(message: str, indent: int = 0):
    """Print an error message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✗ {message}", err=True)


# ---------------------------------------------------------------------------
# Core functionality
# ---------------------------------------------------------------------------

def find_repo(start_dir: Path) -> Path:
    """Return the Git repository root containing ``start_dir``.

    Raises
    ------
    click.exceptions.Exit
        With code EXIT_NO_REPO if ``start_dir`` is not inside a repository.
    """
    repo_root = GitClient.find_repo_root(start_dir)
    if repo_root is None:
        print_error("No Git repository found in current directory or parent directories.")
        raise click.exceptions.Exit(EXIT_NO_REPO)
    return repo_root


def publish_changelog(client: GitClient, release_branch: str, branch_name: str) -> str:
    """Commit the changelog, push its branch and request a pull."""
    client.commit_all(f"Auto-Generated CHANGELOG for {release_branch}")
    client.push(branch_name)
    return client.request_pull(release_branch, branch_name)


def print_next_steps(changelog_path: Path, published: bool) -> None:
    print_success(f"Change log written to: {changelog_path}")
    click.echo("\nNext Steps:")
    steps: List[str] = NEXT_STEPS[:-1] if published else NEXT_STEPS
    for step in steps:
        click.echo(f"  {step}")


@click.command()
@click.option("-r", "--release", "release", metavar="VERSION", help="Release version to document, e.g. 46.7.0. Defaults to the latest release branch.")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose step-by-step output.")
@click.version_option(version=__version__, prog_name="build-changelog")
def main(release: Optional[str], verbose: bool) -> None:
    """Generate the changelog section for a release branch.

    Commits present on the release branch but not on the previous release
    branch are grouped by change type and component, and prepended to the
    changelog file on a dedicated changelog branch.
    """
    # force=True so handlers are reconfigured on repeated invocations (tests).
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        force=True,
    )

    click.echo("Starting 'build-changelog'")

    ctx = click.get_current_context(silent=True)

    try:
        repo_root = find_repo(Path.cwd())

        try:
            config: ChangelogConfig = load_config(repo_root)
        except ConfigError as exc:
            print_error(f"Configuration error: {exc}")
            raise click.exceptions.Exit(EXIT_CONFIG_ERROR)

        total_steps = 6 if config.publish else 5
        current_step = 0
        client = GitClient(repo_root)

        # Step 1: Release branches
        current_step += 1
        print_step(current_step, total_steps, "Determining Release Branch")
        try:
            release_branch = get_release_branch(client, config, override=release)
        except ReleaseError as exc:
            print_error(str(exc))
            raise click.exceptions.Exit(EXIT_INVALID_RELEASE)
        except GitError as exc:
            print_error(f"Git error: {exc}")
            raise click.exceptions.Exit(EXIT_VCS_FAILURE)

        try:
            previous_branch = get_previous_release_branch(client, release_branch, config)
        except ReleaseError as exc:
            print_error(f"{exc} Exiting.")
            raise click.exceptions.Exit(EXIT_NO_PREVIOUS_RELEASE)
        except GitError as exc:
            print_error(f"Git error: {exc}")
            raise click.exceptions.Exit(EXIT_VCS_FAILURE)

        print_info(f"Using Release Branch: {release_branch}")
        print_info(f"Previous Release Branch: {previous_branch}")

        try:
            # Step 2: Changelog branch
            current_step += 1
            print_step(current_step, total_steps, "Preparing Change Log Branch")
            branch_name = changelog_branch_name(release_branch, config)
            created = client.checkout_changelog_branch(branch_name, release_branch)
            if created:
                print_success(f"Created and switched to branch: {branch_name}")
            else:
                print_info(f"Appending to existing branch: {branch_name}")

            # Step 3: Commits
            current_step += 1
            print_step(current_step, total_steps, "Collecting Commits")
            with ProgressIndicator(f"Comparing {release_branch} with {previous_branch}"):
                commits = client.get_commits(release_branch, previous_branch)
            print_success(f"Found {len(commits)} commit{'s' if len(commits) != 1 else ''}")
            if verbose:
                for commit in commits:
                    print_info(commit, indent=1)

            # Step 4: Parse, filter, group
            current_step += 1
            print_step(current_step, total_steps, "Building Change Log")
            store = ChangelogStore(repo_root / config.changelog_path)
            with ProgressIndicator("Parsing and grouping commits"):
                text = build_changelog(
                    release_version(release_branch, config),
                    commits,
                    client.get_files_changed,
                    store.read(),
                    config,
                    verbose=verbose,
                )

            # Step 5: Write
            current_step += 1
            print_step(current_step, total_steps, "Writing Change Log")
            store.prepend(text)

            # Step 6: Publish
            if config.publish:
                current_step += 1
                print_step(current_step, total_steps, "Publishing Change Log")
                with ProgressIndicator(f"Committing and pushing {branch_name}"):
                    summary = publish_changelog(client, release_branch, branch_name)
                click.echo(summary)
        except GitError as exc:
            print_error(f"Git error: {exc}")
            raise click.exceptions.Exit(EXIT_VCS_FAILURE)
        except ChangelogError as exc:
            print_error(str(exc))
            raise click.exceptions.Exit(EXIT_CHANGELOG_ERROR)

        print_next_steps(store.path, config.publish)
        raise click.exceptions.Exit(EXIT_SUCCESS)

    except click.exceptions.Exit:
        # Click uses its own Exit exception; re-raise to let Click handle it
        raise
    except Exception as exc:
        logging.exception("Unhandled error: %s", exc)
        print_error(f"Unexpected error: {exc}")
        ctx.exit(EXIT_GENERIC_ERROR)

"""
Configuration loader for changelog_builder.

The tool reads an optional JSON configuration file named
``.changelog_config.json`` from the repository root. Every key is optional;
values found in the file override the defaults, which match the layout of
the salesforcedx-vscode monorepo.

If the configuration file is malformed, contains unknown keys, or has
fields of the wrong type, a :class:`ConfigError` is raised.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)
# Attach a null handler to avoid "No handler" warnings in environments
# where logging is not configured. When the CLI configures logging,
# messages propagate to the root logger.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


CONFIG_FILE_NAME = ".changelog_config.json"


class ConfigError(Exception):
    """Raised when the changelog configuration file is invalid."""

    pass


@dataclass(frozen=True)
class ChangelogConfig:
    """Settings controlling branch discovery, attribution and rendering.

    Attributes
    ----------
    changelog_path : str
        Path of the changelog file, relative to the repository root.
    release_branch_prefix : str
        Remote branch prefix that precedes the release version.
    changelog_branch_prefix : str
        Prefix of the local branch the changelog is written on.
    pr_url_template : str
        URL that the PR number is appended to in every entry.
    package_root : str
        Path prefix stripped before taking the component name.
    product_prefix : str
        Component names must start with this prefix (or ``docs_prefix``).
    docs_prefix : str
        Prefix identifying documentation components.
    core_component : str
        Component whose presence suppresses other non-doc components.
    publish : bool
        Commit, push and request a pull after writing the changelog.
    """

    changelog_path: str = "packages/salesforcedx-vscode/CHANGELOG.md"
    release_branch_prefix: str = "origin/release/v"
    changelog_branch_prefix: str = "changeLog-v"
    pr_url_template: str = "https://github.com/forcedotcom/salesforcedx-vscode/pull/"
    package_root: str = "packages/"
    product_prefix: str = "salesforce"
    docs_prefix: str = "docs"
    core_component: str = "salesforcedx-vscode-core"
    publish: bool = False


def _validate(data: Dict[str, Any]) -> None:
    known = {f.name: f for f in fields(ChangelogConfig)}
    unknown = sorted(key for key in data if key not in known)
    if unknown:
        logger.error("Configuration file contains unknown keys: %s", unknown)
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    for key, value in data.items():
        if key == "publish":
            if not isinstance(value, bool):
                raise ConfigError("'publish' must be a boolean")
        elif not isinstance(value, str):
            raise ConfigError(f"'{key}' must be a string")
        elif not value:
            raise ConfigError(f"'{key}' must not be empty")


def load_config(repo_root: Optional[Path] = None) -> ChangelogConfig:
    """Load the changelog configuration for ``repo_root``.

    Args:
        repo_root: Repository root containing ``.changelog_config.json``.
                   If None, or if the file does not exist, the defaults
                   are returned.

    Returns:
        A validated :class:`ChangelogConfig`.

    Raises:
        ConfigError: If the configuration file is malformed or invalid.
    """
    if repo_root is None:
        return ChangelogConfig()

    config_path = Path(repo_root) / CONFIG_FILE_NAME
    if not config_path.exists():
        logger.debug("No configuration file at %s; using defaults", config_path)
        return ChangelogConfig()

    try:
        content = config_path.read_text(encoding="utf-8")
        data = json.loads(content)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read or parse configuration file: %s", exc)
        raise ConfigError(f"Invalid JSON in {config_path.name}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path.name} must contain a JSON object")

    _validate(data)

    logger.debug("Loaded changelog configuration from: %s", config_path)
    logger.debug("Configuration data: %s", data)
    return ChangelogConfig(**data)

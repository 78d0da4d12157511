"""
Attribution of changed files to changelog components.

A component is the first path segment below the package root, provided
it is a product package or a documentation folder. Files under image or
test directories are never attributed.
"""

from __future__ import annotations

from typing import Iterable, Optional, Set

from changelog_builder.config.loader import ChangelogConfig


EXCLUDED_SEGMENTS = ("/images/", "/test/")


def get_component_name(file_path: str, config: ChangelogConfig) -> Optional[str]:
    """Return the component ``file_path`` belongs to, or None.

    Parameters
    ----------
    file_path : str
        Path relative to the repository root, e.g.
        ``packages/salesforcedx-vscode-core/src/index.ts``.
    config : ChangelogConfig
        Supplies the package root and the accepted name prefixes.
    """
    if not file_path or any(segment in file_path for segment in EXCLUDED_SEGMENTS):
        return None
    name = file_path.replace(config.package_root, "", 1).split("/")[0]
    if name.startswith(config.product_prefix) or name.startswith(config.docs_prefix):
        return name
    return None


def apply_core_precedence(names: Set[str], config: ChangelogConfig) -> Set[str]:
    """Collapse a multi-component change onto the core component.

    Only when the core component itself is in ``names``, every other
    component except documentation ones is dropped. Commits that touch core
    usually only carry build or config edits in the other packages.
    """
    if config.core_component not in names:
        return set(names)
    return {
        name
        for name in names
        if name == config.core_component or name.startswith(config.docs_prefix)
    }


def resolve_components(file_paths: Iterable[str], config: ChangelogConfig) -> Set[str]:
    """Map a commit's changed files to the set of affected components."""
    names = set()
    for file_path in file_paths:
        name = get_component_name(file_path, config)
        if name:
            names.add(name)
    return apply_core_precedence(names, config)

import unittest

from changelog_builder.config.loader import ChangelogConfig
from changelog_builder.grouping.component_resolver import (
    apply_core_precedence,
    get_component_name,
    resolve_components,
)

CORE = "salesforcedx-vscode-core"
APEX = "salesforcedx-vscode-apex"


class TestGetComponentName(unittest.TestCase):
    def test_component_name_cases(self) -> None:
        config = ChangelogConfig()
        cases = [
            ("packages/salesforcedx-vscode-core/src/x.ts", CORE),
            ("packages/salesforcedx-utils-vscode/src/a.ts", "salesforcedx-utils-vscode"),
            ("docs/_articles/en/apex/overview.md", "docs"),
            ("packages/salesforcedx-vscode-apex/images/logo.png", None),
            ("packages/salesforcedx-vscode-apex/test/jest/a.test.ts", None),
            ("packages/system-tests/scenarios/a.ts", None),
            ("package.json", None),
            ("scripts/change-log-generator.js", None),
            ("", None),
        ]
        for path, expected in cases:
            with self.subTest(path=path):
                self.assertEqual(get_component_name(path, config), expected)

    def test_custom_prefixes(self) -> None:
        config = ChangelogConfig(package_root="modules/", product_prefix="acme", docs_prefix="guide")
        self.assertEqual(get_component_name("modules/acme-cli/src/a.py", config), "acme-cli")
        self.assertEqual(get_component_name("guides/intro.md", config), "guides")
        self.assertIsNone(get_component_name("modules/other/src/a.py", config))


class TestCorePrecedence(unittest.TestCase):
    def setUp(self) -> None:
        self.config = ChangelogConfig()

    def test_core_suppresses_other_components(self) -> None:
        names = resolve_components(
            [
                "packages/salesforcedx-vscode-core/src/commands/index.ts",
                "packages/salesforcedx-vscode-apex/package.json",
                "packages/salesforcedx-vscode-lwc/package.json",
            ],
            self.config,
        )
        self.assertEqual(names, {CORE})

    def test_core_keeps_docs(self) -> None:
        names = apply_core_precedence({CORE, APEX, "docs"}, self.config)
        self.assertEqual(names, {CORE, "docs"})

    def test_only_fires_for_literal_core_name(self) -> None:
        names = {"salesforcedx-vscode-core-extra", APEX}
        self.assertEqual(apply_core_precedence(names, self.config), names)

    def test_without_core_all_components_kept(self) -> None:
        names = resolve_components(
            [
                "packages/salesforcedx-vscode-apex/src/a.ts",
                "packages/salesforcedx-vscode-lwc/src/b.ts",
                "packages/salesforcedx-vscode-apex/src/c.ts",
            ],
            self.config,
        )
        self.assertEqual(names, {APEX, "salesforcedx-vscode-lwc"})

    def test_input_set_not_modified(self) -> None:
        names = {CORE, APEX}
        apply_core_precedence(names, self.config)
        self.assertEqual(names, {CORE, APEX})

    def test_configured_core_component(self) -> None:
        config = ChangelogConfig(core_component=APEX)
        self.assertEqual(apply_core_precedence({CORE, APEX}, config), {APEX})


if __name__ == "__main__":
    unittest.main()

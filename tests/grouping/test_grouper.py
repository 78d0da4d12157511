import unittest

from changelog_builder.config.loader import ChangelogConfig
from changelog_builder.grouping.grouper import IGNORED_TYPES, generate_key, group_records
from changelog_builder.grouping.record_model import CommitRecord, GroupKey

CORE = "salesforcedx-vscode-core"
APEX = "salesforcedx-vscode-apex"
LWC = "salesforcedx-vscode-lwc"
URL = "https://github.com/forcedotcom/salesforcedx-vscode/pull/"


def _record(pr, change_type, components):
    return CommitRecord(
        pr_number=pr,
        commit_id="c" + pr,
        change_type=change_type,
        message="Change " + pr,
        component_names=set(components),
    )


class TestGenerateKey(unittest.TestCase):
    def test_ignored_types(self) -> None:
        for change_type in ["chore", "style", "refactor", "test", "build", "ci", "revert"]:
            with self.subTest(change_type=change_type):
                self.assertIn(change_type, IGNORED_TYPES)
                self.assertIsNone(generate_key(CORE, change_type))

    def test_bucket_labels(self) -> None:
        cases = [
            ("feat", "Added"),
            ("fix", "Fixed"),
            ("perf", "Fixed"),
            ("docs", "Fixed"),
            ("Feat", "Fixed"),
            (None, "Fixed"),
        ]
        for change_type, bucket in cases:
            with self.subTest(change_type=change_type):
                self.assertEqual(generate_key(CORE, change_type), GroupKey(bucket, CORE))

    def test_key_string_form(self) -> None:
        self.assertEqual(str(generate_key(CORE, "feat")), "Added|salesforcedx-vscode-core")


class TestGroupRecords(unittest.TestCase):
    def setUp(self) -> None:
        self.config = ChangelogConfig()

    def test_sections_sorted_and_entries_in_input_order(self) -> None:
        records = [
            _record("1", "fix", [CORE]),
            _record("2", "feat", [LWC]),
            _record("3", "feat", [CORE]),
            _record("4", None, [CORE]),
            _record("5", "feat", [APEX]),
        ]
        sections = group_records(records, self.config)
        self.assertEqual(
            [f"{s.bucket}|{s.component}" for s in sections],
            [
                "Added|salesforcedx-vscode-apex",
                "Added|salesforcedx-vscode-core",
                "Added|salesforcedx-vscode-lwc",
                "Fixed|salesforcedx-vscode-core",
            ],
        )
        self.assertEqual(
            sections[3].entries,
            [f"- Change 1 ([PR #1]({URL}1))", f"- Change 4 ([PR #4]({URL}4))"],
        )

    def test_same_records_give_same_sections(self) -> None:
        records = [_record(str(i), "fix" if i % 2 else "feat", [CORE, "docs"]) for i in range(6)]
        self.assertEqual(group_records(records, self.config), group_records(records, self.config))

    def test_multi_component_commit_listed_per_component(self) -> None:
        sections = group_records([_record("7", "fix", [APEX, LWC])], self.config)
        self.assertEqual([s.component for s in sections], [APEX, LWC])
        self.assertEqual(sections[0].entries, sections[1].entries)

    def test_ignored_type_produces_nothing(self) -> None:
        self.assertEqual(group_records([_record("8", "chore", [CORE, APEX])], self.config), [])

    def test_record_without_components_produces_nothing(self) -> None:
        self.assertEqual(group_records([_record("9", "feat", [])], self.config), [])

    def test_pr_url_from_config(self) -> None:
        config = ChangelogConfig(pr_url_template="https://example.test/pr/")
        sections = group_records([_record("10", "feat", [CORE])], config)
        self.assertEqual(sections[0].entries, ["- Change 10 ([PR #10](https://example.test/pr/10))"])


if __name__ == "__main__":
    unittest.main()

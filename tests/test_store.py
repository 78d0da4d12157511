import tempfile
import unittest
from pathlib import Path

from changelog_builder.store import ChangelogError, ChangelogStore


class TestChangelogStore(unittest.TestCase):
    def test_read_and_prepend(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "CHANGELOG.md"
            path.write_text("# 46.7.0 - January 10, 2019\n", encoding="utf-8")
            store = ChangelogStore(path)

            store.prepend("# 46.8.0 - Month DD, YYYY\n\n")

            self.assertEqual(
                store.read(),
                "# 46.8.0 - Month DD, YYYY\n\n# 46.7.0 - January 10, 2019\n",
            )

    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            store = ChangelogStore(Path(tmp) / "missing.md")
            with self.assertRaises(ChangelogError):
                store.read()
            with self.assertRaises(ChangelogError):
                store.prepend("text")


if __name__ == "__main__":
    unittest.main()

"""End-to-end tests for the click CLI."""

import sqlite3
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SearchQuery.cli.ui import cli

_CONFIG = """\
log:
  level: WARNING
  to_file: false
  dir: log
rewrite:
  stopwords: [the]
  synonyms:
    js: javascript
storage:
  db_path: {db_path}
  table: example
grep:
  root: .
  skip_hidden: true
"""


def _has_fts5() -> bool:
    conn = sqlite3.connect(":memory:")
    try:
        conn.execute("CREATE VIRTUAL TABLE probe USING fts5(data)")
    except sqlite3.OperationalError:
        return False
    finally:
        conn.close()
    return True


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        self._tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmpdir.cleanup)
        self.root = Path(self._tmpdir.name)
        self.db_path = self.root / "data" / "docs.sqlite3"
        self.config_path = self.root / "cli.yml"
        self.config_path.write_text(_CONFIG.format(db_path=self.db_path.as_posix()), encoding="utf-8")

        # Keep the repository config/default.yml out of the layering.
        patcher = patch("SearchQuery.cli.ui.DEFAULT_CONFIG_PATH", self.root / "absent.yml")
        patcher.start()
        self.addCleanup(patcher.stop)
        self.runner = CliRunner(env={"SEARCHQUERY_DB_PATH": None})

    def _invoke(self, *args: str):
        return self.runner.invoke(cli, ["--config", str(self.config_path), *args])

    def test_match_true_and_false(self) -> None:
        result = self._invoke("match", "hello AND world", "Hello, World!")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout, "true\n")

        result = self._invoke("match", "hello AND rust", "Hello, World!")
        self.assertEqual(result.stdout, "false\n")

    def test_match_uses_configured_rewrite(self) -> None:
        result = self._invoke("match", "the js", "modern JavaScript")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout, "true\n")

    def test_match_malformed_query_fails(self) -> None:
        result = self._invoke("match", "(hello", "hello")
        self.assertNotEqual(result.exit_code, 0)

    def test_compile_dialects(self) -> None:
        result = self._invoke("compile", "hello world", "--dialect", "sqlite")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout, "hello AND world\n")

        result = self._invoke("compile", "hello OR world")
        self.assertEqual(result.stdout, "(hello | world)\n")

    def test_compile_empty_query_prints_nothing(self) -> None:
        result = self._invoke("compile", "the")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout, "")

    def test_compile_malformed_query_fails(self) -> None:
        result = self._invoke("compile", "hello)", "--dialect", "sqlite")
        self.assertNotEqual(result.exit_code, 0)

    def test_compile_rejects_unknown_dialect(self) -> None:
        result = self._invoke("compile", "hello", "--dialect", "mysql")
        self.assertEqual(result.exit_code, 2)

    def test_missing_config_file_is_usage_error(self) -> None:
        result = self.runner.invoke(cli, ["--config", str(self.root / "nope.yml"), "match", "a", "a"])
        self.assertEqual(result.exit_code, 2)

    def test_default_file_is_layered_under_config(self) -> None:
        default = self.root / "default.yml"
        default.write_text("rewrite:\n  stopwords: [noise]\n", encoding="utf-8")
        override = self.root / "override.yml"
        override.write_text("log:\n  level: WARNING\n", encoding="utf-8")
        with patch("SearchQuery.cli.ui.DEFAULT_CONFIG_PATH", default):
            result = self.runner.invoke(cli, ["--config", str(override), "compile", "noise rust", "--dialect", "sqlite"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout, "rust\n")

    def test_grep(self) -> None:
        docs = self.root / "docs"
        docs.mkdir()
        (docs / "a.txt").write_text("Hello World\nbye\n", encoding="utf-8")
        (docs / ".secret.txt").write_text("hello secret\n", encoding="utf-8")
        result = self._invoke("grep", "hello", str(docs))
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout, f"{docs / 'a.txt'}:1:Hello World\n")

    def test_grep_missing_root_is_usage_error(self) -> None:
        result = self._invoke("grep", "hello", str(self.root / "missing"))
        self.assertEqual(result.exit_code, 2)

    @unittest.skipUnless(_has_fts5(), "SQLite build lacks FTS5")
    def test_index_search_list(self) -> None:
        result = self._invoke("index", "Hello World", "Great World", "Rust language")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue(self.db_path.is_file())

        result = self._invoke("search", "great OR rust")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout, "ID: 2, Data: Great World\nID: 3, Data: Rust language\n")

        result = self._invoke("list")
        self.assertEqual(
            result.stdout.splitlines(),
            ["ID: 1, Data: Hello World", "ID: 2, Data: Great World", "ID: 3, Data: Rust language"],
        )

        result = self._invoke("index", "Only row")
        self.assertEqual(result.exit_code, 0, result.output)
        result = self._invoke("list")
        self.assertEqual(result.stdout, "ID: 1, Data: Only row\n")


if __name__ == "__main__":
    unittest.main()

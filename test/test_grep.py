"""Tests for file and directory grep."""

import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SearchQuery.core.errors import ParseError
from SearchQuery.core.rewrite import synonym_rewrite
from SearchQuery.services.grep import GrepMatch, grep_file, grep_tree


class TestGrep(unittest.TestCase):
    def setUp(self) -> None:
        self._tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmpdir.cleanup)
        self.root = Path(self._tmpdir.name)
        (self.root / "a.txt").write_text("Hello World\nfoo bar\r\nhello again\n", encoding="utf-8")
        (self.root / "sub").mkdir()
        (self.root / "sub" / "b.txt").write_text("nothing here\nHELLO there\n", encoding="utf-8")
        (self.root / ".hidden").mkdir()
        (self.root / ".hidden" / "c.txt").write_text("hello hidden\n", encoding="utf-8")
        (self.root / ".dot.txt").write_text("hello dot\n", encoding="utf-8")

    def _hits(self, matches) -> list[tuple[str, int]]:
        return [(m.path.relative_to(self.root).as_posix(), m.line_number) for m in matches]

    def test_grep_tree_skips_hidden_by_default(self) -> None:
        self.assertEqual(
            self._hits(grep_tree(self.root, "hello")),
            [("a.txt", 1), ("a.txt", 3), ("sub/b.txt", 2)],
        )

    def test_grep_tree_with_hidden(self) -> None:
        hits = self._hits(grep_tree(self.root, "hello", skip_hidden=False))
        self.assertIn((".hidden/c.txt", 1), hits)
        self.assertIn((".dot.txt", 1), hits)
        self.assertEqual(len(hits), 5)

    def test_boolean_query(self) -> None:
        self.assertEqual(self._hits(grep_tree(self.root, "hello AND (world OR there)")), [
            ("a.txt", 1),
            ("sub/b.txt", 2),
        ])

    def test_line_endings_are_stripped(self) -> None:
        lines = [m.line for m in grep_file(self.root / "a.txt", "foo")]
        self.assertEqual(lines, ["foo bar"])

    def test_empty_query_matches_every_line(self) -> None:
        self.assertEqual(len(list(grep_file(self.root / "a.txt", ""))), 3)

    def test_single_file_root(self) -> None:
        self.assertEqual(self._hits(grep_tree(self.root / "sub" / "b.txt", "nothing")), [("sub/b.txt", 1)])

    def test_rewrite_is_applied(self) -> None:
        rewrite = synonym_rewrite({"greeting": "hello"})
        self.assertEqual(self._hits(grep_tree(self.root, "greeting again", rewrite)), [("a.txt", 3)])

    def test_malformed_query_raises(self) -> None:
        with self.assertRaises(ParseError):
            list(grep_tree(self.root, "(hello"))

    def test_render(self) -> None:
        hit = GrepMatch(path=Path("dir/file.txt"), line_number=7, line="text")
        self.assertEqual(hit.render(), f"{Path('dir/file.txt')}:7:text")

    def test_undecodable_bytes_are_replaced(self) -> None:
        path = self.root / "bin.dat"
        path.write_bytes(b"hello \xff\xfe world\n")
        lines = [m.line for m in grep_file(path, "hello")]
        self.assertEqual(len(lines), 1)
        self.assertIn("�", lines[0])


if __name__ == "__main__":
    unittest.main()

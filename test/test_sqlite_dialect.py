"""Tests for the SQLite FTS5 query compiler."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SearchQuery.core.nodes import And, Or, Term
from SearchQuery.core.rewrite import synonym_rewrite
from SearchQuery.dialects.sqlite import escape_fts5_word, node_to_fts5_query, to_sqlite_fts5_query


class TestToSqliteFts5Query(unittest.TestCase):
    def test_cases(self) -> None:
        cases = [
            ("single term", "hello", "hello"),
            ("implicit AND", "hello world", "hello AND world"),
            ("phrase search", '"hello world"', '"hello world"'),
            ("three terms", "cat dog bird", "cat AND dog AND bird"),
            ("phrase with multiple words", '"quick brown fox"', '"quick brown fox"'),
            ("empty query", "", ""),
            ("multiple phrases", '"hello world" "test case"', '"hello world" AND "test case"'),
            ("explicit OR", "cat OR dog", "cat OR dog"),
            ("special characters pass through", "hello@world", "hello@world"),
        ]
        for name, query, want in cases:
            with self.subTest(name=name):
                self.assertEqual(to_sqlite_fts5_query(query), want)

    def test_grouping_is_not_parenthesized(self) -> None:
        self.assertEqual(to_sqlite_fts5_query("(cat OR dog) bird"), "cat OR dog AND bird")

    def test_malformed_query_yields_empty_string(self) -> None:
        for query in ("(cat", "cat)", "cat OR", "AND"):
            with self.subTest(query=query):
                self.assertEqual(to_sqlite_fts5_query(query), "")

    def test_star_is_quoted(self) -> None:
        self.assertEqual(to_sqlite_fts5_query("foo*"), '"foo*"')

    def test_inner_double_quote_is_doubled(self) -> None:
        self.assertEqual(to_sqlite_fts5_query('say"hi'), '"say""hi"')

    def test_phrase_inner_double_quotes_are_not_escaped(self) -> None:
        rewrite = synonym_rewrite({"quote": 'say "hi" there'})
        self.assertEqual(to_sqlite_fts5_query("quote", rewrite), '"say "hi" there"')


class TestFts5Helpers(unittest.TestCase):
    def test_escape_strips_one_layer_of_double_quotes(self) -> None:
        self.assertEqual(escape_fts5_word('"hello"'), "hello")

    def test_escape_plain_word_is_verbatim(self) -> None:
        self.assertEqual(escape_fts5_word("hello"), "hello")

    def test_node_serialization(self) -> None:
        tree = And(Or(Term("a"), Term('"b c"')), Term("d*"))
        self.assertEqual(node_to_fts5_query(tree), 'a OR "b c" AND "d*"')


if __name__ == "__main__":
    unittest.main()

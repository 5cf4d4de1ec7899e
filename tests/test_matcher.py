"""Incremental matcher prefix acceptance and resolution."""

from __future__ import annotations

import unittest
from pathlib import Path

from dirhop.errors import NoMatchError
from dirhop.matcher import IncrementalMatcher
from dirhop.paging import Page

from selector_fixtures import dir_entry, file_entry

ROOT = Path("/work")
FIRST = dir_entry(ROOT, "src")
SECOND = file_entry(ROOT, "setup.py")
THIRD = file_entry(ROOT, "tox.ini")


def _page() -> Page:
    return Page(index=0, start=0, items=(FIRST, SECOND, THIRD), labels=("aa", "ab", "ba"))


class IncrementalMatcherTests(unittest.TestCase):
    def test_accepts_valid_prefix_and_resolves_full_label(self) -> None:
        matcher = IncrementalMatcher(_page())

        self.assertTrue(matcher.push("a"))
        self.assertEqual(matcher.prefix, "a")
        self.assertIsNone(matcher.resolve())
        self.assertTrue(matcher.push("a"))
        self.assertEqual(matcher.prefix, "aa")
        self.assertTrue(matcher.is_complete)
        self.assertEqual(matcher.resolve(), FIRST)

    def test_rejects_character_without_matching_label(self) -> None:
        matcher = IncrementalMatcher(_page())
        matcher.push("a")

        self.assertFalse(matcher.push("z"))
        self.assertEqual(matcher.prefix, "a")

    def test_rejects_first_character_that_starts_no_label(self) -> None:
        matcher = IncrementalMatcher(_page())

        self.assertFalse(matcher.push("c"))
        self.assertFalse(matcher.push("A"))
        self.assertEqual(matcher.prefix, "")

    def test_resolve_is_none_until_two_characters(self) -> None:
        matcher = IncrementalMatcher(_page())
        self.assertIsNone(matcher.resolve())

        matcher.push("b")
        self.assertIsNone(matcher.resolve())
        matcher.push("a")
        self.assertEqual(matcher.resolve(), THIRD)

    def test_prefix_never_exceeds_label_length(self) -> None:
        matcher = IncrementalMatcher(_page())
        matcher.push("a")
        matcher.push("b")

        self.assertFalse(matcher.push("a"))
        self.assertEqual(matcher.prefix, "ab")
        self.assertEqual(matcher.resolve(), SECOND)

    def test_clear_resets_prefix_only(self) -> None:
        page = _page()
        matcher = IncrementalMatcher(page)
        matcher.push("a")

        matcher.clear()

        self.assertEqual(matcher.prefix, "")
        self.assertIs(matcher.page, page)
        self.assertTrue(matcher.push("b"))

    def test_require_raises_for_unknown_complete_label(self) -> None:
        matcher = IncrementalMatcher(_page())
        matcher.push("a")
        matcher.push("a")
        matcher.page = Page.build(0, 0, ())

        with self.assertRaises(NoMatchError) as ctx:
            matcher.require()
        self.assertEqual(ctx.exception.prefix, "aa")

    def test_require_returns_resolved_entry(self) -> None:
        matcher = IncrementalMatcher(_page())
        matcher.push("b")
        matcher.push("a")

        self.assertEqual(matcher.require(), THIRD)


if __name__ == "__main__":
    unittest.main()

"""Selector session behavior driven one key token at a time.

Uses an in-memory directory tree so descending, going back and toggling
hidden files never touch the real filesystem.
"""

from __future__ import annotations

import unittest
from pathlib import Path
from unittest import mock

from dirhop.layout import Bounds
from dirhop.paging import Page
from dirhop.runtime.session import SelectorSession, build_state

from selector_fixtures import dir_entry, fake_lister, file_entry

ROOT = Path("/r")
DOCS = ROOT / "docs"
MANY = Path("/many")
BIG = Bounds(0, 0, 80, 24)
SMALL = Bounds(0, 0, 20, 5)


def _tree() -> dict[Path, list]:
    return {
        Path("/"): [dir_entry(Path("/"), "r")],
        ROOT: [
            dir_entry(ROOT, "docs"),
            file_entry(ROOT, "a.txt"),
            file_entry(ROOT, ".env"),
            dir_entry(ROOT, ".git"),
        ],
        DOCS: [file_entry(DOCS, "readme.md")],
        ROOT / ".git": [],
        MANY: [file_entry(MANY, f"f{index:02d}") for index in range(10)],
    }


def _session(directory: Path = ROOT, bounds: Bounds = BIG, **kwargs) -> SelectorSession:
    lister = fake_lister(_tree())
    state = build_state(directory, False, bounds, lister)
    return SelectorSession(state, list_directory=lister, **kwargs)


def _type(session: SelectorSession, keys: str) -> None:
    for key in keys:
        session.handle_key(key)


class LabelSelectionTests(unittest.TestCase):
    def test_complete_label_on_file_finishes_with_its_path(self) -> None:
        session = _session()

        self.assertFalse(session.handle_key("a"))
        self.assertTrue(session.handle_key("b"))
        self.assertTrue(session.state.finished)
        self.assertEqual(session.state.result, ROOT / "a.txt")

    def test_complete_label_on_directory_descends(self) -> None:
        session = _session()

        _type(session, "aa")

        state = session.state
        self.assertFalse(state.finished)
        self.assertEqual(state.directory, DOCS)
        self.assertEqual([entry.name for entry in state.candidates], ["readme.md"])
        self.assertEqual(state.matcher.prefix, "")
        self.assertEqual(state.page.index, 0)

    def test_rejected_letter_keeps_prefix_but_is_logged(self) -> None:
        session = _session()

        session.handle_key("a")
        with self.assertLogs("dirhop.runtime.session", level="WARNING"):
            session.handle_key("z")

        self.assertEqual(session.state.matcher.prefix, "a")
        self.assertEqual(session.state.classifier.raw_log, "az")

    def test_second_letter_naming_no_label_reports_wrong_label(self) -> None:
        session = _session()
        self.assertEqual([code for code, _ in session.state.page.labelled()], ["aa", "ab"])

        session.handle_key("a")
        with self.assertLogs("dirhop.runtime.session", level="WARNING") as logs:
            finished = session.handle_key("z")

        self.assertFalse(finished)
        self.assertEqual(session.state.status_message, "Wrong label!")
        self.assertTrue(session.state.status_is_error)
        self.assertEqual(session.state.matcher.prefix, "a")
        self.assertIn("'az'", logs.output[0])

        session.handle_key("b")
        self.assertEqual(session.state.result, ROOT / "a.txt")

    def test_retyped_letter_clears_wrong_label_status(self) -> None:
        session = _session(confirm=True)
        session.handle_key("a")
        with self.assertLogs("dirhop.runtime.session", level="WARNING"):
            session.handle_key("z")

        session.handle_key("a")

        self.assertEqual(session.state.matcher.prefix, "aa")
        self.assertEqual(session.state.status_message, "")
        self.assertFalse(session.state.status_is_error)

    def test_first_letter_outside_page_is_ignored_silently(self) -> None:
        session = _session()

        session.handle_key("z")

        self.assertEqual(session.state.matcher.prefix, "")
        self.assertEqual(session.state.status_message, "")

    def test_escape_clears_prefix_only(self) -> None:
        session = _session()
        session.handle_key("a")

        session.handle_key("ESC")

        self.assertEqual(session.state.matcher.prefix, "")
        self.assertEqual(session.state.classifier.raw_log, "a")

    def test_quit_finishes_without_result(self) -> None:
        session = _session()

        self.assertTrue(session.handle_key("CTRL_C"))
        self.assertIsNone(session.state.result)

    def test_enter_without_label_selects_current_directory(self) -> None:
        session = _session()

        self.assertTrue(session.handle_key("ENTER"))
        self.assertEqual(session.state.result, ROOT)

    def test_confirm_mode_waits_for_enter(self) -> None:
        session = _session(confirm=True)

        _type(session, "ab")
        self.assertFalse(session.state.finished)
        self.assertEqual(session.state.matcher.prefix, "ab")

        self.assertTrue(session.handle_key("ENTER"))
        self.assertEqual(session.state.result, ROOT / "a.txt")

    def test_confirmed_label_missing_from_page_reports_wrong_label(self) -> None:
        session = _session(confirm=True)
        _type(session, "ab")
        session.state.matcher.page = Page.build(0, 0, ())

        with self.assertLogs("dirhop.runtime.session", level="WARNING"):
            finished = session.handle_key("ENTER")

        self.assertFalse(finished)
        self.assertEqual(session.state.status_message, "Wrong label!")
        self.assertTrue(session.state.status_is_error)
        self.assertEqual(session.state.matcher.prefix, "")

    def test_unreadable_directory_propagates_os_error(self) -> None:
        lister = fake_lister({ROOT: [dir_entry(ROOT, "locked")]})
        state = build_state(ROOT, False, BIG, lister)
        session = SelectorSession(state, list_directory=lister)

        with self.assertRaises(OSError):
            _type(session, "aa")


class NavigationTests(unittest.TestCase):
    def test_double_dot_goes_to_parent(self) -> None:
        session = _session()

        _type(session, "..")

        self.assertEqual(session.state.directory, Path("/"))
        self.assertEqual([entry.name for entry in session.state.candidates], ["r"])

    def test_page_tokens_move_between_pages_and_clear_prefix(self) -> None:
        session = _session(MANY, SMALL)
        self.assertEqual(session.state.paginator.page_count, 2)

        session.handle_key("a")
        _type(session, ">>")

        state = session.state
        self.assertEqual(state.page.index, 1)
        self.assertEqual(state.matcher.prefix, "")
        self.assertEqual(state.classifier.raw_log, "")
        self.assertEqual([entry.name for entry in state.page.items], ["f06", "f07", "f08", "f09"])

        _type(session, "<<")
        self.assertEqual(session.state.page.index, 0)

    def test_label_on_second_page_resolves_second_page_item(self) -> None:
        session = _session(MANY, SMALL)

        _type(session, ">>aa")

        self.assertEqual(session.state.result, MANY / "f06")

    def test_paging_past_the_end_stays_and_reports(self) -> None:
        session = _session(MANY, SMALL)
        _type(session, ">>")
        session.handle_key("a")

        _type(session, ">>")

        state = session.state
        self.assertEqual(state.page.index, 1)
        self.assertEqual(state.matcher.prefix, "")
        self.assertEqual(state.status_message, "No next page")

        _type(session, "<<")
        self.assertEqual(session.state.page.index, 0)
        self.assertEqual(session.state.status_message, "")

        _type(session, "<<")
        self.assertEqual(session.state.status_message, "No previous page")

    def test_resize_recomputes_pages_and_clamps_index(self) -> None:
        session = _session(MANY, SMALL)
        _type(session, ">>")

        session.resize(BIG)

        self.assertEqual(session.state.paginator.page_count, 1)
        self.assertEqual(session.state.page.index, 0)
        self.assertEqual(len(session.state.page), 10)


class ToggleHiddenTests(unittest.TestCase):
    def test_toggle_rebuilds_and_labels_point_at_current_occupants(self) -> None:
        on_toggle = mock.Mock()
        session = _session(on_toggle_hidden=on_toggle)
        self.assertEqual(session.state.page.find("ab").name, "a.txt")
        session.handle_key("a")

        session.handle_key("CTRL_H")

        state = session.state
        on_toggle.assert_called_once_with(True)
        self.assertTrue(state.show_hidden)
        self.assertEqual(state.matcher.prefix, "")
        self.assertEqual([entry.name for entry in state.candidates], ["docs", ".git", "a.txt", ".env"])
        self.assertEqual(state.page.find("ab").name, ".git")

        _type(session, "ac")
        self.assertEqual(session.state.result, ROOT / "a.txt")

    def test_toggle_clears_earlier_status_message(self) -> None:
        session = _session()

        _type(session, ">>")
        self.assertEqual(session.state.status_message, "No next page")
        session.handle_key("CTRL_H")

        self.assertEqual(session.state.status_message, "")
        self.assertFalse(session.state.status_is_error)

    def test_toggle_back_reapplies_dotfile_filter(self) -> None:
        session = _session()

        session.handle_key("CTRL_H")
        session.handle_key("CTRL_H")

        self.assertFalse(session.state.show_hidden)
        self.assertEqual([entry.name for entry in session.state.candidates], ["docs", "a.txt"])


if __name__ == "__main__":
    unittest.main()

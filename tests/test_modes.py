"""Search-select mode behavior for theme and command pick-lists.

Covers result ceilings, cursor resets on re-search, and delegation of
selection movement to the underlying result list.
"""

from __future__ import annotations

import unittest
from unittest import mock

from lazyeditor.modes import (
    DEFAULT_COMMANDS,
    MAX_SEARCH_SELECT_RESULTS,
    Command,
    CommandMode,
    SearchSelectMode,
    ThemeMode,
)
from lazyeditor.search.matching import Match

THEMES = ["solarized_dark", "solarized_light", "monokai", "github_dark", "dracula"]


class ThemeModeTests(unittest.TestCase):
    def test_new_mode_starts_in_insert_mode_with_empty_query_and_results(self) -> None:
        mode = ThemeMode(THEMES)

        self.assertTrue(mode.insert_mode)
        self.assertEqual(mode.query, "")
        self.assertEqual(list(mode.results()), [])
        self.assertIsNone(mode.selection())
        self.assertEqual(mode.selected_index(), 0)

    def test_display_label_is_fixed(self) -> None:
        self.assertEqual(str(ThemeMode(THEMES)), "THEME")

    def test_search_filters_candidates_by_query(self) -> None:
        mode = ThemeMode(THEMES)
        mode.query = "sol"

        mode.search()

        self.assertEqual(list(mode.results()), ["solarized_dark", "solarized_light"])
        self.assertEqual(mode.selection(), "solarized_dark")

    def test_search_with_empty_query_yields_no_results(self) -> None:
        mode = ThemeMode(THEMES)

        mode.search()

        self.assertEqual(list(mode.results()), [])
        self.assertIsNone(mode.selection())

    def test_search_with_no_candidates_yields_no_results(self) -> None:
        mode = ThemeMode([])
        mode.query = "sol"

        mode.search()

        self.assertEqual(list(mode.results()), [])

    def test_results_never_exceed_ceiling(self) -> None:
        mode = ThemeMode([f"theme_{idx}" for idx in range(50)])
        for query in ("t", "theme", "e_1", "9"):
            mode.query = query
            mode.search()
            self.assertLessEqual(len(list(mode.results())), MAX_SEARCH_SELECT_RESULTS)

    def test_search_passes_query_candidates_and_limit_to_engine(self) -> None:
        mode = ThemeMode(THEMES)
        mode.query = "dark"
        with mock.patch(
            "lazyeditor.modes.theme.find",
            return_value=[Match("github_dark", 3, 1), Match("solarized_dark", 0, 0)],
        ) as find:
            mode.search()

        find.assert_called_once_with("dark", mode.themes, MAX_SEARCH_SELECT_RESULTS)
        self.assertEqual(list(mode.results()), ["github_dark", "solarized_dark"])

    def test_research_resets_selection_to_first_result(self) -> None:
        mode = ThemeMode(THEMES)
        mode.query = "a"
        mode.search()
        mode.select_next()
        mode.select_next()
        self.assertEqual(mode.selected_index(), 2)

        mode.search()

        self.assertEqual(mode.selected_index(), 0)

    def test_research_to_empty_results_clears_selection(self) -> None:
        mode = ThemeMode(THEMES)
        mode.query = "sol"
        mode.search()
        mode.select_next()

        mode.query = "zzz"
        mode.search()

        self.assertIsNone(mode.selection())
        self.assertEqual(mode.selected_index(), 0)

    def test_search_is_idempotent(self) -> None:
        mode = ThemeMode(THEMES)
        mode.query = "da"
        mode.search()
        first = list(mode.results())

        mode.search()

        self.assertEqual(list(mode.results()), first)

    def test_selection_movement_clamps_at_bounds(self) -> None:
        mode = ThemeMode(THEMES)
        mode.query = "sol"
        mode.search()

        mode.select_previous()
        self.assertEqual(mode.selection(), "solarized_dark")
        mode.select_next()
        mode.select_next()
        self.assertEqual(mode.selection(), "solarized_light")
        self.assertEqual(mode.selected_index(), 1)

    def test_insert_mode_is_a_plain_flag(self) -> None:
        mode = ThemeMode(THEMES)
        mode.query = "sol"
        mode.search()

        mode.insert_mode = False

        self.assertFalse(mode.insert_mode)
        self.assertEqual(mode.query, "sol")
        self.assertEqual(mode.selection(), "solarized_dark")

    def test_custom_limit_caps_results(self) -> None:
        mode = ThemeMode(THEMES, limit=1)
        mode.query = "a"

        mode.search()

        self.assertEqual(len(list(mode.results())), 1)

    def test_theme_mode_satisfies_search_select_capability(self) -> None:
        mode: SearchSelectMode[str] = ThemeMode(THEMES)
        self.assertEqual(mode.LABEL, "THEME")


class CommandModeTests(unittest.TestCase):
    def test_search_matches_labels_and_returns_commands(self) -> None:
        mode = CommandMode()
        mode.query = "wrap"

        mode.search()

        self.assertEqual(list(mode.results()), [Command("toggle_wrap", "Toggle line wrapping")])
        self.assertEqual(mode.selection().id, "toggle_wrap")

    def test_duplicate_labels_map_back_to_their_own_commands(self) -> None:
        mode = CommandMode([Command("a", "Same"), Command("b", "Same")])
        mode.query = "same"

        mode.search()

        self.assertEqual([command.id for command in mode.results()], ["a", "b"])

    def test_display_label_and_defaults(self) -> None:
        mode = CommandMode()

        self.assertEqual(str(mode), "COMMAND")
        self.assertEqual(mode.commands, DEFAULT_COMMANDS)
        self.assertTrue(mode.insert_mode)

    def test_selection_movement_delegates_to_results(self) -> None:
        mode = CommandMode()
        mode.query = "toggle"
        mode.search()

        mode.select_next()

        self.assertEqual(mode.selected_index(), 1)
        self.assertEqual(mode.selection(), list(mode.results())[1])
        self.assertLessEqual(len(list(mode.results())), MAX_SEARCH_SELECT_RESULTS)


if __name__ == "__main__":
    unittest.main()

from __future__ import annotations

import unittest

from lazyeditor.search import Match, find, fuzzy_score, substring_index

THEMES = ["solarized_dark", "solarized_light", "monokai", "github_dark", "dracula"]


class MatchingBehaviorTests(unittest.TestCase):
    def test_fuzzy_score_prefers_contiguous_matches_and_rejects_missing(self) -> None:
        contiguous = fuzzy_score("abc", "abc.py")
        gapped = fuzzy_score("abc", "a_x_b_x_c.py")

        self.assertIsNotNone(contiguous)
        self.assertIsNotNone(gapped)
        self.assertGreater(contiguous, gapped)
        self.assertIsNone(fuzzy_score("zzz", "abc.py"))

    def test_substring_index_is_case_insensitive(self) -> None:
        self.assertEqual(substring_index("DARK", "solarized_dark"), 10)
        self.assertIsNone(substring_index("light", "monokai"))

    def test_find_empty_query_returns_no_matches(self) -> None:
        self.assertEqual(find("", THEMES, 5), [])

    def test_find_non_positive_limit_returns_no_matches(self) -> None:
        self.assertEqual(find("sol", THEMES, 0), [])

    def test_find_orders_substring_hits_by_position_then_length(self) -> None:
        matches = find("dark", THEMES, 5)

        self.assertEqual([match.candidate for match in matches], ["github_dark", "solarized_dark"])
        self.assertEqual([match.index for match in matches], [3, 0])

    def test_find_falls_back_to_subsequence_scoring(self) -> None:
        matches = find("sdk", THEMES, 5)

        self.assertEqual(matches, [Match(candidate="solarized_dark", index=0, score=matches[0].score)])

    def test_find_respects_limit(self) -> None:
        candidates = [f"theme_{idx}" for idx in range(20)]

        matches = find("theme", candidates, 5)

        self.assertEqual(len(matches), 5)

    def test_find_on_empty_candidates_returns_empty_list(self) -> None:
        self.assertEqual(find("sol", [], 5), [])


if __name__ == "__main__":
    unittest.main()

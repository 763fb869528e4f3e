"""
Unit tests for candidate filtering.

Each catalog name must pass the first-letter, length-ratio and similarity
gates, in that order, to be scored as a candidate.
"""

import unittest

from strain_match.config import DEFAULT_STRAINS
from strain_match.core.matching import Candidate, find_candidates
from strain_match.core.matching.candidates import passes_first_letter, passes_length_ratio


class TestGates(unittest.TestCase):
    """Test each gate in isolation."""

    def test_first_letter(self):
        self.assertTrue(passes_first_letter("chemdawg", "chemdog"))
        self.assertFalse(passes_first_letter("xyzzyx", "chemdog"))

    def test_first_letter_rejects_empty(self):
        self.assertFalse(passes_first_letter("", "chemdog"))
        self.assertFalse(passes_first_letter("chemdog", ""))
        self.assertFalse(passes_first_letter("", ""))

    def test_length_ratio_boundary(self):
        self.assertTrue(passes_length_ratio("ak4", "ak47", 0.25))
        self.assertFalse(passes_length_ratio("ak", "ak47", 0.25))

    def test_length_ratio_is_one_directional(self):
        self.assertTrue(passes_length_ratio("chemdogchemdogchemdog", "chemdog", 0.25))
        self.assertFalse(passes_length_ratio("chemdog", "chemdogchemdogchemdog", 0.25))


class TestFindCandidates(unittest.TestCase):
    """Test the full catalog scan."""

    def test_tied_candidates_keep_scores(self):
        found = find_candidates("Mr Grim", ["Mrs. Grim", "Mr. Grimm"], 0.75, 0.25)
        self.assertEqual(
            found,
            {Candidate("Mrs. Grim", 6 / 7), Candidate("Mr. Grimm", 6 / 7)},
        )

    def test_no_candidate_with_other_first_letter(self):
        self.assertEqual(find_candidates("Xyzzyx", DEFAULT_STRAINS, 0.0, 1.0), frozenset())

    def test_empty_label_matches_nothing(self):
        self.assertEqual(find_candidates("", DEFAULT_STRAINS + ["!!!"], 0.0, 1.0), frozenset())

    def test_similarity_gate(self):
        found = find_candidates("Mr Grimms", ["Mrs. Grim", "Mr. Grimm"], 0.75, 0.25)
        self.assertEqual(found, {Candidate("Mr. Grimm", 0.875)})

    def test_long_label_passes_length_gate(self):
        found = find_candidates("chemdogchemdog", ["Chemdog"], 0.0, 0.25)
        self.assertEqual(found, {Candidate("Chemdog", 0.5)})

    def test_short_label_fails_length_gate(self):
        self.assertEqual(find_candidates("che", ["Chemdog"], 0.0, 0.25), frozenset())

    def test_catalog_order_does_not_matter(self):
        forward = find_candidates("Mr Grim", ["Mrs. Grim", "Mr. Grimm"], 0.75, 0.25)
        backward = find_candidates("Mr Grim", ["Mr. Grimm", "Mrs. Grim"], 0.75, 0.25)
        self.assertEqual(forward, backward)


if __name__ == "__main__":
    unittest.main()

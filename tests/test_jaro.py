"""
Unit tests for Jaro and Jaro-Winkler similarity.
"""

import unittest

from fuzzy_engine.core.fuzzy.jaro_metrics import common_prefix_length, jaro, jaro_winkler


class TestJaro(unittest.TestCase):
    def test_classic_pairs(self):
        self.assertAlmostEqual(jaro("MARTHA", "MARHTA"), 0.9444, places=4)
        self.assertAlmostEqual(jaro("DIXON", "DICKSONX"), 0.7667, places=4)
        self.assertAlmostEqual(jaro("CRATE", "TRACE"), 0.7333, places=4)

    def test_identical_and_disjoint(self):
        self.assertEqual(jaro("abc", "abc"), 1.0)
        self.assertEqual(jaro("abc", "xyz"), 0.0)

    def test_empty(self):
        self.assertEqual(jaro("", "abc"), 0.0)
        self.assertEqual(jaro("abc", ""), 0.0)

    def test_symmetric(self):
        self.assertAlmostEqual(jaro("DIXON", "DICKSONX"), jaro("DICKSONX", "DIXON"))


class TestJaroWinkler(unittest.TestCase):
    def test_prefix_boost(self):
        self.assertAlmostEqual(jaro_winkler("MARTHA", "MARHTA"), 0.9611, places=4)
        self.assertAlmostEqual(jaro_winkler("DIXON", "DICKSONX"), 0.8133, places=4)

    def test_no_shared_prefix_no_boost(self):
        self.assertAlmostEqual(jaro_winkler("CRATE", "TRACE"), jaro("CRATE", "TRACE"))

    def test_no_boost_below_threshold(self):
        # Shared prefix "ab" but Jaro stays under 0.7
        score = jaro("abxxxxxx", "abyyyyyy")
        self.assertLess(score, 0.7)
        self.assertEqual(jaro_winkler("abxxxxxx", "abyyyyyy"), score)

    def test_prefix_capped_at_four(self):
        self.assertEqual(common_prefix_length("abcdefg", "abcdefh"), 4)
        self.assertEqual(common_prefix_length("abc", "abd"), 2)
        self.assertEqual(common_prefix_length("", "abc"), 0)

    def test_prefix_scale(self):
        base = jaro("MARTHA", "MARHTA")
        self.assertAlmostEqual(jaro_winkler("MARTHA", "MARHTA", prefix_scale=0.0), base)
        boosted = jaro_winkler("MARTHA", "MARHTA", prefix_scale=0.25)
        self.assertAlmostEqual(boosted, base + 3 * 0.25 * (1 - base))
        self.assertLessEqual(boosted, 1.0)

    def test_never_below_jaro(self):
        for a, b in [("MARTHA", "MARHTA"), ("apple", "apply"), ("abc", "cba")]:
            with self.subTest(a=a, b=b):
                self.assertGreaterEqual(jaro_winkler(a, b), jaro(a, b))


if __name__ == "__main__":
    unittest.main()

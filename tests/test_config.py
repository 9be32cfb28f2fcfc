"""
Unit tests for YAML settings loading.
"""

import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from pydantic import ValidationError

from fuzzy_engine.config import (
    MatchingSettings,
    NormalizationSettings,
    Settings,
    find_config,
    load_settings,
)
from fuzzy_engine.core.models import FuzzyAlgorithm, NormalizationConfig


class TestSettings(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, name: str, text: str) -> Path:
        path = self.root / name
        path.write_text(text, encoding="utf-8")
        return path

    def test_defaults(self):
        settings = Settings()
        self.assertEqual(settings.matching.algorithm, FuzzyAlgorithm.AUTO)
        self.assertTrue(settings.matching.normalize)
        self.assertEqual(settings.matching.ngram_size, 2)
        self.assertEqual(settings.matching.max_results, 5)
        self.assertEqual(settings.matching.min_similarity, 0.5)
        self.assertEqual(settings.matching.workers, 1)
        self.assertEqual(settings.normalization.to_config(), NormalizationConfig.default())

    def test_load_yaml(self):
        path = self._write(
            "fuzzy-engine.yaml",
            "normalization:\n"
            "  preset: aggressive\n"
            "  remove_numbers: false\n"
            "matching:\n"
            "  algorithm: Jaro-Winkler\n"
            "  ngram_size: 3\n"
            "  workers: 4\n",
        )
        settings = Settings.load(path)
        self.assertEqual(settings.matching.algorithm, FuzzyAlgorithm.JARO_WINKLER)
        self.assertEqual(settings.matching.ngram_size, 3)
        self.assertEqual(settings.matching.workers, 4)
        config = settings.normalization.to_config()
        self.assertTrue(config.remove_punctuation)
        self.assertFalse(config.remove_numbers)

    def test_empty_file_gives_defaults(self):
        path = self._write("empty.yaml", "")
        self.assertEqual(Settings.load(path), Settings())

    def test_invalid_values(self):
        with self.assertRaises(ValidationError):
            MatchingSettings(algorithm="telepathy")
        with self.assertRaises(ValidationError):
            MatchingSettings(ngram_size=0)
        with self.assertRaises(ValidationError):
            MatchingSettings(min_similarity=1.5)
        with self.assertRaises(ValidationError):
            MatchingSettings(prefix_scale=0.5)
        with self.assertRaises(ValidationError):
            NormalizationSettings(preset="extreme")

    def test_preset_name_is_case_insensitive(self):
        settings = NormalizationSettings(preset=" Minimal ")
        self.assertEqual(settings.preset, "minimal")
        self.assertEqual(settings.to_config(), NormalizationConfig.minimal())

    def test_find_config_explicit(self):
        path = self._write("custom.yaml", "matching:\n  max_results: 2\n")
        self.assertEqual(find_config(path), path)
        self.assertEqual(load_settings(path).matching.max_results, 2)

    def test_find_config_missing_explicit(self):
        with self.assertRaises(FileNotFoundError):
            find_config(self.root / "nope.yaml")

    def test_find_config_in_working_directory(self):
        with patch("fuzzy_engine.config.Path.cwd", return_value=self.root):
            self.assertIsNone(find_config(None))
            self.assertEqual(load_settings(), Settings())
            path = self._write("fuzzy-engine.yml", "matching:\n  workers: 2\n")
            self.assertEqual(find_config(None), path)
            self.assertEqual(load_settings().matching.workers, 2)


if __name__ == "__main__":
    unittest.main()

"""
Tests for the command line entry point and its subcommands.
"""

import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from fuzzy_engine.cli import build_parser, main
from fuzzy_engine.commands import compare as cmd_compare
from fuzzy_engine.commands import match as cmd_match
from fuzzy_engine.commands import normalize as cmd_normalize
from fuzzy_engine.commands import phonetic as cmd_phonetic
from fuzzy_engine.commands import similarity as cmd_similarity
from fuzzy_engine.commands.output import MetricLine, format_value, render_lines
from fuzzy_engine.config import Settings
from fuzzy_engine.core.models import FuzzyAlgorithm


def _capture(fn, *args, **kwargs):
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        result = fn(*args, **kwargs)
    return result, buffer.getvalue()


class TestCommands(unittest.TestCase):
    def setUp(self):
        self.settings = Settings()

    def test_compare_text(self):
        match, output = _capture(cmd_compare.run, self.settings, "kitten", "sitting")
        self.assertEqual(match.levenshtein_distance, 3)
        self.assertIn("'kitten' vs 'sitting'", output)
        self.assertIn("Levenshtein", output)
        self.assertIn("Hamming", output)

    def test_compare_json(self):
        _, output = _capture(
            cmd_compare.run,
            self.settings,
            "MARTHA",
            "MARHTA",
            algorithm=FuzzyAlgorithm.JARO,
            json_output=True,
        )
        data = json.loads(output)
        self.assertEqual(data["algorithm"], "jaro")
        self.assertAlmostEqual(data["best_similarity"], 0.9444, places=4)

    def test_similarity(self):
        score, output = _capture(
            cmd_similarity.run, self.settings, "kitten", "sitting", algorithm=FuzzyAlgorithm.LEVENSHTEIN
        )
        self.assertAlmostEqual(score, 4 / 7)
        self.assertEqual(output.strip(), "0.5714")

    def test_similarity_raw(self):
        score, _ = _capture(cmd_similarity.run, self.settings, "ABC", "abc", normalize=False)
        self.assertLess(score, 1.0)

    def test_match(self):
        ranked, output = _capture(
            cmd_match.run, self.settings, "aple", ["apple", "apply", "orange"], limit=2
        )
        self.assertEqual([item.candidate for item in ranked], ["apple", "apply"])
        self.assertIn("1. apple", output)
        self.assertIn("2. apply", output)

    def test_match_no_results(self):
        with self.assertLogs("fuzzy_engine.commands.match", level="WARNING"):
            ranked, output = _capture(cmd_match.run, self.settings, "aple", [])
        self.assertEqual(ranked, [])
        self.assertIn("No matches found.", output)

    def test_match_json(self):
        _, output = _capture(
            cmd_match.run,
            self.settings,
            "abc",
            ["xyz", "abc"],
            min_similarity=0.0,
            json_output=True,
        )
        data = json.loads(output)
        self.assertEqual(data[0], {"candidate": "abc", "score": 1.0, "index": 1})

    def test_read_candidates(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "names.txt"
            path.write_text("# names\napple\n\n  apply  \n", encoding="utf-8")
            self.assertEqual(cmd_match.read_candidates(path), ["apple", "apply"])
            with self.assertRaises(SystemExit):
                cmd_match.read_candidates(Path(tmp) / "missing.txt")

    def test_phonetic(self):
        rows, output = _capture(cmd_phonetic.run, ["Thomas", "Robert"])
        self.assertEqual(rows[0], ("Thomas", "T520", ["0MS", "TMS"]))
        self.assertIn("soundex=R163", output)
        self.assertIn("metaphone=0MS/TMS", output)

    def test_normalize(self):
        result, output = _capture(cmd_normalize.run, self.settings, "  Café #42! ")
        self.assertEqual(result, "cafe #42!")
        result, _ = _capture(cmd_normalize.run, self.settings, "  Café #42! ", preset="aggressive")
        self.assertEqual(result, "cafe")
        self.assertEqual(output.strip(), "cafe #42!")


class TestOutputFormatting(unittest.TestCase):
    def test_format_value(self):
        self.assertEqual(format_value(True), "yes")
        self.assertEqual(format_value(False), "no")
        self.assertEqual(format_value(0.5), "0.5000")
        self.assertEqual(format_value(None), "-")
        self.assertEqual(format_value(3), "3")

    def test_labels_aligned(self):
        lines = render_lines([MetricLine("a", 1), MetricLine("longer", 2)])
        self.assertEqual(lines, ["a      : 1", "longer : 2"])


class TestMain(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.config = Path(self._tmp.name) / "fuzzy-engine.yaml"
        self.config.write_text("matching:\n  algorithm: levenshtein\n", encoding="utf-8")

    def tearDown(self):
        self._tmp.cleanup()

    def _main(self, *argv):
        _, output = _capture(main, ["--config", str(self.config), *argv])
        return output

    def test_similarity_uses_configured_algorithm(self):
        self.assertEqual(self._main("similarity", "kitten", "sitting", "--raw").strip(), "0.5714")

    def test_algorithm_flag_overrides_config(self):
        output = self._main("similarity", "night", "nacht", "--algorithm", "dice")
        self.assertEqual(output.strip(), "0.2500")

    def test_match_with_candidates_file(self):
        candidates = Path(self._tmp.name) / "fruit.txt"
        candidates.write_text("orange\napply\n", encoding="utf-8")
        output = self._main(
            "match", "aple", "apple", "--candidates-file", str(candidates), "--algorithm", "jaro-winkler"
        )
        lines = output.strip().splitlines()
        self.assertEqual(len(lines), 3)
        self.assertIn("apple", lines[0])
        self.assertIn("apply", lines[1])
        self.assertIn("orange", lines[2])

    def test_phonetic(self):
        self.assertIn("soundex=R163", self._main("phonetic", "Rupert"))

    def test_normalize(self):
        self.assertEqual(self._main("normalize", " Crème  Brûlée ").strip(), "creme brulee")

    def test_unknown_algorithm_rejected(self):
        with self.assertRaises(SystemExit):
            with redirect_stdout(io.StringIO()), redirect_stderr(io.StringIO()):
                build_parser().parse_args(["similarity", "a", "b", "--algorithm", "telepathy"])


if __name__ == "__main__":
    unittest.main()

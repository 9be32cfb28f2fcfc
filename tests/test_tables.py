"""
Unit tests for the lazily built lookup tables.
"""

import threading
import unittest

from fuzzy_engine.core.fuzzy import phonetic, visual
from fuzzy_engine.core.fuzzy.comparator import warm_up
from fuzzy_engine.core.normalizer import ACCENT_MAP
from fuzzy_engine.core.tables import LazyTable


class TestLazyTable(unittest.TestCase):
    def test_built_on_first_use(self):
        calls = []

        def build():
            calls.append(1)
            return {"a": 1}

        table = LazyTable("test", build)
        self.assertFalse(table.initialized)
        self.assertEqual(table.get()["a"], 1)
        self.assertTrue(table.initialized)
        table.get()
        self.assertEqual(len(calls), 1)

    def test_read_only(self):
        table = LazyTable("test", lambda: {"a": 1})
        with self.assertRaises(TypeError):
            table.get()["b"] = 2

    def test_lookup_default(self):
        table = LazyTable("test", lambda: {"a": 1})
        self.assertEqual(table.lookup("a"), 1)
        self.assertIsNone(table.lookup("z"))
        self.assertEqual(table.lookup("z", 0), 0)

    def test_concurrent_first_use_builds_once(self):
        calls = []
        gate = threading.Event()

        def build():
            calls.append(1)
            return {"x": 1}

        table = LazyTable("test", build)
        seen = []

        def worker():
            gate.wait()
            seen.append(table.get())

        threads = [threading.Thread(target=worker) for _ in range(16)]
        for thread in threads:
            thread.start()
        gate.set()
        for thread in threads:
            thread.join()

        self.assertEqual(len(calls), 1)
        self.assertEqual(len(seen), 16)
        self.assertTrue(all(mapping is seen[0] for mapping in seen))


class TestWarmUp(unittest.TestCase):
    def test_builds_every_table(self):
        warm_up()
        for table in (ACCENT_MAP, phonetic.SOUNDEX_MAP, visual.KEYBOARD_LAYOUT, visual.CONFUSABLES):
            with self.subTest(table=table.name):
                self.assertTrue(table.initialized)

    def test_table_contents(self):
        self.assertEqual(ACCENT_MAP.lookup("é"), "e")
        self.assertEqual(phonetic.SOUNDEX_MAP.lookup("R"), "6")
        self.assertIsNone(phonetic.SOUNDEX_MAP.lookup("A"))
        self.assertEqual(visual.KEYBOARD_LAYOUT.lookup("q"), (0.0, 1.0))
        self.assertIn("O", visual.CONFUSABLES.lookup("0"))


if __name__ == "__main__":
    unittest.main()

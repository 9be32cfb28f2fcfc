"""
Typo and look-alike models: QWERTY key distance and visual confusables.
"""

from __future__ import annotations

import math

from ..tables import LazyTable

# Keys further apart than this score 0
MAX_KEY_DISTANCE = 10.0


def _build_keyboard_layout() -> dict[str, tuple[float, float]]:
    # (row, horizontal offset) per row; lower rows are staggered to the right
    rows = (
        ("1234567890", 0.0),
        ("qwertyuiop", 0.0),
        ("asdfghjkl", 0.25),
        ("zxcvbnm", 0.5),
    )
    layout: dict[str, tuple[float, float]] = {}
    for y, (keys, offset) in enumerate(rows):
        for x, key in enumerate(keys):
            layout[key] = (x + offset, float(y))
    return layout


def _build_confusables() -> dict[str, frozenset[str]]:
    groups = {
        "0": "Oo",
        "O": "0o",
        "o": "0O",
        "1": "lI|",
        "l": "1I|",
        "I": "1l|",
        "|": "1lI",
        "5": "Ss",
        "S": "5s",
        "s": "5S",
        "2": "Zz",
        "Z": "2z",
        "z": "2Z",
        "8": "B",
        "B": "8",
        "6": "Gb",
        "G": "6",
        "b": "6d",
        "d": "b",
        "m": "n",
        "n": "m",
        "v": "w",
        "w": "v",
    }
    return {ch: frozenset(alternatives) for ch, alternatives in groups.items()}


KEYBOARD_LAYOUT: LazyTable[str, tuple[float, float]] = LazyTable("keyboard", _build_keyboard_layout)
CONFUSABLES: LazyTable[str, frozenset[str]] = LazyTable("confusables", _build_confusables)


def key_similarity(a: str, b: str) -> float:
    """
    Similarity of two single characters by key position.

    1.0 for the same key (case-insensitive), 0.0 when either key is not on
    the layout, otherwise 1 - distance / 10 clamped to [0, 1].
    """
    ch_a, ch_b = a.lower(), b.lower()
    if ch_a == ch_b:
        return 1.0
    layout = KEYBOARD_LAYOUT.get()
    pos_a = layout.get(ch_a)
    pos_b = layout.get(ch_b)
    if pos_a is None or pos_b is None:
        return 0.0
    distance = math.dist(pos_a, pos_b)
    return min(1.0, max(0.0, 1.0 - distance / MAX_KEY_DISTANCE))


def keyboard_similarity(a: str, b: str) -> float:
    """
    Typo likelihood between two strings from QWERTY key proximity.

    Positions are compared up to the shorter length and averaged; the result
    is scaled by 1 - |len(a) - len(b)| / max(len).

    Examples:
        keyboard_similarity("cat", "cat") -> 1.0
        keyboard_similarity("cat", "vat") -> 0.966... (c and v are neighbours)
    """
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0

    compared = min(len(a), len(b))
    total = sum(key_similarity(ch_a, ch_b) for ch_a, ch_b in zip(a, b))
    length_penalty = 1.0 - abs(len(a) - len(b)) / max(len(a), len(b))
    return (total / compared) * length_penalty


def are_visual_confusables(a: str, b: str) -> bool:
    """
    True when ``b`` could be ``a`` misread character by character.

    Lengths must match and each differing position must be a known
    look-alike pair (0/O/o, 1/l/I/|, 5/S/s, 2/Z/z, 8/B, 6/G/b, b/d, m/n, v/w).

    Examples:
        are_visual_confusables("100", "lOO") -> True
        are_visual_confusables("cat", "dog") -> False
    """
    if a == b:
        return True
    if len(a) != len(b):
        return False
    table = CONFUSABLES.get()
    for ch_a, ch_b in zip(a, b):
        if ch_a == ch_b:
            continue
        if ch_b not in table.get(ch_a, ()):
            return False
    return True

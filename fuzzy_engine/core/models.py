"""
Domain models for text normalization and fuzzy matching.

These are pure data models with no dependencies.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class NormalizationMode(str, Enum):
    """Single-purpose normalization shortcuts."""

    NONE = "none"
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    TRIM_WHITESPACE = "trim_whitespace"
    REMOVE_ACCENTS = "remove_accents"
    FULL = "full"


@dataclass(frozen=True, slots=True)
class NormalizationConfig:
    """
    Switches for the normalization pipeline.

    Any combination is legal. The pipeline always applies them in the same
    order: accents, case, punctuation, numbers, whitespace.
    """
    lowercase: bool = True
    trim_whitespace: bool = True
    collapse_whitespace: bool = True
    remove_accents: bool = True
    remove_punctuation: bool = False
    remove_numbers: bool = False
    preserve_case: bool = False
    """Wins over ``lowercase`` when both are set"""

    @classmethod
    def default(cls) -> "NormalizationConfig":
        return cls()

    @classmethod
    def aggressive(cls) -> "NormalizationConfig":
        return cls(remove_punctuation=True, remove_numbers=True)

    @classmethod
    def minimal(cls) -> "NormalizationConfig":
        return cls(
            lowercase=False,
            collapse_whitespace=False,
            remove_accents=False,
            preserve_case=True,
        )

    @classmethod
    def preset(cls, name: str) -> "NormalizationConfig":
        presets = {
            "default": cls.default,
            "aggressive": cls.aggressive,
            "minimal": cls.minimal,
        }
        try:
            return presets[name.strip().lower()]()
        except KeyError:
            raise ValueError(f"Unknown normalization preset: {name!r}") from None


class FuzzyAlgorithm(str, Enum):
    """Algorithms that can be asked for a single similarity score."""

    LEVENSHTEIN = "levenshtein"
    DAMERAU_LEVENSHTEIN = "damerau_levenshtein"
    OPTIMAL_ALIGNMENT = "optimal_alignment"
    HAMMING = "hamming"
    JARO = "jaro"
    JARO_WINKLER = "jaro_winkler"
    LCS = "lcs"
    LCSS = "lcss"
    JACCARD = "jaccard"
    DICE = "dice"
    COSINE = "cosine"
    SOUNDEX = "soundex"
    METAPHONE = "metaphone"
    KEYBOARD_DISTANCE = "keyboard_distance"
    AUTO = "auto"

    @classmethod
    def parse(cls, value: "str | FuzzyAlgorithm") -> "FuzzyAlgorithm":
        """
        Resolve an algorithm from user input.

        Accepts enum members, values and names in any case, with ``-`` or
        spaces in place of underscores ("Jaro-Winkler", "JARO_WINKLER").

        Raises:
            ValueError: if the name is not a known algorithm
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("-", "_").replace(" ", "_")
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown fuzzy algorithm: {value!r}") from None


@dataclass
class NGramSet:
    """
    Multiset of n-grams taken from a source string.

    Example:
        "hello" with n=2 -> {"he": 1, "el": 1, "ll": 1, "lo": 1}, total 4

    A source shorter than ``n`` becomes a single gram of itself.
    """
    n: int
    """Gram size"""

    source: str
    """String the grams were taken from"""

    grams: dict[str, int] = field(default_factory=dict)
    """Gram -> occurrence count"""

    total: int = 0
    """Sum of all counts"""

    def distinct(self) -> set[str]:
        return set(self.grams)

    def dice_similarity(self, other: "NGramSet") -> float:
        """2 * multiset intersection / (total grams of both sets)."""
        denominator = self.total + other.total
        if denominator == 0:
            return 0.0
        shared = sum(
            min(count, other.grams[gram])
            for gram, count in self.grams.items()
            if gram in other.grams
        )
        return 2.0 * shared / denominator

    def jaccard_similarity(self, other: "NGramSet") -> float:
        """Distinct-gram intersection over distinct-gram union."""
        mine = self.distinct()
        theirs = other.distinct()
        union = mine | theirs
        if not union:
            return 0.0
        return len(mine & theirs) / len(union)

    def cosine_similarity(self, other: "NGramSet") -> float:
        """Cosine of the angle between the two gram-count vectors."""
        dot = sum(
            count * other.grams[gram]
            for gram, count in self.grams.items()
            if gram in other.grams
        )
        magnitude_a = math.sqrt(sum(count * count for count in self.grams.values()))
        magnitude_b = math.sqrt(sum(count * count for count in other.grams.values()))
        if magnitude_a == 0.0 or magnitude_b == 0.0:
            return 0.0
        return min(1.0, dot / (magnitude_a * magnitude_b))


@dataclass(frozen=True)
class StringMatch:
    """
    Every metric computed for one pair of strings.

    Created fresh per comparison and never mutated afterwards.
    Distances are non-negative integers except ``hamming_distance`` which
    stays at -1 when the strings differ in length. Similarities lie in [0, 1].
    """
    string_a: str
    """First input, as given by the caller"""

    string_b: str
    """Second input, as given by the caller"""

    levenshtein_distance: int = 0
    normalized_levenshtein: float = 0.0
    """1 - levenshtein / max(len)"""

    damerau_levenshtein_distance: int = 0
    optimal_alignment_distance: int = 0
    hamming_distance: int = -1
    """-1 when undefined (different lengths)"""

    jaro_similarity: float = 0.0
    jaro_winkler_similarity: float = 0.0

    longest_common_subsequence: int = 0
    longest_common_substring: int = 0

    dice_coefficient: float = 0.0
    jaccard_index: float = 0.0
    cosine_similarity: float = 0.0

    soundex_a: str = ""
    soundex_b: str = ""
    soundex_match: bool = False
    metaphone_match: bool = False

    keyboard_similarity: float = 0.0
    visually_confusable: bool = False

    computation_time_ms: float = 0.0
    """Wall-clock time spent computing the metrics"""

    algorithm: FuzzyAlgorithm | None = None
    """Algorithm whose score was copied into best_similarity, if any"""

    best_similarity: float = 0.0

    def best_of(self) -> float:
        """Highest of normalized Levenshtein, Jaro-Winkler, Dice, Jaccard and Cosine."""
        return max(
            self.normalized_levenshtein,
            self.jaro_winkler_similarity,
            self.dice_coefficient,
            self.jaccard_index,
            self.cosine_similarity,
        )

    def as_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["algorithm"] = self.algorithm.value if self.algorithm else None
        return data

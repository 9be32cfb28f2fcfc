"""
Core domain layer for fuzzy-engine.

This package contains pure matching logic with no external dependencies.
All code here is testable without I/O.
"""

from __future__ import annotations

from .fuzzy import (
    HAMMING_UNDEFINED,
    ScoredCandidate,
    are_phonetically_equal,
    are_visual_confusables,
    compare,
    compare_with_algorithm,
    cosine,
    damerau_levenshtein,
    dice,
    edit_distance,
    find_best_matches,
    generate_ngrams,
    hamming,
    jaccard,
    jaro,
    jaro_winkler,
    keyboard_similarity,
    levenshtein,
    longest_common_subsequence,
    longest_common_substring,
    metaphone,
    optimal_alignment,
    rank_candidates,
    similarity,
    soundex,
    warm_up,
)
from .models import FuzzyAlgorithm, NGramSet, NormalizationConfig, NormalizationMode, StringMatch
from .normalizer import normalize, normalize_with_mode

__all__ = [
    "FuzzyAlgorithm",
    "HAMMING_UNDEFINED",
    "NGramSet",
    "NormalizationConfig",
    "NormalizationMode",
    "ScoredCandidate",
    "StringMatch",
    "are_phonetically_equal",
    "are_visual_confusables",
    "compare",
    "compare_with_algorithm",
    "cosine",
    "damerau_levenshtein",
    "dice",
    "edit_distance",
    "find_best_matches",
    "generate_ngrams",
    "hamming",
    "jaccard",
    "jaro",
    "jaro_winkler",
    "keyboard_similarity",
    "levenshtein",
    "longest_common_subsequence",
    "longest_common_substring",
    "metaphone",
    "normalize",
    "normalize_with_mode",
    "optimal_alignment",
    "rank_candidates",
    "similarity",
    "soundex",
    "warm_up",
]

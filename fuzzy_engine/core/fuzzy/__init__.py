"""
Fuzzy string matching algorithm families.

- Edit distance (Levenshtein, Damerau-Levenshtein, optimal alignment, Hamming)
- Jaro / Jaro-Winkler
- Longest common subsequence / substring
- N-gram coefficients (Dice, Jaccard, Cosine)
- Phonetic codes (Soundex, Metaphone)
- Keyboard distance and visual confusables

plus the comparator that runs them together and the batch matcher that
ranks candidate lists.
"""

from __future__ import annotations

from .batch import ScoredCandidate, find_best_matches, rank_candidates
from .comparator import compare, compare_with_algorithm, similarity, warm_up
from .distance import (
    HAMMING_UNDEFINED,
    damerau_levenshtein,
    distance_to_similarity,
    edit_distance,
    hamming,
    levenshtein,
    optimal_alignment,
)
from .jaro_metrics import jaro, jaro_winkler
from .ngrams import cosine, dice, generate_ngrams, jaccard
from .phonetic import are_phonetically_equal, metaphone, soundex
from .subsequence import longest_common_subsequence, longest_common_substring
from .visual import are_visual_confusables, keyboard_similarity

__all__ = [
    "HAMMING_UNDEFINED",
    "ScoredCandidate",
    "are_phonetically_equal",
    "are_visual_confusables",
    "compare",
    "compare_with_algorithm",
    "cosine",
    "damerau_levenshtein",
    "dice",
    "distance_to_similarity",
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
    "optimal_alignment",
    "rank_candidates",
    "similarity",
    "soundex",
    "warm_up",
]

"""
Aggregate comparison across every algorithm family.

``compare`` computes all metrics for a pair of strings once and returns
them as a StringMatch. ``similarity`` is the fast path for callers that
only need one score: it runs the requested algorithm alone.
"""

from __future__ import annotations

import dataclasses
import logging
import time
from typing import Callable, Optional

from ..models import FuzzyAlgorithm, NormalizationConfig, StringMatch
from ..normalizer import ACCENT_MAP, normalize as normalize_text
from . import distance, jaro_metrics, ngrams, phonetic, subsequence, visual

logger = logging.getLogger(__name__)

Scorer = Callable[[str, str, int, float], float]


def prepare(text: str, normalize: bool, config: Optional[NormalizationConfig] = None) -> str:
    """Normalize ``text`` when requested, otherwise return it as-is."""
    if normalize:
        return normalize_text(text, config)
    return text


def warm_up() -> None:
    """Build every lookup table up front instead of on first comparison."""
    for table in (
        ACCENT_MAP,
        phonetic.SOUNDEX_MAP,
        visual.KEYBOARD_LAYOUT,
        visual.CONFUSABLES,
    ):
        table.get()
    logger.debug("Fuzzy matcher lookup tables ready")


def compare(
    a: str,
    b: str,
    normalize: bool = True,
    *,
    config: Optional[NormalizationConfig] = None,
    ngram_size: int = ngrams.DEFAULT_GRAM_SIZE,
    prefix_scale: float = 0.1,
) -> StringMatch:
    """
    Compare two strings with every algorithm.

    Equal (prepared) strings short-circuit to a perfect result: every
    similarity 1.0, every distance 0, every flag True. If either prepared
    string is empty the result keeps its defaults (0 / False / -1).

    Args:
        a: First string
        b: Second string
        normalize: Run both strings through the normalizer first
        config: Normalization switches, the default preset when omitted
        ngram_size: Gram size for Dice, Jaccard and Cosine
        prefix_scale: Jaro-Winkler prefix weight

    Returns:
        StringMatch holding the original strings and all metrics
    """
    started = time.perf_counter()
    prepared_a = prepare(a, normalize, config)
    prepared_b = prepare(b, normalize, config)

    def elapsed_ms() -> float:
        return (time.perf_counter() - started) * 1000.0

    if prepared_a == prepared_b:
        code = phonetic.soundex(prepared_a)
        length = len(prepared_a)
        return StringMatch(
            string_a=a,
            string_b=b,
            normalized_levenshtein=1.0,
            hamming_distance=0,
            jaro_similarity=1.0,
            jaro_winkler_similarity=1.0,
            longest_common_subsequence=length,
            longest_common_substring=length,
            dice_coefficient=1.0,
            jaccard_index=1.0,
            cosine_similarity=1.0,
            soundex_a=code,
            soundex_b=code,
            soundex_match=True,
            metaphone_match=True,
            keyboard_similarity=1.0,
            visually_confusable=True,
            computation_time_ms=elapsed_ms(),
        )

    if not prepared_a or not prepared_b:
        return StringMatch(string_a=a, string_b=b, computation_time_ms=elapsed_ms())

    levenshtein = distance.levenshtein(prepared_a, prepared_b)
    soundex_a = phonetic.soundex(prepared_a)
    soundex_b = phonetic.soundex(prepared_b)
    grams_a = ngrams.generate_ngrams(prepared_a, ngram_size)
    grams_b = ngrams.generate_ngrams(prepared_b, ngram_size)

    return StringMatch(
        string_a=a,
        string_b=b,
        levenshtein_distance=levenshtein,
        normalized_levenshtein=distance.distance_to_similarity(levenshtein, prepared_a, prepared_b),
        damerau_levenshtein_distance=distance.damerau_levenshtein(prepared_a, prepared_b),
        optimal_alignment_distance=distance.optimal_alignment(prepared_a, prepared_b),
        hamming_distance=distance.hamming(prepared_a, prepared_b),
        jaro_similarity=jaro_metrics.jaro(prepared_a, prepared_b),
        jaro_winkler_similarity=jaro_metrics.jaro_winkler(prepared_a, prepared_b, prefix_scale),
        longest_common_subsequence=subsequence.longest_common_subsequence(prepared_a, prepared_b),
        longest_common_substring=subsequence.longest_common_substring(prepared_a, prepared_b),
        dice_coefficient=grams_a.dice_similarity(grams_b),
        jaccard_index=grams_a.jaccard_similarity(grams_b),
        cosine_similarity=grams_a.cosine_similarity(grams_b),
        soundex_a=soundex_a,
        soundex_b=soundex_b,
        soundex_match=soundex_a == soundex_b,
        metaphone_match=phonetic.metaphone_match(prepared_a, prepared_b),
        keyboard_similarity=visual.keyboard_similarity(prepared_a, prepared_b),
        visually_confusable=visual.are_visual_confusables(prepared_a, prepared_b),
        computation_time_ms=elapsed_ms(),
    )


def _length_ratio(value: int, prepared: tuple[str, str]) -> float:
    longest = max(len(prepared[0]), len(prepared[1]))
    if longest == 0:
        return 0.0
    return value / longest


# Per-algorithm view of an already computed StringMatch.
_EXTRACTORS: dict[FuzzyAlgorithm, Callable[[StringMatch, tuple[str, str]], float]] = {
    FuzzyAlgorithm.LEVENSHTEIN: lambda m, p: m.normalized_levenshtein,
    FuzzyAlgorithm.DAMERAU_LEVENSHTEIN: lambda m, p: distance.distance_to_similarity(
        m.damerau_levenshtein_distance, *p
    ),
    FuzzyAlgorithm.OPTIMAL_ALIGNMENT: lambda m, p: distance.distance_to_similarity(
        m.optimal_alignment_distance, *p
    ),
    FuzzyAlgorithm.HAMMING: lambda m, p: distance.distance_to_similarity(m.hamming_distance, *p),
    FuzzyAlgorithm.JARO: lambda m, p: m.jaro_similarity,
    FuzzyAlgorithm.JARO_WINKLER: lambda m, p: m.jaro_winkler_similarity,
    FuzzyAlgorithm.LCS: lambda m, p: _length_ratio(m.longest_common_subsequence, p),
    FuzzyAlgorithm.LCSS: lambda m, p: _length_ratio(m.longest_common_substring, p),
    FuzzyAlgorithm.JACCARD: lambda m, p: m.jaccard_index,
    FuzzyAlgorithm.DICE: lambda m, p: m.dice_coefficient,
    FuzzyAlgorithm.COSINE: lambda m, p: m.cosine_similarity,
    FuzzyAlgorithm.SOUNDEX: lambda m, p: 1.0 if m.soundex_match else 0.0,
    FuzzyAlgorithm.METAPHONE: lambda m, p: 1.0 if m.metaphone_match else 0.0,
    FuzzyAlgorithm.KEYBOARD_DISTANCE: lambda m, p: m.keyboard_similarity,
}


def compare_with_algorithm(
    a: str,
    b: str,
    algorithm: FuzzyAlgorithm | str = FuzzyAlgorithm.AUTO,
    normalize: bool = True,
    *,
    config: Optional[NormalizationConfig] = None,
    ngram_size: int = ngrams.DEFAULT_GRAM_SIZE,
    prefix_scale: float = 0.1,
) -> StringMatch:
    """
    Full comparison with one algorithm's score copied into ``best_similarity``.

    AUTO (or any algorithm without an extractor) takes StringMatch.best_of().
    """
    algorithm = FuzzyAlgorithm.parse(algorithm)
    match = compare(
        a,
        b,
        normalize,
        config=config,
        ngram_size=ngram_size,
        prefix_scale=prefix_scale,
    )
    prepared = (prepare(a, normalize, config), prepare(b, normalize, config))
    if prepared[0] == prepared[1]:
        best = 1.0
    elif not prepared[0] or not prepared[1]:
        best = 0.0
    else:
        extractor = _EXTRACTORS.get(algorithm)
        best = extractor(match, prepared) if extractor else match.best_of()
    return dataclasses.replace(match, algorithm=algorithm, best_similarity=best)


def _ratio(length_fn: Callable[[str, str], int]) -> Scorer:
    def score(a: str, b: str, n: int, prefix_scale: float) -> float:
        return length_fn(a, b) / max(len(a), len(b))

    return score


def _distance(distance_fn: Callable[[str, str], int]) -> Scorer:
    def score(a: str, b: str, n: int, prefix_scale: float) -> float:
        return distance.distance_to_similarity(distance_fn(a, b), a, b)

    return score


def _flag(flag_fn: Callable[[str, str], bool]) -> Scorer:
    def score(a: str, b: str, n: int, prefix_scale: float) -> float:
        return 1.0 if flag_fn(a, b) else 0.0

    return score


def _jaro_winkler(a: str, b: str, n: int, prefix_scale: float) -> float:
    return jaro_metrics.jaro_winkler(a, b, prefix_scale)


_SCORERS: dict[FuzzyAlgorithm, Scorer] = {
    FuzzyAlgorithm.LEVENSHTEIN: _distance(distance.levenshtein),
    FuzzyAlgorithm.DAMERAU_LEVENSHTEIN: _distance(distance.damerau_levenshtein),
    FuzzyAlgorithm.OPTIMAL_ALIGNMENT: _distance(distance.optimal_alignment),
    FuzzyAlgorithm.HAMMING: _distance(distance.hamming),
    FuzzyAlgorithm.JARO: lambda a, b, n, s: jaro_metrics.jaro(a, b),
    FuzzyAlgorithm.JARO_WINKLER: _jaro_winkler,
    FuzzyAlgorithm.LCS: _ratio(subsequence.longest_common_subsequence),
    FuzzyAlgorithm.LCSS: _ratio(subsequence.longest_common_substring),
    FuzzyAlgorithm.JACCARD: lambda a, b, n, s: ngrams.jaccard(a, b, n),
    FuzzyAlgorithm.DICE: lambda a, b, n, s: ngrams.dice(a, b, n),
    FuzzyAlgorithm.COSINE: lambda a, b, n, s: ngrams.cosine(a, b, n),
    FuzzyAlgorithm.SOUNDEX: _flag(lambda a, b: phonetic.soundex(a) == phonetic.soundex(b)),
    FuzzyAlgorithm.METAPHONE: _flag(phonetic.metaphone_match),
    FuzzyAlgorithm.KEYBOARD_DISTANCE: lambda a, b, n, s: visual.keyboard_similarity(a, b),
    FuzzyAlgorithm.AUTO: _jaro_winkler,
}


def similarity(
    a: str,
    b: str,
    algorithm: FuzzyAlgorithm | str = FuzzyAlgorithm.AUTO,
    normalize: bool = True,
    *,
    config: Optional[NormalizationConfig] = None,
    ngram_size: int = ngrams.DEFAULT_GRAM_SIZE,
    prefix_scale: float = 0.1,
) -> float:
    """
    Single similarity score in [0, 1] from one algorithm.

    Only the requested algorithm runs. AUTO scores with Jaro-Winkler.
    Equal prepared strings score 1.0, an empty side scores 0.0.
    """
    algorithm = FuzzyAlgorithm.parse(algorithm)
    prepared_a = prepare(a, normalize, config)
    prepared_b = prepare(b, normalize, config)
    if prepared_a == prepared_b:
        return 1.0
    if not prepared_a or not prepared_b:
        return 0.0
    return _SCORERS[algorithm](prepared_a, prepared_b, ngram_size, prefix_scale)

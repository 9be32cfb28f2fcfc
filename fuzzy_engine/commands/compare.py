from __future__ import annotations

import json
import logging
from typing import Optional

from ..config import Settings
from ..core import FuzzyAlgorithm, StringMatch, compare_with_algorithm
from .output import MetricLine, render_lines

logger = logging.getLogger(__name__)


def _metric_lines(match: StringMatch) -> list[MetricLine]:
    hamming = match.hamming_distance if match.hamming_distance >= 0 else None
    return [
        MetricLine("Levenshtein", match.levenshtein_distance),
        MetricLine("Levenshtein (normalized)", match.normalized_levenshtein),
        MetricLine("Damerau-Levenshtein", match.damerau_levenshtein_distance),
        MetricLine("Optimal alignment", match.optimal_alignment_distance),
        MetricLine("Hamming", hamming),
        MetricLine("Jaro", match.jaro_similarity),
        MetricLine("Jaro-Winkler", match.jaro_winkler_similarity),
        MetricLine("LCS", match.longest_common_subsequence),
        MetricLine("Longest common substring", match.longest_common_substring),
        MetricLine("Dice", match.dice_coefficient),
        MetricLine("Jaccard", match.jaccard_index),
        MetricLine("Cosine", match.cosine_similarity),
        MetricLine("Soundex", f"{match.soundex_a} / {match.soundex_b}"),
        MetricLine("Soundex match", match.soundex_match),
        MetricLine("Metaphone match", match.metaphone_match),
        MetricLine("Keyboard similarity", match.keyboard_similarity),
        MetricLine("Visually confusable", match.visually_confusable),
        MetricLine(f"Best ({match.algorithm.value if match.algorithm else 'auto'})", match.best_similarity),
        MetricLine("Time (ms)", match.computation_time_ms),
    ]


def run(
    settings: Settings,
    a: str,
    b: str,
    *,
    algorithm: Optional[FuzzyAlgorithm] = None,
    normalize: Optional[bool] = None,
    json_output: bool = False,
) -> StringMatch:
    matching = settings.matching
    match = compare_with_algorithm(
        a,
        b,
        algorithm or matching.algorithm,
        matching.normalize if normalize is None else normalize,
        config=settings.normalization.to_config(),
        ngram_size=matching.ngram_size,
        prefix_scale=matching.prefix_scale,
    )
    logger.debug("Compared %r and %r in %.3f ms", a, b, match.computation_time_ms)
    if json_output:
        print(json.dumps(match.as_dict(), indent=2, sort_keys=True))
        return match
    print(f"{a!r} vs {b!r}")
    for line in render_lines(_metric_lines(match)):
        print(f"  {line}")
    return match

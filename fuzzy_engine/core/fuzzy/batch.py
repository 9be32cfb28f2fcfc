"""
Rank a list of candidates against a query.

Every candidate is scored independently with ``similarity``, so large
lists can be spread over a thread pool. Results are always merged by input
position: equal scores keep the order the candidates were given in,
whether the scoring ran serially or in parallel.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..models import FuzzyAlgorithm, NormalizationConfig
from . import ngrams
from .comparator import similarity

logger = logging.getLogger(__name__)

# Below this many candidates a thread pool costs more than it saves
MIN_PARALLEL_CANDIDATES = 64


@dataclass(frozen=True, slots=True)
class ScoredCandidate:
    candidate: str
    score: float
    index: int
    """Position of the candidate in the input list"""


def _score_all(
    query: str,
    candidates: Sequence[str],
    algorithm: FuzzyAlgorithm,
    normalize: bool,
    config: Optional[NormalizationConfig],
    ngram_size: int,
    prefix_scale: float,
    workers: Optional[int],
) -> list[float]:
    def score(candidate: str) -> float:
        return similarity(
            query,
            candidate,
            algorithm,
            normalize,
            config=config,
            ngram_size=ngram_size,
            prefix_scale=prefix_scale,
        )

    if workers and workers > 1 and len(candidates) >= MIN_PARALLEL_CANDIDATES:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map() yields in submission order
            return list(executor.map(score, candidates))
    return [score(candidate) for candidate in candidates]


def rank_candidates(
    query: str,
    candidates: Iterable[str],
    max_results: int = 5,
    min_similarity: float = 0.5,
    algorithm: FuzzyAlgorithm | str = FuzzyAlgorithm.AUTO,
    *,
    normalize: bool = True,
    config: Optional[NormalizationConfig] = None,
    ngram_size: int = ngrams.DEFAULT_GRAM_SIZE,
    prefix_scale: float = 0.1,
    workers: Optional[int] = None,
) -> list[ScoredCandidate]:
    """
    Score, filter and sort candidates.

    Candidates scoring below ``min_similarity`` are dropped. The rest are
    sorted by score, highest first; ties keep input order. At most
    ``max_results`` are returned (none when it is 0 or negative).

    Args:
        query: String to look up
        candidates: Strings to rank
        max_results: Upper bound on returned entries
        min_similarity: Inclusive score threshold
        algorithm: Scoring algorithm, AUTO for Jaro-Winkler
        normalize: Normalize query and candidates before scoring
        workers: Thread count for scoring; serial when None or 1

    Returns:
        ScoredCandidate list, best first
    """
    algorithm = FuzzyAlgorithm.parse(algorithm)
    pool = list(candidates)
    if max_results <= 0 or not pool:
        return []

    scores = _score_all(
        query,
        pool,
        algorithm,
        normalize,
        config,
        ngram_size,
        prefix_scale,
        workers,
    )
    kept = [
        ScoredCandidate(candidate=candidate, score=score, index=index)
        for index, (candidate, score) in enumerate(zip(pool, scores))
        if score >= min_similarity
    ]
    # sorted() is stable, so equal scores stay in input order
    kept = sorted(kept, key=lambda item: item.score, reverse=True)
    logger.debug(
        "Ranked %d/%d candidates for %r with %s",
        len(kept),
        len(pool),
        query,
        algorithm.value,
    )
    return kept[:max_results]


def find_best_matches(
    query: str,
    candidates: Iterable[str],
    max_results: int = 5,
    min_similarity: float = 0.5,
    algorithm: FuzzyAlgorithm | str = FuzzyAlgorithm.AUTO,
    *,
    normalize: bool = True,
    config: Optional[NormalizationConfig] = None,
    ngram_size: int = ngrams.DEFAULT_GRAM_SIZE,
    prefix_scale: float = 0.1,
    workers: Optional[int] = None,
) -> list[str]:
    """
    Best matching candidate strings for ``query``, best first.

    Example:
        find_best_matches("aple", ["apple", "apply", "orange"], 2, 0.5,
                          FuzzyAlgorithm.JARO_WINKLER) -> ["apple", "apply"]
    """
    ranked = rank_candidates(
        query,
        candidates,
        max_results,
        min_similarity,
        algorithm,
        normalize=normalize,
        config=config,
        ngram_size=ngram_size,
        prefix_scale=prefix_scale,
        workers=workers,
    )
    return [item.candidate for item in ranked]

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Optional

from ..config import Settings
from ..core import FuzzyAlgorithm, ScoredCandidate, rank_candidates

logger = logging.getLogger(__name__)


def read_candidates(path: Path) -> list[str]:
    """One candidate per line; blank lines and lines starting with # are skipped."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"Cannot read candidates from {path}: {exc}") from exc
    candidates = []
    for raw in text.splitlines():
        line = raw.strip()
        if line and not line.startswith("#"):
            candidates.append(line)
    return candidates


def run(
    settings: Settings,
    query: str,
    candidates: Iterable[str],
    *,
    limit: Optional[int] = None,
    min_similarity: Optional[float] = None,
    algorithm: Optional[FuzzyAlgorithm] = None,
    workers: Optional[int] = None,
    json_output: bool = False,
) -> list[ScoredCandidate]:
    matching = settings.matching
    pool = list(candidates)
    ranked = rank_candidates(
        query,
        pool,
        matching.max_results if limit is None else limit,
        matching.min_similarity if min_similarity is None else min_similarity,
        algorithm or matching.algorithm,
        normalize=matching.normalize,
        config=settings.normalization.to_config(),
        ngram_size=matching.ngram_size,
        prefix_scale=matching.prefix_scale,
        workers=workers or matching.workers,
    )
    if not pool:
        logger.warning("No candidates given for %r", query)
    if json_output:
        payload = [
            {"candidate": item.candidate, "score": item.score, "index": item.index}
            for item in ranked
        ]
        print(json.dumps(payload, indent=2))
        return ranked
    if not ranked:
        print("No matches found.")
        return ranked
    for position, item in enumerate(ranked, start=1):
        print(f"{position:>3}. {item.candidate}  ({item.score:.4f})")
    return ranked

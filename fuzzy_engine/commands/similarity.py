from __future__ import annotations

from typing import Optional

from ..config import Settings
from ..core import FuzzyAlgorithm, similarity


def run(
    settings: Settings,
    a: str,
    b: str,
    *,
    algorithm: Optional[FuzzyAlgorithm] = None,
    normalize: Optional[bool] = None,
) -> float:
    matching = settings.matching
    score = similarity(
        a,
        b,
        algorithm or matching.algorithm,
        matching.normalize if normalize is None else normalize,
        config=settings.normalization.to_config(),
        ngram_size=matching.ngram_size,
        prefix_scale=matching.prefix_scale,
    )
    print(f"{score:.4f}")
    return score

"""
Jaro and Jaro-Winkler similarity.
"""

from __future__ import annotations

WINKLER_THRESHOLD = 0.7
WINKLER_MAX_PREFIX = 4


def jaro(a: str, b: str) -> float:
    """
    Jaro similarity in [0, 1].

    Characters match when equal and no further apart than
    max(len) // 2 - 1 positions (at least 1). Half the number of matched
    characters that appear in a different order counts as transpositions.

    Examples:
        jaro("MARTHA", "MARHTA") -> 0.944...
        jaro("", "abc") -> 0.0
    """
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0

    len_a, len_b = len(a), len(b)
    window = max(max(len_a, len_b) // 2 - 1, 1)

    matched_a = [False] * len_a
    matched_b = [False] * len_b
    matches = 0
    for i, ch in enumerate(a):
        start = max(0, i - window)
        end = min(i + window + 1, len_b)
        for j in range(start, end):
            if matched_b[j] or b[j] != ch:
                continue
            matched_a[i] = True
            matched_b[j] = True
            matches += 1
            break

    if matches == 0:
        return 0.0

    out_of_order = 0
    k = 0
    for i, ch in enumerate(a):
        if not matched_a[i]:
            continue
        while not matched_b[k]:
            k += 1
        if ch != b[k]:
            out_of_order += 1
        k += 1

    transpositions = out_of_order // 2
    return (
        matches / len_a
        + matches / len_b
        + (matches - transpositions) / matches
    ) / 3.0


def common_prefix_length(a: str, b: str, limit: int = WINKLER_MAX_PREFIX) -> int:
    length = 0
    for ch_a, ch_b in zip(a[:limit], b[:limit]):
        if ch_a != ch_b:
            break
        length += 1
    return length


def jaro_winkler(a: str, b: str, prefix_scale: float = 0.1) -> float:
    """
    Jaro similarity boosted by a shared prefix of up to 4 characters.

    The boost only applies once Jaro reaches 0.7:
    jaro + prefix * prefix_scale * (1 - jaro).

    Example:
        jaro_winkler("MARTHA", "MARHTA") -> 0.961...
    """
    score = jaro(a, b)
    if score < WINKLER_THRESHOLD:
        return score
    prefix = common_prefix_length(a, b)
    return min(1.0, score + prefix * prefix_scale * (1.0 - score))

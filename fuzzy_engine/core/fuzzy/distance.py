"""
Edit-distance algorithms.

All distances count elementary edits between two strings, character by
character. Hamming is the exception: it is undefined for strings of
different length and reports the sentinel ``HAMMING_UNDEFINED`` instead.
"""

from __future__ import annotations

from ..models import FuzzyAlgorithm

HAMMING_UNDEFINED = -1


def levenshtein(a: str, b: str) -> int:
    """
    Insertion/deletion/substitution distance.

    Two rolling rows sized by the shorter string.

    Examples:
        levenshtein("kitten", "sitting") -> 3
        levenshtein("", "abc") -> 3
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ch_a in enumerate(a, start=1):
        current = [i] + [0] * len(b)
        for j, ch_b in enumerate(b, start=1):
            cost = 0 if ch_a == ch_b else 1
            current[j] = min(
                previous[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                previous[j - 1] + cost,  # substitution
            )
        previous = current
    return previous[-1]


def damerau_levenshtein(a: str, b: str) -> int:
    """
    Edit distance with unrestricted adjacent transpositions (Lowrance-Wagner).

    A transposed pair may be edited again afterwards, so
    damerau_levenshtein("CA", "ABC") is 2 where optimal_alignment gives 3.

    ``last_row`` remembers the last row of ``a`` where each symbol was seen,
    ``last_col`` the last column in the current row where ``b`` matched.
    """
    len_a, len_b = len(a), len(b)
    if len_a == 0:
        return len_b
    if len_b == 0:
        return len_a

    max_dist = len_a + len_b
    # Row/column 0 hold the max_dist border, row/column 1 the empty-prefix costs.
    table = [[0] * (len_b + 2) for _ in range(len_a + 2)]
    table[0][0] = max_dist
    for i in range(len_a + 1):
        table[i + 1][0] = max_dist
        table[i + 1][1] = i
    for j in range(len_b + 1):
        table[0][j + 1] = max_dist
        table[1][j + 1] = j

    last_row: dict[str, int] = {}
    for i in range(1, len_a + 1):
        ch_a = a[i - 1]
        last_col = 0
        for j in range(1, len_b + 1):
            ch_b = b[j - 1]
            k = last_row.get(ch_b, 0)
            l = last_col
            if ch_a == ch_b:
                cost = 0
                last_col = j
            else:
                cost = 1
            table[i + 1][j + 1] = min(
                table[i][j] + cost,
                table[i + 1][j] + 1,
                table[i][j + 1] + 1,
                table[k][l] + (i - k - 1) + 1 + (j - l - 1),
            )
        last_row[ch_a] = i

    return table[len_a + 1][len_b + 1]


def optimal_alignment(a: str, b: str) -> int:
    """
    Restricted Damerau distance: adjacent transpositions, no substring edited twice.

    Never smaller than damerau_levenshtein.
    """
    len_a, len_b = len(a), len(b)
    if len_a == 0:
        return len_b
    if len_b == 0:
        return len_a

    two_back: list[int] = []
    previous = list(range(len_b + 1))
    for i in range(1, len_a + 1):
        current = [i] + [0] * len_b
        for j in range(1, len_b + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            best = min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + cost,
            )
            if i > 1 and j > 1 and a[i - 1] == b[j - 2] and a[i - 2] == b[j - 1]:
                best = min(best, two_back[j - 2] + cost)
            current[j] = best
        two_back, previous = previous, current
    return previous[len_b]


def hamming(a: str, b: str) -> int:
    """Count of differing positions, or HAMMING_UNDEFINED (-1) when lengths differ."""
    if len(a) != len(b):
        return HAMMING_UNDEFINED
    return sum(1 for ch_a, ch_b in zip(a, b) if ch_a != ch_b)


def edit_distance(
    a: str, b: str, algorithm: FuzzyAlgorithm | str = FuzzyAlgorithm.LEVENSHTEIN
) -> int:
    """Distance by the named algorithm; anything that is not a distance falls back to Levenshtein."""
    algorithm = FuzzyAlgorithm.parse(algorithm)
    if algorithm is FuzzyAlgorithm.DAMERAU_LEVENSHTEIN:
        return damerau_levenshtein(a, b)
    if algorithm is FuzzyAlgorithm.OPTIMAL_ALIGNMENT:
        return optimal_alignment(a, b)
    if algorithm is FuzzyAlgorithm.HAMMING:
        return hamming(a, b)
    return levenshtein(a, b)


def distance_to_similarity(distance: int, a: str, b: str) -> float:
    """
    Turn an edit distance into a similarity: 1 - distance / max(len).

    The Hamming sentinel maps to 0.0; two empty strings are identical (1.0).
    """
    if distance < 0:
        return 0.0
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return max(0.0, 1.0 - distance / longest)

"""
Phonetic encodings: Soundex and a simplified double Metaphone.

Both are English-oriented heuristics. They group common spellings of the
same sounding word; they are not meant to be linguistically complete.
"""

from __future__ import annotations

from ..tables import LazyTable

SOUNDEX_LENGTH = 4
METAPHONE_MAX_LENGTH = 4
SILENT_LEADING_PAIRS = ("GN", "KN", "PN", "WR")
VOWELS = frozenset("AEIOUY")


def _build_soundex_map() -> dict[str, str]:
    classes = {
        "1": "BFPV",
        "2": "CGJKQSXZ",
        "3": "DT",
        "4": "L",
        "5": "MN",
        "6": "R",
    }
    # A, E, I, O, U, H, W, Y stay unmapped
    return {letter: digit for digit, letters in classes.items() for letter in letters}


# One-letter codes shared by primary and secondary encodings
_SIMPLE_METAPHONE = {
    "D": "T",
    "F": "F",
    "J": "J",
    "K": "K",
    "L": "L",
    "M": "M",
    "N": "N",
    "Q": "K",
    "R": "R",
    "S": "S",
    "V": "F",
    "W": "W",
    "X": "KS",
    "Z": "S",
}

SOUNDEX_MAP: LazyTable[str, str] = LazyTable("soundex", _build_soundex_map)


def soundex(text: str) -> str:
    """
    Four-character Soundex code.

    The first character is kept (uppercased). Later letters are replaced by
    their digit class; a digit equal to the last one written is dropped.
    Vowels and H/W/Y are skipped without a code, while any non-letter
    resets the last digit so the next coded letter is always written.

    Examples:
        soundex("Robert") -> "R163"
        soundex("Rupert") -> "R163"
        soundex("") -> "0000"
    """
    if not text:
        return "0" * SOUNDEX_LENGTH

    table = SOUNDEX_MAP.get()
    upper = text.upper()
    code = [upper[0]]
    last_digit = "0"
    for ch in upper[1:]:
        if len(code) >= SOUNDEX_LENGTH:
            break
        digit = table.get(ch)
        if digit is not None:
            if digit != last_digit:
                code.append(digit)
                last_digit = digit
        elif not ch.isalpha():
            last_digit = "0"

    return "".join(code).ljust(SOUNDEX_LENGTH, "0")


def metaphone(text: str, double: bool = True) -> list[str]:
    """
    Simplified Metaphone encoding.

    Returns the primary code and, when ``double`` is set and it differs,
    a secondary code. The only divergence between the two is ``TH``, which
    is ``0`` (theta) in the primary and ``T`` in the secondary code.

    Rules:
    - Leading GN, KN, PN, WR drop their first letter; leading X sounds as S
    - Vowels (and Y) are only written at position 0
    - CH -> X, CE/CI/CY -> S, other C -> K
    - GH -> K (H consumed), G -> K
    - H is written only between a non-letter (or the start) and a letter
    - PH -> F, doubled B written once
    - Encoding stops once the primary code holds 4 characters

    Examples:
        metaphone("Thomas") -> ["0MS", "TMS"]
        metaphone("Knight") -> ["NKT"]
    """
    if not text:
        return [""]

    upper = text.upper()
    length = len(upper)
    primary: list[str] = []
    secondary: list[str] = []

    def emit(first: str, second: str | None = None) -> None:
        primary.append(first)
        secondary.append(first if second is None else second)

    def next_is(pos: int, letters: str) -> bool:
        return pos + 1 < length and upper[pos + 1] in letters

    current = 0
    if length > 1:
        if upper[:2] in SILENT_LEADING_PAIRS:
            current = 1
        elif upper[0] == "X":
            emit("S")
            current = 1

    while current < length and len("".join(primary)) < METAPHONE_MAX_LENGTH:
        ch = upper[current]
        if ch in VOWELS:
            if current == 0:
                emit(ch)
        elif ch == "B":
            emit("B")
            if next_is(current, "B"):
                current += 1
        elif ch == "C":
            if next_is(current, "H"):
                emit("X")
                current += 1
            elif next_is(current, "IEY"):
                emit("S")
            else:
                emit("K")
        elif ch == "G":
            if next_is(current, "H"):
                current += 1
            emit("K")
        elif ch == "H":
            after_letter = current > 0 and upper[current - 1].isalpha()
            before_letter = current + 1 < length and upper[current + 1].isalpha()
            if not after_letter and before_letter:
                emit("H")
        elif ch == "P":
            if next_is(current, "H"):
                emit("F")
                current += 1
            else:
                emit("P")
        elif ch == "T":
            if next_is(current, "H"):
                emit("0", "T")
                current += 1
            else:
                emit("T")
        elif ch in _SIMPLE_METAPHONE:
            emit(_SIMPLE_METAPHONE[ch])
        current += 1

    primary_code = "".join(primary)
    secondary_code = "".join(secondary)
    codes = [primary_code]
    if double and secondary_code != primary_code:
        codes.append(secondary_code)
    return codes


def metaphone_match(a: str, b: str) -> bool:
    """True when any metaphone code of ``a`` equals any code of ``b``."""
    codes_b = set(metaphone(b))
    return any(code in codes_b for code in metaphone(a))


def are_phonetically_equal(a: str, b: str) -> bool:
    """Soundex codes match, or the two strings share a metaphone code."""
    if soundex(a) == soundex(b):
        return True
    return metaphone_match(a, b)

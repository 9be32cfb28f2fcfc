from __future__ import annotations

from ..core import metaphone, soundex


def run(words: list[str]) -> list[tuple[str, str, list[str]]]:
    rows = [(word, soundex(word), metaphone(word)) for word in words]
    width = max((len(word) for word in words), default=0)
    for word, code, codes in rows:
        print(f"{word.ljust(width)}  soundex={code}  metaphone={'/'.join(codes)}")
    return rows

"""
Text normalization applied before strings are compared.

Every function here is total: it never raises and returns the input
unchanged when there is nothing to do. Characters the tables do not know
about pass through untouched.
"""

from __future__ import annotations

import re
from typing import Optional

from .models import NormalizationConfig, NormalizationMode
from .tables import LazyTable

_WHITESPACE_RUN = re.compile(r"\s+")


def _build_accent_map() -> dict[str, str]:
    folds = {
        "a": "àáâãäåæ",
        "c": "ç",
        "e": "èéêë",
        "i": "ìíîï",
        "n": "ñ",
        "o": "òóôõöø",
        "u": "ùúûü",
        "y": "ýÿ",
        "A": "ÀÁÂÃÄÅÆ",
        "C": "Ç",
        "E": "ÈÉÊË",
        "I": "ÌÍÎÏ",
        "N": "Ñ",
        "O": "ÒÓÔÕÖØ",
        "U": "ÙÚÛÜ",
        "Y": "ÝŸ",
    }
    return {accented: base for base, chars in folds.items() for accented in chars}


ACCENT_MAP: LazyTable[str, str] = LazyTable("accents", _build_accent_map)


def normalize(text: str, config: Optional[NormalizationConfig] = None) -> str:
    """
    Normalize text for comparison.

    Process (each step only when its switch is on):
    1. Fold accented Latin-1 letters to their ASCII base
    2. Lowercase (skipped when preserve_case is set)
    3. Remove punctuation, keeping whitespace
    4. Remove digits
    5. Trim, then collapse whitespace runs to a single space

    Examples:
        "  Crème  Brûlée " -> "creme brulee"
        "Café #42!" (aggressive) -> "cafe"

    Args:
        text: Text to normalize
        config: Switches to apply, the default preset when omitted

    Returns:
        Normalized text
    """
    if not text:
        return ""
    if config is None:
        config = NormalizationConfig.default()

    result = text
    if config.remove_accents:
        result = remove_accents(result)
    if config.lowercase and not config.preserve_case:
        result = to_lowercase(result)
    if config.remove_punctuation:
        result = remove_punctuation(result, keep_spaces=True)
    if config.remove_numbers:
        result = remove_numbers(result)
    if config.trim_whitespace:
        result = trim_whitespace(result)
    if config.collapse_whitespace:
        result = collapse_whitespace(result)
    return result


def normalize_with_mode(text: str, mode: NormalizationMode) -> str:
    if mode is NormalizationMode.LOWERCASE:
        return to_lowercase(text)
    if mode is NormalizationMode.UPPERCASE:
        return to_uppercase(text)
    if mode is NormalizationMode.TRIM_WHITESPACE:
        return trim_whitespace(text)
    if mode is NormalizationMode.REMOVE_ACCENTS:
        return remove_accents(text)
    if mode is NormalizationMode.FULL:
        return normalize(text)
    return text


def to_lowercase(text: str) -> str:
    return text.lower()


def to_uppercase(text: str) -> str:
    return text.upper()


def trim_whitespace(text: str) -> str:
    return text.strip()


def collapse_whitespace(text: str) -> str:
    """Replace every whitespace run with a single space."""
    return _WHITESPACE_RUN.sub(" ", text)


def remove_accents(text: str) -> str:
    table = ACCENT_MAP.get()
    return "".join(table.get(ch, ch) for ch in text)


def remove_accent_from_char(ch: str) -> str:
    return ACCENT_MAP.get().get(ch, ch)


def is_accented_char(ch: str) -> bool:
    return ch in ACCENT_MAP.get()


def remove_punctuation(text: str, keep_spaces: bool = True) -> str:
    """
    Drop everything that is neither alphanumeric nor (optionally) whitespace.

    Symbols such as ``$`` or ``©`` go too, not only Unicode "P*" punctuation.
    """
    return keep_alphanumeric(text, keep_spaces=keep_spaces)


def remove_numbers(text: str) -> str:
    return "".join(ch for ch in text if not ch.isdigit())


def keep_alphanumeric(text: str, keep_spaces: bool = True) -> str:
    return "".join(
        ch for ch in text if ch.isalnum() or (keep_spaces and ch.isspace())
    )


def normalize_char(ch: str, config: Optional[NormalizationConfig] = None) -> str:
    """
    Normalize a single character.

    Returns an empty string when the character is filtered out and a single
    space for whitespace when collapsing is enabled.
    """
    if not ch:
        return ""
    if config is None:
        config = NormalizationConfig.default()
    if config.remove_accents:
        ch = remove_accent_from_char(ch)
    if config.lowercase and not config.preserve_case:
        ch = ch.lower()
    if config.remove_punctuation and not (ch.isalnum() or ch.isspace()):
        return ""
    if config.remove_numbers and ch.isdigit():
        return ""
    if ch.isspace() and config.collapse_whitespace:
        return " "
    return ch

"""Residual text cleanup: strips digits, punctuation and symbols, normalizes whitespace."""
import re
import unicodedata
from functools import lru_cache

_WHITESPACE = re.compile(r"\s+")

# Punctuation, symbols and numbers separate words
_SEPARATING_CATEGORIES = ("P", "S", "N")
# Apostrophes and invisible characters (ZWJ, bidi marks, variation selectors) sit inside words
_APOSTROPHES = frozenset("'’")
_VARIATION_SELECTORS = frozenset(chr(cp) for cp in range(0xFE00, 0xFE10))

_DROP = ""
_SEPARATE = " "


@lru_cache(maxsize=4096)
def _replacement(char: str) -> str:
    if char in _APOSTROPHES or char in _VARIATION_SELECTORS:
        return _DROP
    category = unicodedata.category(char)
    if category == "Cf":
        return _DROP
    if category[0] in _SEPARATING_CATEGORIES:
        return _SEPARATE
    return char


def clean_text(text: str) -> str:
    """
    Remove digits, punctuation and symbols, collapse whitespace and trim.

    A removed character leaves a word break behind (`well-known` -> `well known`),
    except apostrophes and invisible format characters, which are dropped
    (`don't` -> `dont`). Letters of any script and combining marks survive.
    The result may be empty.
    """
    kept = "".join(_replacement(char) for char in text)
    return _WHITESPACE.sub(" ", kept).strip()

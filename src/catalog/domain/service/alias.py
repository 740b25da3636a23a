"""Product aliases (URL slugs).

Aliases are lowercase with every whitespace run replaced by a single
underscore. Aliases derived from a title are also transliterated from
Cyrillic to Latin; aliases supplied by a user are not.
"""

from __future__ import annotations

import re

# Ukrainian letters first, then the Russian-only ones.
CYRILLIC_TO_LATIN: dict[str, str] = {
    "а": "a", "б": "b", "в": "v", "г": "h", "ґ": "g", "д": "d",
    "е": "e", "є": "ie", "ж": "zh", "з": "z", "и": "y", "і": "i",
    "ї": "i", "й": "i", "к": "k", "л": "l", "м": "m", "н": "n",
    "о": "o", "п": "p", "р": "r", "с": "s", "т": "t", "у": "u",
    "ф": "f", "х": "kh", "ц": "ts", "ч": "ch", "ш": "sh", "щ": "shch",
    "ь": "", "ю": "iu", "я": "ia", "ʼ": "",
    "ё": "io", "ъ": "", "ы": "y", "э": "e",
}

_TRANSLIT = str.maketrans(CYRILLIC_TO_LATIN)
_WHITESPACE_RE = re.compile(r"\s+")


def transliterate(text: str) -> str:
    """Map lowercase Cyrillic letters to Latin; everything else passes through."""
    return text.translate(_TRANSLIT)


def normalize_alias(alias: str) -> str:
    return _WHITESPACE_RE.sub("_", alias.strip().lower())


def generate_alias(title: str) -> str:
    return normalize_alias(transliterate(title.lower()))

"""
Language token to file extension mapping.

Maps the language tokens accepted by ``--language`` to the file extensions
that are collected. Tokens are case-insensitive and one option value may
carry several comma-separated tokens.
"""

import re
from typing import Iterable, Optional

ALL_LANGUAGES = "all"

LANGUAGE_EXTENSIONS = {
    "cs": ".cs",
    "c#": ".cs",
    "js": ".js",
    "ts": ".ts",
    "python": ".py",
    "py": ".py",
    "java": ".java",
}

_TOKEN_SEPARATORS = re.compile(r"[,\s]+")


def split_language_tokens(value: Optional[str]) -> list[str]:
    """Split a raw option value like ``"py, js"`` into lower-cased tokens."""
    if not value:
        return []
    return [token.lower() for token in _TOKEN_SEPARATORS.split(value.strip()) if token]


def normalize_language_tokens(values: Optional[Iterable[str]]) -> frozenset[str]:
    """Flatten repeated and comma-separated option values into one token set."""
    tokens: set[str] = set()
    for value in values or ():
        tokens.update(split_language_tokens(value))
    return frozenset(tokens)


def resolve_extensions(tokens: Iterable[str]) -> frozenset[str]:
    """Resolve language tokens to the set of extensions to collect.

    ``all`` expands to every known extension. Unknown tokens are dropped,
    so the result may be empty.
    """
    tokens = normalize_language_tokens(tokens)
    if ALL_LANGUAGES in tokens:
        return frozenset(LANGUAGE_EXTENSIONS.values())
    return frozenset(
        LANGUAGE_EXTENSIONS[token] for token in tokens if token in LANGUAGE_EXTENSIONS
    )

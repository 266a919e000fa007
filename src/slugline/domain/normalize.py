"""Default display-name normalizer.

The codec treats normalization as an opaque collaborator: any pure
``(str) -> str`` callable works.  This module provides the stock one,
backed by python-slugify: lowercase, NFKC-folded, ASCII-transliterated,
with every run of URL-unsafe characters replaced by ``-``.

Two different names may normalize to the same token.  That is fine,
the identifier segment is what resolves the entity.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Callable

from slugify import slugify

Normalizer = Callable[[str], str]


def normalize_name(text: str, *, max_length: int = 0, lowercase: bool = True) -> str:
    """Normalize a display name into a URL-safe token.

    Args:
        text: Arbitrary display name.
        max_length: Truncate the token to this many characters (0 = no limit).
        lowercase: Lowercase the token.

    Examples:
        >>> normalize_name("Add Index: users.email")
        'add-index-users-email'
        >>> normalize_name("Café Déjà Vu")
        'cafe-deja-vu'
    """
    text = unicodedata.normalize("NFKC", text)
    return slugify(text, max_length=max_length, lowercase=lowercase)


def make_normalizer(*, max_length: int = 0, lowercase: bool = True) -> Normalizer:
    """Bind normalization options into a single-argument normalizer."""

    def _normalize(text: str) -> str:
        return normalize_name(text, max_length=max_length, lowercase=lowercase)

    return _normalize

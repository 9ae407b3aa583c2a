"""Slug generation for heading anchors."""

from __future__ import annotations

import re
import unicodedata

_SEPARATOR_RUN = re.compile(r"[^a-z0-9]+")


def generate_slug(title: str) -> str:
    """Generate a URL-safe anchor id from heading text.

    Folds accented Latin letters to ASCII through NFKD decomposition and drops
    every other non-ASCII character, lowercases, replaces each run of
    characters other than ``a-z`` and ``0-9`` (underscores included) with a
    single hyphen, and strips hyphens from both ends. Returns ``"untitled"``
    when nothing remains, so a heading made only of punctuation or non-Latin
    script never gets an empty ``id``. Equal titles always give equal slugs;
    collisions between headings are left alone.

    Args:
        title: The heading text to convert into a slug.

    Returns:
        str: Hyphen-separated slug suitable for an ``id`` attribute.

    Examples:
        generate_slug("Where am I?")  # "where-am-i"
        generate_slug("a__b")  # "a-b"
        generate_slug("Café")  # "cafe"
        generate_slug("***")  # "untitled"
    """
    # Step 1: Decompose accented letters, then drop what is not ASCII
    normalized = unicodedata.normalize("NFKD", title)
    slug = normalized.encode("ascii", "ignore").decode("ascii")

    # Step 2: Lowercase and collapse separators
    slug = slug.lower()
    slug = _SEPARATOR_RUN.sub("-", slug)
    slug = slug.strip("-")

    return slug if slug else "untitled"

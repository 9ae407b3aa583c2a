from __future__ import annotations

import pytest

from markpage.slugify import generate_slug


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("a b c", "a-b-c"),
        ("  a  ", "a"),
        ("-a-b-", "a-b"),
        ("\ta*/+()b", "a-b"),
        ("a__b", "a-b"),
        ("a.b", "a-b"),
        ("a-b", "a-b"),
        ("Where am I?", "where-am-i"),
        ("What's New?", "what-s-new"),
        ("Version 2.0 Release", "version-2-0-release"),
    ],
)
def test_generate_slug_expected_examples(title: str, expected: str):
    """Validates slug generation for representative examples."""
    assert generate_slug(title) == expected


def test_generate_slug_folds_accented_latin():
    assert generate_slug("Café & Résumé") == "cafe-resume"
    assert generate_slug("Ångström Über") == "angstrom-uber"


def test_generate_slug_drops_other_scripts():
    assert generate_slug("α-ω") == "untitled"
    assert generate_slug("Read 📖, Write ✍️, Repeat!") == "read-write-repeat"


def test_generate_slug_returns_untitled_when_nothing_remains():
    assert generate_slug("") == "untitled"
    assert generate_slug("   \n\t ") == "untitled"
    assert generate_slug("***") == "untitled"


def test_generate_slug_does_not_deduplicate():
    assert generate_slug("Setup") == generate_slug("setup") == generate_slug("SETUP!")

from __future__ import annotations

import re
import string

from hypothesis import assume, given
from hypothesis import strategies as st

from markpage.converter import markdown_to_html
from markpage.frontmatter import Frontmatter, split_markdown
from markpage.generator import generate_toc_html
from markpage.models import Heading
from markpage.slugify import generate_slug

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


@given(st.text())
def test_text_without_open_marker_is_all_body(text: str):
    assume(not text.startswith(("+++\n", "---\n")))

    assert split_markdown(text) == (Frontmatter.empty(), text)


@given(st.text())
def test_generate_slug_is_url_safe(title: str):
    slug = generate_slug(title)

    assert SLUG_PATTERN.match(slug)


@given(st.text())
def test_generate_slug_is_idempotent(title: str):
    slug = generate_slug(title)

    assert generate_slug(slug) == slug


@given(st.lists(st.integers(min_value=1, max_value=6), max_size=30))
def test_toc_groups_always_balance(levels: list[int]):
    headings = [
        Heading(index=(i, i + 1, i + 2), level=level, text=f"H{i}", slug=f"h{i}")
        for i, level in enumerate(levels)
    ]

    toc = generate_toc_html(headings)

    depth = 0
    for marker in re.findall(r"</?div>", toc):
        depth += -1 if marker.startswith("</") else 1
        assert depth >= 0
    assert depth == 0
    assert toc.count("<p>") == sum(1 for level in levels if level <= 4)


body_text = st.text(alphabet=string.ascii_letters + string.digits + " #\n", max_size=200)


@given(body_text, body_text)
def test_toc_marker_is_always_stripped(before: str, after: str):
    result = markdown_to_html(f"{before}\n\n<!-- toc -->\n\n{after}")

    assert result.toc is not None
    assert "<!-- toc -->" not in result.content


@given(body_text)
def test_no_marker_means_no_toc(body: str):
    result = markdown_to_html(body)

    assert result.toc is None
    assert "id=" not in result.content

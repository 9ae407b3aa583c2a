from __future__ import annotations

from markdown_it.token import Token

from markpage.headings import (
    _try_finish_heading,
    _try_record_text,
    _try_start_heading,
    collect_headings,
    heading_text,
)
from markpage.models import Heading, HeadingParseState, HeadingScan


def heading_open(level: int) -> Token:
    return Token("heading_open", f"h{level}", 1, block=True)


def heading_close(level: int) -> Token:
    return Token("heading_close", f"h{level}", -1, block=True)


def text(content: str) -> Token:
    return Token(
        "inline", "", 0, content=content, children=[Token("text", "", 0, content=content)]
    )


def paragraph(content: str) -> list[Token]:
    return [
        Token("paragraph_open", "p", 1, block=True),
        text(content),
        Token("paragraph_close", "p", -1, block=True),
    ]


def test_try_start_heading_sets_scan_fields():
    scan = HeadingScan()

    assert _try_start_heading(scan, 3, heading_open(2)) is True
    assert scan.state is HeadingParseState.HEADING_STARTED
    assert scan.start_index == 3
    assert scan.level == 2


def test_try_start_heading_ignores_other_tokens():
    scan = HeadingScan()

    assert _try_start_heading(scan, 0, text("x")) is False
    assert scan.state is HeadingParseState.IDLE


def test_try_record_text_requires_started_heading():
    scan = HeadingScan()

    assert _try_record_text(scan, 1, text("Intro")) is False
    assert scan.state is HeadingParseState.IDLE


def test_try_record_text_moves_to_text_parsed():
    scan = HeadingScan(state=HeadingParseState.HEADING_STARTED, start_index=0, level=1)

    assert _try_record_text(scan, 1, text("Intro")) is True
    assert scan.state is HeadingParseState.HEADING_TEXT_PARSED
    assert scan.text_index == 1
    assert scan.text == "Intro"


def test_try_finish_heading_requires_matching_level():
    scan = HeadingScan(
        state=HeadingParseState.HEADING_TEXT_PARSED, start_index=0, text_index=1, level=2, text="A"
    )

    assert _try_finish_heading(scan, 2, heading_close(3)) is None
    assert scan.state is HeadingParseState.HEADING_TEXT_PARSED

    heading = _try_finish_heading(scan, 2, heading_close(2))
    assert heading == Heading(index=(0, 1, 2), level=2, text="A", slug="a")
    assert scan.state is HeadingParseState.IDLE


def test_collect_headings_records_triples_and_patches_start_tokens():
    tokens = [
        heading_open(1), text("Intro"), heading_close(1),
        *paragraph("Body"),
        heading_open(2), text("Getting Started"), heading_close(2),
    ]

    headings = collect_headings(tokens)

    assert headings == [
        Heading(index=(0, 1, 2), level=1, text="Intro", slug="intro"),
        Heading(index=(6, 7, 8), level=2, text="Getting Started", slug="getting-started"),
    ]
    assert tokens[0].type == "html_block"
    assert tokens[0].content == '<h1 id="intro">'
    assert tokens[6].content == '<h2 id="getting-started">'
    assert tokens[4].type == "inline"
    assert len(tokens) == 9


def test_mismatched_levels_produce_no_heading_and_no_patch():
    tokens = [heading_open(2), text("Setup"), heading_close(3)]

    assert collect_headings(tokens) == []
    assert tokens[0].type == "heading_open"


def test_second_start_replaces_pending_heading():
    tokens = [heading_open(2), heading_open(3), text("Deep"), heading_close(3)]

    headings = collect_headings(tokens)

    assert headings == [Heading(index=(1, 2, 3), level=3, text="Deep", slug="deep")]
    assert tokens[0].type == "heading_open"
    assert tokens[1].content == '<h3 id="deep">'


def test_multiple_text_tokens_are_not_a_heading():
    tokens = [heading_open(2), text("One"), text("Two"), heading_close(2)]

    assert collect_headings(tokens) == []
    assert tokens[0].type == "heading_open"


def test_missing_end_is_skipped_and_scan_continues():
    tokens = [
        heading_open(1), text("Lost"),
        heading_open(2), text("Found"), heading_close(2),
    ]

    headings = collect_headings(tokens)

    assert [h.text for h in headings] == ["Found"]


def test_empty_heading_text_is_not_a_text_event():
    tokens = [heading_open(2), text(""), heading_close(2), heading_open(2), text("B"), heading_close(2)]

    headings = collect_headings(tokens)

    assert [h.index for h in headings] == [(3, 4, 5)]


def test_duplicate_titles_share_a_slug():
    tokens = [
        heading_open(2), text("Notes"), heading_close(2),
        heading_open(2), text("Notes"), heading_close(2),
    ]

    assert [h.slug for h in collect_headings(tokens)] == ["notes", "notes"]


def test_collect_headings_on_parsed_markdown(md):
    tokens = md.parse("# Using `pip` *today*\n\nSetext\n------\n")

    headings = collect_headings(tokens)

    assert [(h.level, h.text, h.slug) for h in headings] == [
        (1, "Using pip today", "using-pip-today"),
        (2, "Setext", "setext"),
    ]


def test_heading_text_joins_line_breaks(md):
    tokens = md.parse("Line one\nline two\n===\n")

    assert heading_text(tokens[1]) == "Line one line two"


def test_image_alt_text_is_heading_text(md):
    tokens = md.parse("# ![Logo](x.png)\n\n## Next\n")

    headings = collect_headings(tokens)

    assert [(h.level, h.text, h.slug) for h in headings] == [(1, "Logo", "logo"), (2, "Next", "next")]

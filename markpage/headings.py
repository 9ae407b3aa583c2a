"""Heading discovery and anchor attachment over a markdown-it token stream."""

from __future__ import annotations

import logging

from markdown_it.token import Token

from .models import Heading, HeadingParseState, HeadingScan
from .slugify import generate_slug

logger = logging.getLogger(__name__)

HEADING_OPEN = "heading_open"
HEADING_CLOSE = "heading_close"
TEXT_EVENT = "inline"


def heading_level(token: Token) -> int:
    """Return the level of a heading token, e.g. 2 for ``h2``."""
    return int(token.tag[1:])


def heading_text(token: Token) -> str:
    """Extract the display text of an inline token.

    Joins the content of ``text`` and ``code_inline`` children and the alt
    text of images, and turns line breaks into spaces; emphasis and link
    markup are dropped.

    Args:
        token: An ``inline`` token.

    Returns:
        str: Plain text with surrounding whitespace removed.

    Examples:
        # for "## Using `pip` *today*"
        heading_text(tokens[1])  # "Using pip today"
    """
    if not token.children:
        return token.content.strip()

    parts = []
    for child in token.children:
        if child.type in ("text", "code_inline"):
            parts.append(child.content)
        elif child.type == "image":
            parts.append(heading_text(child))
        elif child.type in ("softbreak", "hardbreak"):
            parts.append(" ")
    return "".join(parts).strip()


def _try_start_heading(scan: HeadingScan, index: int, token: Token) -> bool:
    """Begin a heading on a start token.

    A heading that is still pending is dropped in favour of the new one.

    Returns:
        bool: True when the token started a heading.
    """
    if token.type != HEADING_OPEN:
        return False

    scan.state = HeadingParseState.HEADING_STARTED
    scan.start_index = index
    scan.level = heading_level(token)
    scan.text_index = 0
    scan.text = ""
    return True


def _try_record_text(scan: HeadingScan, index: int, token: Token) -> bool:
    """Record the text of a started heading.

    A second text token inside the same heading means the heading is not a
    simple start/text/end triple, and it is abandoned.

    Returns:
        bool: True when the token was consumed as heading text.
    """
    if token.type != TEXT_EVENT or scan.state is HeadingParseState.IDLE:
        return False

    text = heading_text(token)
    if not text:
        return False

    if scan.state is HeadingParseState.HEADING_TEXT_PARSED:
        scan.state = HeadingParseState.IDLE
        return True

    scan.state = HeadingParseState.HEADING_TEXT_PARSED
    scan.text_index = index
    scan.text = text
    return True


def _try_finish_heading(scan: HeadingScan, index: int, token: Token) -> Heading | None:
    """Complete a heading on an end token with the pending level.

    Returns:
        Heading | None: The finished heading, or None when the token does not
            close the pending heading.
    """
    if scan.state is not HeadingParseState.HEADING_TEXT_PARSED:
        return None
    if token.type != HEADING_CLOSE or heading_level(token) != scan.level:
        return None

    heading = Heading(
        index=(scan.start_index, scan.text_index, index),
        level=scan.level,
        text=scan.text,
        slug=generate_slug(scan.text),
    )
    scan.state = HeadingParseState.IDLE
    return heading


def collect_headings(tokens: list[Token]) -> list[Heading]:
    """Find well-formed headings and give their start tokens an anchor id.

    Walks the tokens once from left to right. A heading is recorded only for a
    start token, exactly one non-empty text token, and an end token of the
    same level; any other shape is skipped and its tokens are left as they
    were. Afterwards the start token of every recorded heading is replaced by
    a raw HTML token rendering ``<h{level} id="{slug}">``. No other token is
    touched and the sequence keeps its length and order.

    Args:
        tokens: Block-level tokens from `MarkdownIt.parse`; modified in place.

    Returns:
        list[Heading]: Headings in document order.

    Examples:
        tokens = md.parse("# Title\\n\\n## Setup\\n")
        [h.slug for h in collect_headings(tokens)]  # ["title", "setup"]
    """
    scan = HeadingScan()
    headings: list[Heading] = []

    for index, token in enumerate(tokens):
        if _try_start_heading(scan, index, token):
            continue

        if _try_record_text(scan, index, token):
            continue

        heading = _try_finish_heading(scan, index, token)
        if heading is not None:
            headings.append(heading)

    patches = {}
    for heading in headings:
        start_index = heading.index[0]
        patches[start_index] = _anchor_token(heading, tokens[start_index])
    for index, replacement in patches.items():
        tokens[index] = replacement

    logger.debug("Attached anchor ids to %d heading(s)", len(headings))
    return headings


def _anchor_token(heading: Heading, original: Token) -> Token:
    return Token(
        type="html_block",
        tag="",
        nesting=0,
        content=heading.html_start_element(),
        map=original.map,
        level=original.level,
        block=True,
    )

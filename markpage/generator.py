"""Table of contents generation from collected headings."""

from __future__ import annotations

from html import escape

from .config import RenderConfig
from .models import Heading


def toc_item_html(href: str, text: str, config: RenderConfig | None = None) -> str:
    """Render one TOC entry: a link to ``#href`` wrapped in the item markup.

    Examples:
        toc_item_html("setup", "Setup")  # '<p><a href="#setup">Setup</a></p>'
    """
    config = config or RenderConfig()
    return f'{config.toc_item}<a href="#{href}">{escape(text)}</a>{config.toc_end_item}'


def generate_toc_html(
    headings: list[Heading], max_depth: int | None = None, config: RenderConfig | None = None
) -> str:
    """Render headings as nested TOC markup.

    Nesting comes from the level difference between consecutive headings
    rather than from a tree: moving deeper opens one group per level skipped,
    moving shallower closes one group per level, and every group still open
    after the last heading is closed. Headings deeper than `max_depth` are
    left out.

    Args:
        headings: Headings in document order.
        max_depth: Deepest level to include; defaults to
            ``config.max_toc_depth``.
        config: Configuration supplying the group and item markup.

    Returns:
        str: Balanced TOC markup; empty when no heading qualifies.

    Examples:
        # levels [1, 2, 2, 1]
        generate_toc_html(headings)
        # '<div><p>..</p><div><p>..</p><p>..</p></div><p>..</p></div>'
    """
    config = config or RenderConfig()
    if max_depth is None:
        max_depth = config.max_toc_depth

    parts: list[str] = []
    indent = 0
    for heading in headings:
        if not 1 <= heading.level <= max_depth:
            continue

        if heading.level > indent:
            parts.append(config.toc_indent * (heading.level - indent))
            indent = heading.level
        elif heading.level < indent:
            parts.append(config.toc_end_indent * (indent - heading.level))
            indent = heading.level

        parts.append(toc_item_html(heading.slug, heading.text, config))

    parts.append(config.toc_end_indent * indent)
    return "".join(parts)

"""Markdown to HTML conversion with optional table of contents."""

from __future__ import annotations

import logging
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.token import Token
from mdit_py_plugins.tasklists import tasklists_plugin

from .config import RenderConfig, validate_config
from .generator import generate_toc_html
from .headings import collect_headings
from .models import RenderResult

logger = logging.getLogger(__name__)

RAW_HTML_TYPES = ("html_block", "html_inline")


def create_parser(config: RenderConfig | None = None) -> MarkdownIt:
    """Build the Markdown parser used for page bodies.

    CommonMark with raw HTML allowed, plus tables, strikethrough, and task
    lists unless switched off in `config`.

    Args:
        config: Configuration selecting the extensions.

    Returns:
        MarkdownIt: A configured parser.
    """
    config = config or RenderConfig()
    md = MarkdownIt("commonmark", {"html": True})

    extensions = []
    if config.enable_tables:
        extensions.append("table")
    if config.enable_strikethrough:
        extensions.append("strikethrough")
    if extensions:
        md.enable(extensions)
    if config.enable_tasklists:
        md.use(tasklists_plugin)
    return md


def _fix_empty_links(token: Token) -> None:
    for child in token.children or []:
        if child.type == "link_open" and not child.attrGet("href"):
            child.attrSet("href", "#")


def _strip_toc_marker(token: Token, marker: str) -> bool:
    if marker not in token.content:
        return False
    token.content = token.content.replace(marker, "", 1)
    return True


def normalize_tokens(tokens: list[Token], config: RenderConfig | None = None) -> bool:
    """Apply link and TOC-marker fixes to a parsed token sequence.

    Links with an empty destination are pointed at ``#``. Raw HTML tokens
    lose the first occurrence of the TOC marker they contain.

    Args:
        tokens: Block-level tokens; modified in place.
        config: Configuration supplying the TOC marker.

    Returns:
        bool: True when any token carried the TOC marker.
    """
    config = config or RenderConfig()
    enable_toc = False

    for token in tokens:
        if token.type in RAW_HTML_TYPES:
            enable_toc = _strip_toc_marker(token, config.toc_marker) or enable_toc
        elif token.type == "inline":
            _fix_empty_links(token)
            for child in token.children or []:
                if child.type in RAW_HTML_TYPES:
                    enable_toc = _strip_toc_marker(child, config.toc_marker) or enable_toc

    return enable_toc


def markdown_to_html(markdown: str, config: RenderConfig | None = None) -> RenderResult:
    """Convert a Markdown body to HTML, with a TOC when one is requested.

    The body is parsed into a flat token list so headings can be visited more
    than once. When the TOC marker appears in raw HTML, headings get anchor
    ids and a TOC fragment is built from them; otherwise headings are left as
    they are and no TOC is returned. The body must not carry frontmatter; use
    `split_markdown` first.

    Args:
        markdown: Markdown body text.
        config: Configuration for extensions, TOC marker, depth, and markup.

    Returns:
        RenderResult: The HTML content and the optional TOC.

    Raises:
        ConfigError: If the configuration fails validation.

    Examples:
        result = markdown_to_html("<!-- toc -->\\n\\n# Intro\\n\\n## Setup\\n")
        result.toc  # '<div><p><a href="#intro">Intro</a></p><div>...'
    """
    config = config or RenderConfig()
    validate_config(config)

    md = create_parser(config)
    env: dict[str, Any] = {}
    tokens = md.parse(markdown, env)

    toc = None
    if normalize_tokens(tokens, config):
        headings = collect_headings(tokens)
        toc = generate_toc_html(headings, config.max_toc_depth, config)
        logger.debug("Generated table of contents from %d heading(s)", len(headings))

    content = md.renderer.render(tokens, md.options, env)
    return RenderResult(content=content, toc=toc)


def page_context(
    markdown: str, data: dict[str, Any] | None = None, config: RenderConfig | None = None
) -> dict[str, Any]:
    """Build template variables for a page.

    Args:
        markdown: Markdown body text.
        data: Caller-supplied variables such as decoded frontmatter.
        config: Configuration passed to `markdown_to_html`.

    Returns:
        dict[str, Any]: A copy of `data` with ``content`` and, when a TOC was
            requested, ``toc`` set.
    """
    context = dict(data or {})
    result = markdown_to_html(markdown, config)
    context["content"] = result.content
    if result.toc is not None:
        context["toc"] = result.toc
    return context

"""Batch frontmatter decoding."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from .exceptions import MetadataError
from .frontmatter import parse_frontmatter, split_markdown
from .models import MarkdownData

logger = logging.getLogger(__name__)


def load_frontmatter(
    documents: Iterable[tuple[str, str]], record_type: Callable[..., Any] | None = None
) -> list[MarkdownData]:
    """Decode the frontmatter of every document in a batch.

    A document whose frontmatter is missing or malformed gets its error
    recorded in the result; it never stops the remaining documents from being
    decoded. Results keep the input order.

    Args:
        documents: Pairs of relative path and document text.
        record_type: Passed to `parse_frontmatter` for each document.

    Returns:
        list[MarkdownData]: One entry per document.

    Examples:
        results = load_frontmatter([("a.md", text_a), ("b.md", text_b)])
        failures = [item.rel_path for item in results if not item.ok]
    """
    results = []
    for rel_path, text in documents:
        front, _body = split_markdown(text)
        try:
            data = parse_frontmatter(front, record_type)
        except MetadataError as error:
            logger.warning("Skipping frontmatter of %s: %s", rel_path, error)
            results.append(MarkdownData(rel_path=rel_path, error=error))
            continue
        results.append(MarkdownData(rel_path=rel_path, frontmatter=data))
    return results

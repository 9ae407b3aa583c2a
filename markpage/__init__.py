"""
markpage: frontmatter extraction and heading-aware Markdown to HTML conversion.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    markpage render post.md
    markpage meta content/*.md

Library Usage:
    from pathlib import Path
    from markpage import markdown_to_html, parse_frontmatter, split_markdown

    front, body = split_markdown(Path("post.md").read_text())
    metadata = parse_frontmatter(front)
    result = markdown_to_html(body)
    html, toc = result.content, result.toc
"""

from .config import ConfigError, RenderConfig
from .converter import markdown_to_html, page_context
from .exceptions import MalformedMetadataError, MetadataError, MissingMetadataError
from .frontmatter import (
    Frontmatter,
    make_toml_frontmatter,
    parse_frontmatter,
    parse_frontmatter_to_map,
    split_markdown,
    write_markdown,
)
from .generator import generate_toc_html
from .headings import collect_headings
from .loader import load_frontmatter
from .models import FrontmatterKind, Heading, MarkdownData, RenderResult
from .slugify import generate_slug

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "split_markdown",
    "parse_frontmatter",
    "parse_frontmatter_to_map",
    "markdown_to_html",
    "collect_headings",
    "generate_toc_html",
    "generate_slug",
    # Encoding and batches
    "make_toml_frontmatter",
    "write_markdown",
    "load_frontmatter",
    "page_context",
    # Data models
    "Frontmatter",
    "FrontmatterKind",
    "Heading",
    "MarkdownData",
    "RenderResult",
    "RenderConfig",
    # Exceptions
    "ConfigError",
    "MetadataError",
    "MalformedMetadataError",
    "MissingMetadataError",
    # Version
    "__version__",
]

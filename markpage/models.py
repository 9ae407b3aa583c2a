"""Data models for markpage."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class FrontmatterKind(Enum):
    """Serialization format of a frontmatter block.

    Attributes:
        TOML: Block delimited by ``+++`` lines.
        YAML: Block delimited by ``---`` lines.
        EMPTY: No block, or a block with nothing in it.
    """

    TOML = "toml"
    YAML = "yaml"
    EMPTY = "empty"


class HeadingParseState(Enum):
    """States of the heading scanner.

    Attributes:
        IDLE: Not inside a heading.
        HEADING_STARTED: Saw a heading start; waiting for its text.
        HEADING_TEXT_PARSED: Saw start and text; waiting for the matching end.
    """

    IDLE = auto()
    HEADING_STARTED = auto()
    HEADING_TEXT_PARSED = auto()


@dataclass
class HeadingScan:
    """Encapsulate scanner state while walking a token sequence.

    Attributes:
        state: Current scanner state.
        start_index: Index of the pending heading start token.
        text_index: Index of the pending heading text token.
        level: Level of the pending heading.
        text: Display text of the pending heading.
    """

    state: HeadingParseState = HeadingParseState.IDLE
    start_index: int = 0
    text_index: int = 0
    level: int = 0
    text: str = ""


@dataclass(frozen=True)
class Heading:
    """A well-formed heading found in a token sequence.

    Attributes:
        index: Positions of the start, text, and end tokens.
        level: Heading level (1-6).
        text: Display text.
        slug: Anchor identifier derived from the text.
    """

    index: tuple[int, int, int]
    level: int
    text: str
    slug: str

    def html_start_element(self) -> str:
        """Render the opening tag carrying the anchor id, e.g. ``<h2 id="setup">``."""
        return f'<h{self.level} id="{self.slug}">'


@dataclass
class RenderResult:
    """HTML produced from a Markdown body.

    Attributes:
        content: The body converted to HTML.
        toc: Table of contents fragment, or None when no TOC was requested.
    """

    content: str
    toc: str | None = None


@dataclass
class MarkdownData:
    """Frontmatter decoding outcome for one document of a batch.

    Attributes:
        rel_path: Path of the document relative to its source root.
        frontmatter: Decoded metadata, or None when decoding failed.
        error: Decoding error, or None on success.
    """

    rel_path: str
    frontmatter: Any = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

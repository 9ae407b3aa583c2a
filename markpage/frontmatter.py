"""Frontmatter splitting, decoding, and encoding."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TextIO, TypeVar

import tomli_w
import tomllib
import yaml

from .constants import TOML_END, TOML_START, YAML_END, YAML_START
from .exceptions import MalformedMetadataError, MissingMetadataError
from .models import FrontmatterKind

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Frontmatter:
    """Metadata block found at the head of a document.

    The payload is a copy of the text between the delimiters, with surrounding
    whitespace removed.

    Attributes:
        kind: Format of the block, or `FrontmatterKind.EMPTY`.
        payload: Text between the delimiters; empty for `FrontmatterKind.EMPTY`.

    Examples:
        Frontmatter(FrontmatterKind.TOML, 'title = "Notes"')
        Frontmatter.empty()
    """

    kind: FrontmatterKind
    payload: str = ""

    @classmethod
    def empty(cls) -> Frontmatter:
        return cls(FrontmatterKind.EMPTY)

    @property
    def is_empty(self) -> bool:
        return self.kind is FrontmatterKind.EMPTY

    def parse(self, record_type: Callable[..., T] | None = None) -> T | dict[str, Any]:
        """Decode the payload; see `parse_frontmatter`."""
        return parse_frontmatter(self, record_type)


def split_markdown(markdown: str) -> tuple[Frontmatter, str]:
    """Split a document into frontmatter and body.

    The format is decided by the first bytes only: ``+++\\n`` opens a TOML
    block, ``---\\n`` a YAML block. The block must be closed by the same three
    characters on their own line. When a block is closed, both the payload
    and the body are stripped of surrounding whitespace; an empty payload
    gives an empty `Frontmatter`. When no block is opened or it is never
    closed, the whole text is returned untouched as the body.

    Args:
        markdown: Raw document text.

    Returns:
        tuple[Frontmatter, str]: The frontmatter and the body text.

    Examples:
        split_markdown('+++\\nthing = "one"\\n+++\\nhello')
        # (Frontmatter(FrontmatterKind.TOML, 'thing = "one"'), "hello")
        split_markdown("+++\\nhello")  # (Frontmatter.empty(), "+++\\nhello")
    """
    if markdown.startswith(TOML_START):
        kind, start, end = FrontmatterKind.TOML, TOML_START, TOML_END
    elif markdown.startswith(YAML_START):
        kind, start, end = FrontmatterKind.YAML, YAML_START, YAML_END
    else:
        return Frontmatter.empty(), markdown

    found = _remove_frontmatter(markdown, start, end)
    if found is None:
        logger.debug("Unterminated %s frontmatter; treating document as body", kind.value)
        return Frontmatter.empty(), markdown

    payload, body = found
    if not payload:
        return Frontmatter.empty(), body

    logger.debug("Found %s frontmatter (%d characters)", kind.value, len(payload))
    return Frontmatter(kind, payload), body


def _remove_frontmatter(markdown: str, start: str, end: str) -> tuple[str, str] | None:
    # Search from the newline ending the open marker so "+++\n+++\n" closes at once
    rest = markdown[len(start) - 1 :]
    end_index = rest.find(end)
    if end_index < 0:
        return None
    return rest[:end_index].strip(), rest[end_index + len(end) :].strip()


def parse_frontmatter_to_map(front: Frontmatter) -> dict[str, Any]:
    """Decode frontmatter into a mapping that keeps the payload's key order.

    Args:
        front: Frontmatter returned by `split_markdown`.

    Returns:
        dict[str, Any]: Decoded key-value pairs.

    Raises:
        MissingMetadataError: If `front` is empty.
        MalformedMetadataError: If the payload does not decode, or a YAML
            payload is not a mapping.

    Examples:
        front, _ = split_markdown("---\\ntitle: Notes\\n---\\nbody")
        parse_frontmatter_to_map(front)  # {"title": "Notes"}
    """
    if front.kind is FrontmatterKind.TOML:
        try:
            return tomllib.loads(front.payload)
        except tomllib.TOMLDecodeError as error:
            raise MalformedMetadataError(front.kind.value, str(error)) from error

    if front.kind is FrontmatterKind.YAML:
        try:
            data = yaml.safe_load(front.payload)
        except yaml.YAMLError as error:
            raise MalformedMetadataError(front.kind.value, str(error)) from error
        if not isinstance(data, dict):
            raise MalformedMetadataError(front.kind.value, "expected a mapping of values")
        return data

    raise MissingMetadataError()


def parse_frontmatter(
    front: Frontmatter, record_type: Callable[..., T] | None = None
) -> T | dict[str, Any]:
    """Decode frontmatter into a caller-chosen record type.

    The payload is decoded with `parse_frontmatter_to_map` and its keys are
    passed as keyword arguments to `record_type`, so dataclasses and other
    keyword-constructed classes work directly.

    Args:
        front: Frontmatter returned by `split_markdown`.
        record_type: Callable building the record; the mapping itself is
            returned when omitted.

    Returns:
        The constructed record, or the decoded mapping.

    Raises:
        MissingMetadataError: If `front` is empty.
        MalformedMetadataError: If the payload does not decode or does not
            fit `record_type`.

    Examples:
        @dataclass
        class Post:
            title: str
            tags: list[str] = field(default_factory=list)

        parse_frontmatter(front, Post)
    """
    data = parse_frontmatter_to_map(front)
    if record_type is None:
        return data

    try:
        return record_type(**data)
    except (TypeError, ValueError) as error:
        raise MalformedMetadataError(front.kind.value, str(error)) from error


def make_toml_frontmatter(data: Any) -> str:
    """Render metadata as a ``+++`` delimited TOML block.

    Args:
        data: Mapping or dataclass instance to serialize.

    Returns:
        str: The block, ending with the close marker.
    """
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        data = dataclasses.asdict(data)
    return f"{TOML_START}{tomli_w.dumps(data)}{TOML_END}"


def write_markdown(data: Any, content: str, writer: TextIO) -> None:
    """Write a TOML frontmatter block followed by `content` to `writer`.

    Args:
        data: Mapping or dataclass instance to serialize as frontmatter.
        content: Markdown body.
        writer: Text stream owned by the caller.

    Returns:
        None.

    Examples:
        with open("post.md", "w", encoding="UTF-8") as handle:
            write_markdown({"title": "Notes"}, "# Notes\\n", handle)
    """
    writer.write(make_toml_frontmatter(data))
    writer.write(content)
    writer.flush()

"""
Converts Markdown documents with frontmatter into HTML.
`render` prints a document's HTML (or its table of contents); `meta` prints
the decoded frontmatter of one or more documents as JSON.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from .config import ConfigError, RenderConfig, build_config
from .converter import markdown_to_html
from .filesystem import get_max_file_size, normalize_filepath, read_document
from .frontmatter import split_markdown
from .loader import load_frontmatter

__all__ = ["cli"]


def _resolve(filepath: str, base_dir: Path) -> Path:
    try:
        return normalize_filepath(filepath, base_dir)
    except ValueError as error:
        raise click.BadParameter(str(error)) from error


def _read(filepath: Path, config: RenderConfig) -> str:
    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
        return read_document(filepath, max_file_size)
    except (ValueError, IOError) as error:
        raise click.ClickException(str(error)) from error


def _json_keys(value):
    # YAML allows dates and numbers as keys; JSON objects need strings
    if isinstance(value, dict):
        return {str(key): _json_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_json_keys(item) for item in value]
    return value


@click.group()
@click.version_option()
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr")
def cli(verbose: bool = False):
    """Turn Markdown documents into HTML pages."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option("--toc-only", is_flag=True, help="Print only the table of contents")
@click.option("--max-toc-depth", type=int, help="Deepest heading level in the TOC")
@click.option("--toc-marker", help="Comment that requests a TOC")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def render(
    filepath: str,
    toc_only: bool = False,
    max_toc_depth: int | None = None,
    toc_marker: str | None = None,
):
    """
    Print the HTML of a Markdown document, without its frontmatter.

    Args:
        filepath: Path to the Markdown document.
        toc_only: Print the table of contents instead of the content.
        max_toc_depth: Override for the deepest heading level in the TOC.
        toc_marker: Override for the TOC request comment.

    Raises:
        click.BadParameter: If the path or configuration overrides are invalid.
        click.ClickException: If the document cannot be read.

    Examples:
        markpage render content/post.md --max-toc-depth 3
    """
    base_dir = Path.cwd().resolve()
    path = _resolve(filepath, base_dir)
    try:
        config = build_config(path.parent, max_toc_depth=max_toc_depth, toc_marker=toc_marker)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    _front, body = split_markdown(_read(path, config))
    result = markdown_to_html(body, config)

    if toc_only:
        if result.toc is None:
            raise click.ClickException(f"{path} does not request a table of contents.")
        click.echo(result.toc)
    else:
        click.echo(result.content, nl=False)


@cli.command()
@click.argument("filepaths", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def meta(ctx: click.Context, filepaths: tuple[str, ...]):
    """
    Print the frontmatter of each document as a JSON object keyed by path.

    Documents whose frontmatter is missing or malformed are reported on
    stderr; the others are still printed, and the command exits with status 1.

    Examples:
        markpage meta content/*.md
    """
    base_dir = Path.cwd().resolve()
    try:
        config = build_config(base_dir)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error
    documents = []
    for filepath in filepaths:
        path = _resolve(filepath, base_dir)
        documents.append((path.relative_to(base_dir).as_posix(), _read(path, config)))

    results = load_frontmatter(documents)
    output = {item.rel_path: _json_keys(item.frontmatter) for item in results if item.ok}
    click.echo(json.dumps(output, indent=2, default=str))

    failures = [item for item in results if not item.ok]
    for item in failures:
        click.echo(f"{item.rel_path}: {item.error}", err=True)
    if failures:
        ctx.exit(1)


if __name__ == "__main__":
    cli()

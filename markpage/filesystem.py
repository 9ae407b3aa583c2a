"""Filesystem helpers used by the markpage CLI."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from .constants import DEFAULT_MAX_FILE_SIZE, MARKDOWN_EXTENSIONS

MAX_FILE_SIZE_ENV_VAR = "MARKPAGE_MAX_FILE_SIZE"


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Resolve the maximum size of a document the CLI will read.

    Args:
        default: Fallback value in bytes when the environment variable is unset.

    Returns:
        int: Maximum allowed file size in bytes.

    Raises:
        ValueError: If the environment value is not a positive integer.

    Examples:
        os.environ["MARKPAGE_MAX_FILE_SIZE"] = "204800"
        limit = get_max_file_size(default=102400)
    """
    env_value = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if env_value is None:
        return default

    try:
        max_size = int(env_value)
    except ValueError as error:
        error_message = (
            f"Invalid value for {MAX_FILE_SIZE_ENV_VAR}: {env_value} (expected positive integer)"
        )
        raise ValueError(error_message) from error

    if max_size <= 0:
        error_message = f"{MAX_FILE_SIZE_ENV_VAR} must be a positive integer, got {max_size}."
        raise ValueError(error_message)

    return max_size


def contains_symlink(path: Path) -> bool:
    """Check whether a path or any of its parents is a symlink."""
    for candidate in (path, *path.parents):
        try:
            if candidate.is_symlink():
                return True
        except OSError:
            continue
    return False


def normalize_filepath(raw_path: str, base_dir: Path) -> Path:
    """Resolve and validate a document path under a base directory.

    Args:
        raw_path: User-supplied path to a Markdown document.
        base_dir: Working directory that constrains allowed paths.

    Returns:
        Path: Absolute path to the document.

    Raises:
        ValueError: If the path does not exist, is not a regular file, lies
            outside `base_dir`, is not Markdown, or traverses a symlink.

    Examples:
        normalize_filepath("content/post.md", Path.cwd())
    """
    path = Path(raw_path).expanduser()

    if contains_symlink(path):
        raise ValueError(f"Symlinks are not supported: {path}")

    try:
        resolved = path.resolve(strict=True)
    except FileNotFoundError as error:
        raise ValueError(f"{path} does not exist.") from error
    except OSError as error:
        raise ValueError(f"Error resolving {path}: {error}") from error

    if not resolved.is_file():
        raise ValueError(f"{resolved} is not a regular file.")

    try:
        resolved.relative_to(base_dir)
    except ValueError as error:
        error_message = f"{resolved} is outside of the working directory {base_dir}."
        raise ValueError(error_message) from error

    if resolved.suffix.lower() not in MARKDOWN_EXTENSIONS:
        error_message = f"{resolved} is not a Markdown file.\n"
        error_message += f"Supported extensions are: {', '.join(MARKDOWN_EXTENSIONS)}"
        raise ValueError(error_message)

    return resolved


def collect_file_stat(filepath: Path) -> os.stat_result:
    """Return stat information for a regular, non-symlink file.

    Raises:
        IOError: If the path is inaccessible, a symlink, or not a regular file.
    """
    try:
        stat_result = os.stat(filepath, follow_symlinks=False)
    except OSError as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error

    if stat.S_ISLNK(stat_result.st_mode):
        raise IOError(f"Symlinks are not supported: {filepath}.")

    if not stat.S_ISREG(stat_result.st_mode):
        raise IOError(f"{filepath} is not a regular file.")

    return stat_result


def enforce_file_size(stat_result: os.stat_result, max_size: int, filepath: Path):
    """Reject documents larger than `max_size` bytes.

    Raises:
        IOError: If `stat_result.st_size` exceeds `max_size`.
    """
    if stat_result.st_size > max_size:
        error_message = f"{filepath} exceeds the maximum allowed size of {max_size} bytes."
        raise IOError(error_message)


def read_document(filepath: Path, max_size: int) -> str:
    """Read a document as UTF-8 text after the size check.

    Args:
        filepath: Path to the document.
        max_size: Maximum allowed size in bytes.

    Returns:
        str: The document text.

    Raises:
        IOError: If the file is unsuitable, too large, unreadable, or not
            valid UTF-8.

    Examples:
        text = read_document(Path("post.md"), 102400)
    """
    enforce_file_size(collect_file_stat(filepath), max_size, filepath)
    try:
        with open(filepath, "r", encoding="UTF-8") as file:
            return file.read()
    except UnicodeDecodeError as error:
        raise IOError(f"Invalid UTF-8 sequence in {filepath}: {error}") from error
    except (PermissionError, IsADirectoryError, NotADirectoryError) as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error

"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

@dataclass
class RenderConfig:
    """Configuration for converting Markdown bodies to HTML.

    Attributes:
        toc_marker: Comment that requests a table of contents when found in
            raw HTML.
        max_toc_depth: Deepest heading level listed in the TOC.
        toc_indent: Markup opening one nesting level of the TOC.
        toc_end_indent: Markup closing one nesting level of the TOC.
        toc_item: Markup opening a TOC entry.
        toc_end_item: Markup closing a TOC entry.
        enable_tables: Whether GitHub-style tables are parsed.
        enable_strikethrough: Whether ``~~strikethrough~~`` is parsed.
        enable_tasklists: Whether ``- [ ]`` task list items are parsed.
        max_file_size: Maximum file size in bytes the CLI will read.

    Examples:
        RenderConfig(max_toc_depth=3, toc_indent="<ul>", toc_end_indent="</ul>")
    """

    # TOC request
    toc_marker: str = "<!-- toc -->"
    max_toc_depth: int = 4

    # TOC markup; div/p instead of ul/li, the stylesheet indents each div
    toc_indent: str = "<div>"
    toc_end_indent: str = "</div>"
    toc_item: str = "<p>"
    toc_end_item: str = "</p>"

    # Markdown extensions
    enable_tables: bool = True
    enable_strikethrough: bool = True
    enable_tasklists: bool = True

    # Limits
    max_file_size: int = 10 * 1024 * 1024


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`max_toc_depth` must be <= 6")
    """


def load_config(search_path: Path) -> RenderConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.markpage]`` table from `pyproject.toml` and the ``[markpage]``
    or ``[tool.markpage]`` table from `.markpage.toml` when present. Returns
    default values when no configuration is found. TOML files that cannot be
    read or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        RenderConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("content"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "markpage")]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / ".markpage.toml",
            table_paths=[("markpage",), ("tool", "markpage")],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return RenderConfig()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> RenderConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> RenderConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    if not raw_config:
        return RenderConfig()

    try:
        return RenderConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: RenderConfig) -> None:
    """Validate a `RenderConfig` instance.

    Args:
        config: Configuration to validate.

    Returns:
        None.

    Raises:
        ConfigError: If the TOC depth is out of range, markup strings are
            empty, switches are not booleans, or the size limit is not a
            positive integer.

    Examples:
        validate_config(RenderConfig(max_toc_depth=3))
    """
    _ensure_integers(
        {
            "max_toc_depth": config.max_toc_depth,
            "max_file_size": config.max_file_size,
        }
    )

    if config.max_toc_depth < 1:
        raise ConfigError("`max_toc_depth` must be >= 1")
    if config.max_toc_depth > 6:
        raise ConfigError("`max_toc_depth` must be <= 6")
    if config.max_file_size <= 0:
        raise ConfigError("`max_file_size` must be a positive integer")

    for key in ("toc_marker", "toc_indent", "toc_end_indent", "toc_item", "toc_end_item"):
        value = getattr(config, key)
        if not isinstance(value, str) or not value:
            raise ConfigError(f"`{key}` must not be empty")

    for key in ("enable_tables", "enable_strikethrough", "enable_tasklists"):
        if not isinstance(getattr(config, key), bool):
            raise ConfigError(f"`{key}` must be a boolean")


def apply_overrides(config: RenderConfig, **overrides: object) -> RenderConfig:
    """Apply override values to a `RenderConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        RenderConfig: New configuration with the provided overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `RenderConfig`.

    Examples:
        updated = apply_overrides(config, max_toc_depth=2)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> RenderConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        RenderConfig: Validated configuration.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), max_toc_depth=3)
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")

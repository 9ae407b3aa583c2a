"""Constants used across the markpage package."""

from __future__ import annotations

from .config import RenderConfig

DEFAULT_CONFIG = RenderConfig()

# Frontmatter delimiters
TOML_START = "+++\n"
TOML_END = "\n+++\n"
YAML_START = "---\n"
YAML_END = "\n---\n"

# Files accepted by the CLI
MARKDOWN_EXTENSIONS = (".md", ".markdown")
DEFAULT_MAX_FILE_SIZE = DEFAULT_CONFIG.max_file_size

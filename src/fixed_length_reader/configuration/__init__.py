"""Configuration domain exports."""

from .layout_scaffold_builder import (
    DEFAULT_LAYOUT_FILENAME,
    build_placeholder_layout,
    write_placeholder_layout,
)
from .loader import DEFAULT_LAYOUT_ENCODING, ConfigurationError, load_layout, parse_layout
from .runtime_settings import LayoutConfiguration

__all__ = [
    "ConfigurationError",
    "DEFAULT_LAYOUT_ENCODING",
    "DEFAULT_LAYOUT_FILENAME",
    "LayoutConfiguration",
    "build_placeholder_layout",
    "load_layout",
    "parse_layout",
    "write_placeholder_layout",
]

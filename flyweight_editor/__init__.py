"""Flyweight Editor - shared, immutable styles for individually placed characters"""

from .config import (
    CONFIG_FILE,
    DEFAULT_CONFIG,
    DISPLAY_WIDTH,
    FALLBACK_PADDING,
    FLYWEIGHT_DIR,
    SHOW_HEADER,
    get_bool_setting,
    get_int_setting,
    get_setting,
    load_config,
)
from .console import console
from .document import Document, PlacedCharacter
from .registry import StyleRegistry
from .renderer import SEPARATOR, ConsoleRenderer
from .styles import Alignment, Color, StyleDescriptor
from .utils import get_version, print_header, print_sharing_summary

__all__ = [
    # Config
    "CONFIG_FILE",
    "DEFAULT_CONFIG",
    "DISPLAY_WIDTH",
    "FALLBACK_PADDING",
    "FLYWEIGHT_DIR",
    "SHOW_HEADER",
    "get_bool_setting",
    "get_int_setting",
    "get_setting",
    "load_config",
    # Console
    "console",
    # Styles
    "Alignment",
    "Color",
    "StyleDescriptor",
    "StyleRegistry",
    # Document
    "Document",
    "PlacedCharacter",
    # Rendering
    "SEPARATOR",
    "ConsoleRenderer",
    # Utils
    "get_version",
    "print_header",
    "print_sharing_summary",
]

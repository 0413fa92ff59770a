"""
Console renderer: prints placed characters together with their styles.

For each character the renderer writes three lines:

    <padding><symbol>[_]
    Font: ..., Size: ..., Bold: ..., Italic: ..., Color: ..., Underline: ..., Text Alignment: ...
    ******

Alignment is simulated with leading spaces sized from the display width:
  - Left:   no padding
  - Center: half the width, minus one
  - Right:  the full width, minus two (room for the symbol and underline mark)

Terminal color state:
  The symbol is printed as a Rich Text segment carrying its own Style. Rich
  emits the color codes for that segment and resets them right after it, so
  each character's color is entered and left within its own write and never
  leaks into the next line, even if printing fails halfway through.

Display width:
  Padding follows the width of the target console, so a Console(width=60)
  on a wide terminal is padded for 60 columns. Piped output or a StringIO
  with no width of its own has no terminal size. That case is handled here
  and replaced by a small fixed padding instead of raising.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import TYPE_CHECKING

from rich.console import Console
from rich.style import Style
from rich.text import Text

from .config import DISPLAY_WIDTH, FALLBACK_PADDING
from .console import console
from .styles import Alignment, Color, StyleDescriptor

if TYPE_CHECKING:
    from .document import PlacedCharacter

SEPARATOR = "******"
UNDERLINE_MARK = "_"

# Palette entries mapped onto Rich's standard ANSI color names.
# The "Dark" half of the palette is the normal ANSI range, the rest is bright.
RICH_COLORS: dict[Color, str] = {
    Color.BLACK: "black",
    Color.DARK_BLUE: "blue",
    Color.DARK_GREEN: "green",
    Color.DARK_CYAN: "cyan",
    Color.DARK_RED: "red",
    Color.DARK_MAGENTA: "magenta",
    Color.DARK_YELLOW: "yellow",
    Color.GRAY: "white",
    Color.DARK_GRAY: "bright_black",
    Color.BLUE: "bright_blue",
    Color.GREEN: "bright_green",
    Color.CYAN: "bright_cyan",
    Color.RED: "bright_red",
    Color.MAGENTA: "bright_magenta",
    Color.YELLOW: "bright_yellow",
    Color.WHITE: "bright_white",
}


class ConsoleRenderer:
    """Writes placed characters to a Rich console.

    Args:
        target: Console to write to. Defaults to the shared console.
        width: Display width used for alignment padding. When omitted (or 0)
            the DISPLAY_WIDTH setting is used, and when that is 0 too the
            target console's width (or its terminal) decides.
        fallback_padding: Spaces used for Center/Right alignment when the
            terminal size can't be determined. Defaults to FALLBACK_PADDING.
    """

    def __init__(
        self,
        target: Console | None = None,
        width: int | None = None,
        fallback_padding: int | None = None,
    ) -> None:
        self.console = target if target is not None else console
        self.width = width or DISPLAY_WIDTH
        self.fallback_padding = FALLBACK_PADDING if fallback_padding is None else fallback_padding

    def display_width(self) -> int | None:
        """Return the usable display width, or None if it can't be determined.

        Order: the renderer's own width, then the target console's width when
        that console is a terminal or was built with a width (or COLUMNS), then
        the size of the terminal behind the console's file.
        """
        if self.width > 0:
            return self.width
        # Rich keeps an explicitly requested width in _width; width itself
        # always answers, defaulting to 80 for non-terminals
        if self.console.is_terminal or getattr(self.console, "_width", None):
            return self.console.width
        try:
            return os.get_terminal_size(self.console.file.fileno()).columns
        except (AttributeError, OSError, ValueError):
            # No real terminal behind the console (pipe, StringIO, closed fd)
            return None

    def padding_for(self, alignment: Alignment) -> int:
        """Number of leading spaces that simulate the given alignment."""
        if alignment is Alignment.LEFT:
            return 0
        width = self.display_width()
        if width is None:
            return max(0, self.fallback_padding)
        if alignment is Alignment.CENTER:
            return max(0, width // 2 - 1)
        return max(0, width - 2)

    @staticmethod
    def symbol_style(style: StyleDescriptor) -> Style:
        """Translate a descriptor into the Rich Style applied to the symbol."""
        return Style(
            color=RICH_COLORS[style.color],
            bold=style.bold,
            italic=style.italic,
            underline=style.underline,
        )

    def render_character(self, character: PlacedCharacter) -> None:
        """Print one character, its style summary, and the separator line."""
        style = character.style

        line = Text(" " * self.padding_for(style.alignment))
        line.append(character.symbol, style=self.symbol_style(style))
        if style.underline:
            line.append(UNDERLINE_MARK)

        # soft_wrap keeps long summaries on one line; Text objects are never
        # parsed for markup, so fonts like "[bold]" print verbatim.
        self.console.print(line, soft_wrap=True)
        self.console.print(Text(style.describe()), soft_wrap=True)
        self.console.print(Text(SEPARATOR), soft_wrap=True)

    def render(self, characters: Iterable[PlacedCharacter]) -> None:
        """Print every character in iteration order. Nothing is printed for an empty iterable."""
        for character in characters:
            self.render_character(character)

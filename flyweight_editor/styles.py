"""
Immutable style value types for the Flyweight Editor.

A StyleDescriptor is the "intrinsic state" of the Flyweight pattern: the part
of a character's appearance that many characters can share. Once built it
never changes, which is what makes sharing one instance between thousands of
characters safe.

The two enums (Color and Alignment) are `str` enums whose values are the
display names printed in style summaries, e.g. "Red" or "Center".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Color(str, Enum):
    """The classic 16-color console palette."""

    BLACK = "Black"
    DARK_BLUE = "DarkBlue"
    DARK_GREEN = "DarkGreen"
    DARK_CYAN = "DarkCyan"
    DARK_RED = "DarkRed"
    DARK_MAGENTA = "DarkMagenta"
    DARK_YELLOW = "DarkYellow"
    GRAY = "Gray"
    DARK_GRAY = "DarkGray"
    BLUE = "Blue"
    GREEN = "Green"
    CYAN = "Cyan"
    RED = "Red"
    MAGENTA = "Magenta"
    YELLOW = "Yellow"
    WHITE = "White"

    def __str__(self) -> str:
        return self.value


class Alignment(str, Enum):
    """Horizontal placement of a character on its line."""

    LEFT = "Left"
    CENTER = "Center"
    RIGHT = "Right"

    def __str__(self) -> str:
        return self.value


# (font, size, bold, italic, color, underline, alignment)
StyleKey = tuple[str, int, bool, bool, Color, bool, Alignment]


@dataclass(frozen=True, slots=True)
class StyleDescriptor:
    """A shared, read-only bundle of the seven style attributes.

    Field values are stored exactly as given. In particular `size` is not
    validated, so zero or negative sizes are accepted.

    Two descriptors compare equal when all seven fields are equal, but the
    registry guarantees that equal descriptors are also the *same object*,
    so `a is b` is the cheap sharing check callers should use.
    """

    font: str
    size: int
    bold: bool
    italic: bool
    color: Color
    underline: bool
    alignment: Alignment

    @property
    def key(self) -> StyleKey:
        """The structural tuple the registry caches this descriptor under."""
        return (
            self.font,
            self.size,
            self.bold,
            self.italic,
            self.color,
            self.underline,
            self.alignment,
        )

    def describe(self) -> str:
        """Format all seven fields as a one-line summary in a fixed order."""
        return (
            f"Font: {self.font}, Size: {self.size}, Bold: {self.bold}, "
            f"Italic: {self.italic}, Color: {self.color}, "
            f"Underline: {self.underline}, Text Alignment: {self.alignment}"
        )

    def __str__(self) -> str:
        return self.describe()

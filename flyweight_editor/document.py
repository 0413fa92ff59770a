"""
The document: an append-only list of characters that share styles.

Each PlacedCharacter holds only what is unique to it (its symbol and
position) plus a reference to a StyleDescriptor owned by the document's
StyleRegistry. A thousand red Arial characters therefore cost a thousand
small records and one style object.

There are no editing semantics here. `position` is stored as given and is
never checked for uniqueness, order, or bounds; characters are kept in the
order they were inserted, and nothing is ever removed.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .registry import StyleRegistry
from .renderer import ConsoleRenderer
from .styles import Alignment, Color, StyleDescriptor


@dataclass(frozen=True, slots=True)
class PlacedCharacter:
    """A symbol at a position, pointing at a shared style."""

    symbol: str
    position: int
    style: StyleDescriptor


class Document:
    """Ordered, append-only collection of PlacedCharacter entries."""

    def __init__(self) -> None:
        self._characters: list[PlacedCharacter] = []
        self._registry = StyleRegistry()

    @property
    def registry(self) -> StyleRegistry:
        """The registry that owns every style used by this document."""
        return self._registry

    @property
    def characters(self) -> tuple[PlacedCharacter, ...]:
        """Snapshot of the characters in insertion order."""
        return tuple(self._characters)

    def insert(
        self,
        symbol: str,
        position: int,
        font: str,
        size: int,
        bold: bool,
        italic: bool,
        color: Color = Color.WHITE,
        underline: bool = False,
        alignment: Alignment = Alignment.LEFT,
    ) -> None:
        """Append a character whose style is fetched from the registry.

        Only font, size, bold and italic are required; the rest default to
        white, not underlined, left aligned. The document grows by exactly
        one entry and existing entries are left untouched.
        """
        style = self._registry.get_or_create(font, size, bold, italic, color, underline, alignment)
        self._characters.append(PlacedCharacter(symbol, position, style))

    def render(self, renderer: ConsoleRenderer | None = None) -> None:
        """Print every character in insertion order.

        Uses a ConsoleRenderer on the shared console unless one is given.
        An empty document prints nothing.
        """
        (renderer or ConsoleRenderer()).render(self._characters)

    def __len__(self) -> int:
        return len(self._characters)

    def __iter__(self) -> Iterator[PlacedCharacter]:
        return iter(self.characters)

    def __getitem__(self, index: int) -> PlacedCharacter:
        return self._characters[index]

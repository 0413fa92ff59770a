"""
The style registry: the Flyweight cache at the heart of the editor.

Every character in a document needs a style, but most documents only use a
handful of distinct styles. Instead of allocating one StyleDescriptor per
character, the Document asks the registry for a style and the registry hands
back a shared instance:

  - First request for a combination: build a StyleDescriptor, remember it.
  - Every later request for the same combination: return the remembered one.

How the cache is keyed:
  The dict key is the plain seven-field tuple. Tuples compare and hash
  field by field, so no two distinct combinations can ever land on the same
  key. A string key such as "Arial_12_True_..." would let a font literally
  named "Arial_12_True" collide with a different combination.

Lifetime:
  There is no eviction, no size limit, and no removal. The registry only
  grows, one entry per distinct combination it has seen.

Threading:
  The lookup-then-insert in get_or_create is not guarded by a lock. The
  registry is meant for a single caller on a single thread.
"""

from __future__ import annotations

from collections.abc import Iterator

from .styles import Alignment, Color, StyleDescriptor, StyleKey


class StyleRegistry:
    """Deduplicates StyleDescriptor instances by value."""

    def __init__(self) -> None:
        self._styles: dict[StyleKey, StyleDescriptor] = {}
        # Cache statistics shown by the demo's sharing summary
        self.created = 0
        self.reused = 0

    def get_or_create(
        self,
        font: str,
        size: int,
        bold: bool,
        italic: bool,
        color: Color,
        underline: bool,
        alignment: Alignment,
    ) -> StyleDescriptor:
        """Return the shared descriptor for this exact attribute combination.

        Calls with field-wise identical arguments return the identical object;
        calls differing in any field return distinct objects.
        """
        key: StyleKey = (font, size, bold, italic, color, underline, alignment)
        style = self._styles.get(key)
        if style is None:
            style = StyleDescriptor(font, size, bold, italic, color, underline, alignment)
            self._styles[key] = style
            self.created += 1
        else:
            self.reused += 1
        return style

    def styles(self) -> tuple[StyleDescriptor, ...]:
        """Return every descriptor created so far, oldest first."""
        return tuple(self._styles.values())

    def __len__(self) -> int:
        return len(self._styles)

    def __iter__(self) -> Iterator[StyleDescriptor]:
        return iter(self.styles())

    def __contains__(self, item: object) -> bool:
        # Accepts either a descriptor or its raw key tuple
        if isinstance(item, StyleDescriptor):
            return self._styles.get(item.key) is item
        return isinstance(item, tuple) and item in self._styles

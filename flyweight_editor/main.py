"""
Demo entry point: build a three-character document and render it.

Invoked by the `flyweight-editor` console script and by
`python -m flyweight_editor`.
"""

from .config import SHOW_HEADER
from .document import Document
from .styles import Alignment, Color
from .utils import print_header, print_sharing_summary


def build_sample_document() -> Document:
    """Return the sample document shown by the demo."""
    document = Document()
    document.insert("A", 0, "Arial", 12, True, False, Color.RED, True, Alignment.LEFT)
    document.insert("B", 1, "Roboto", 12, True, False, Color.GREEN, False, Alignment.CENTER)
    document.insert("C", 2, "Times New Roman", 14, False, True, Color.BLUE, True, Alignment.RIGHT)
    return document


def main():
    if SHOW_HEADER:
        print_header()

    document = build_sample_document()
    document.render()
    print_sharing_summary(document)

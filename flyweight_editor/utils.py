"""
Utility functions for the Flyweight Editor demo.

  - Version lookup (from installed package metadata)
  - Welcome header display (title and active display settings)
  - Sharing summary (how many characters share how many style objects)

None of these hold state; they read their inputs and print to the shared
console.
"""

from importlib.metadata import PackageNotFoundError, version

from rich import box
from rich.panel import Panel

from .config import DISPLAY_WIDTH, FALLBACK_PADDING
from .console import console
from .document import Document


def get_version() -> str:
    """Get the installed package version from Python package metadata.

    Returns "dev" when running from source without installing.
    """
    try:
        return version("flyweight-editor")
    except PackageNotFoundError:
        return "dev"


def print_header():
    """Print the welcome header with the active display settings.

    Rich's Panel draws a rounded box around the text; expand=False keeps the
    panel only as wide as its content.
    """
    width = str(DISPLAY_WIDTH) if DISPLAY_WIDTH > 0 else "auto"
    header_text = f"""[bold purple]Flyweight Editor[/bold purple] [dim]v{get_version()}[/dim]
[dim italic]shared styles for individually placed characters[/dim italic]

[dim]Display width: {width}[/dim]
[dim]Fallback padding: {FALLBACK_PADDING}[/dim]"""

    console.print(Panel(header_text, box=box.ROUNDED, expand=False))


def print_sharing_summary(document: Document):
    """Report how many style objects serve the document's characters.

    The gap between the two numbers is the memory the Flyweight cache saved:
    every reused lookup is a StyleDescriptor that was never allocated.
    """
    registry = document.registry
    console.print(
        f"[bold]Characters:[/bold] {len(document)}  "
        f"[bold]Distinct styles:[/bold] {len(registry)}  "
        f"[dim](created {registry.created}, reused {registry.reused})[/dim]"
    )

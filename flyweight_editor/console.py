"""
Shared Rich Console singleton for terminal output.

Every module that prints (the renderer, the header, config warnings) imports
this one instance instead of creating its own Console. Rich's Console tracks
terminal state such as width and color support, and a single instance keeps
that state consistent.

It also gives tests a single seam: patch `flyweight_editor.console` (or the
module-level name inside a specific module) and all output is captured.

Usage:
    from .console import console
    console.print("[green]Done[/green]")
"""

from rich.console import Console

# All terminal output in the editor flows through this object.
console = Console()

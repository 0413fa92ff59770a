"""
Entry point for running the editor demo as a module: `python -m flyweight_editor`

The console script defined in pyproject.toml calls `flyweight_editor.main:main`
directly; both paths end up in the same `main()` function.
"""

from .main import main

if __name__ == "__main__":
    main()

"""Public package surface for lazyeditor.

Exports ``main`` for programmatic CLI invocation.
Mode, selection, and preference types live in their submodules.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]

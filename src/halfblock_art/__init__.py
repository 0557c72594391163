"""Halfblock Art - Render images as half-block terminal art."""

__version__ = "0.1.0"

# `main` imports the CLI on first call so `python -m halfblock_art.cli`
# finds no half-imported copy of itself in sys.modules.


def main(*args, **kwargs):
    from .cli import main as _m

    return _m(*args, **kwargs)


__all__ = [
    "main",
]

"""A falling-block puzzle game and animated sorting visualizers on pygame."""

__version__ = "0.1.0"
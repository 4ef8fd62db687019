"""2D math and colour helpers, and a chess board with move search."""

__version__ = "0.1.0"
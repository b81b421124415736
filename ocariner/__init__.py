"""ocariner: noise-generated notes animated across a terminal music staff."""

__version__ = "0.1.0"

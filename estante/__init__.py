"""Terminal catalog for a library's book stock and loans."""

__version__ = "0.1.0"
__all__ = ["books", "cli", "menu"]
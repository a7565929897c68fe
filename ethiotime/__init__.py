"""Ethiopian calendar dates and times with Amharic layout-based formatting."""

__version__ = "0.1.0"
__all__ = ["ethdate", "layout"]
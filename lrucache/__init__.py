"""A small thread-safe least-recently-used cache, with a two-thread demo."""

__version__ = "0.1.0"
__all__ = ["__version__"]
"""A falling-block puzzle game with hold and preview, with its rules usable without a window."""

__version__ = "0.1.0"
__all__ = ["__version__"]
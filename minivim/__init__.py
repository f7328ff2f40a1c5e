"""A small modal terminal text editor with vi-style keys and C/C++ syntax highlighting."""

__version__ = "0.1.0"
__all__ = ["__version__"]
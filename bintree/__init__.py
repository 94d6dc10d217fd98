"""A binary tree of integers with traversal, measurement, ASCII rendering and a demo command."""

__version__ = "0.1.0"
__all__ = ["__version__"]
"""A turn-based terminal battle between two parties of fantasy characters."""

__version__ = "0.1.0"
__all__ = ["battle", "classes"]
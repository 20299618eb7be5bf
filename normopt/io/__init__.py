"""Text output for matrices."""

from .format import matrix_as_str

__all__ = ["matrix_as_str"]

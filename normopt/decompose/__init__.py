"""Matrix decompositions."""

from .qr import qr

__all__ = ["qr"]

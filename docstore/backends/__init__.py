"""Backend clients the document store can wrap."""

from .base import DocumentClient
from .memory import MemoryDocumentClient

__all__ = [
    "DocumentClient",
    "MemoryDocumentClient",
]

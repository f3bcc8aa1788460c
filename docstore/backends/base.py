"""Contract every backend client satisfies."""

from typing import Protocol, runtime_checkable

from docstore.models import DocumentSnapshot, Record


@runtime_checkable
class DocumentClient(Protocol):
    """Minimal read/write/delete/enumerate surface over a document database.

    Paths are already normalised by the caller. Driver errors propagate
    unchanged.
    """

    async def get(self, path: str) -> DocumentSnapshot:
        """Read one document. A missing document yields exists=False."""
        ...

    async def set(self, path: str, data: Record) -> None:
        """Create or fully overwrite one document."""
        ...

    async def delete(self, path: str) -> None:
        """Delete one document. Deleting a missing document is a no-op."""
        ...

    async def list_documents(self, collection_path: str) -> list[DocumentSnapshot]:
        """Return every document directly inside a collection."""
        ...

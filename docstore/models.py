"""Type-safe models exchanged between the facade and its backends."""

from typing import Any

from pydantic import BaseModel

# A stored document. Always carries an "id" equal to its storage key once
# written through an insert or update.
Record = dict[str, Any]


class DocumentSnapshot(BaseModel):
    """Result of reading one document path from a backend."""

    path: str
    exists: bool
    data: Record | None = None

    def to_record(self) -> Record:
        """Return the stored data, or an empty dict for a missing document."""
        return dict(self.data) if self.data is not None else {}

"""In-memory backend for tests and local runs."""

import copy

from docstore.models import DocumentSnapshot, Record
from docstore.paths import join_path, normalize_path, split_document_path


class MemoryDocumentClient:
    """Dict-backed document client.

    Data is deep-copied on every write and read so callers never share
    references with stored documents. Documents are enumerated in ID order.
    """

    def __init__(self, initial: dict[str, dict[str, Record]] | None = None):
        self._collections: dict[str, dict[str, Record]] = {}
        for collection_path, documents in (initial or {}).items():
            for doc_id, data in documents.items():
                collection, key = split_document_path(join_path(collection_path, doc_id))
                self._collections.setdefault(collection, {})[key] = copy.deepcopy(data)

    async def get(self, path: str) -> DocumentSnapshot:
        collection_path, doc_id = split_document_path(path)
        data = self._collections.get(collection_path, {}).get(doc_id)
        if data is None:
            return DocumentSnapshot(path=path, exists=False)
        return DocumentSnapshot(path=path, exists=True, data=copy.deepcopy(data))

    async def set(self, path: str, data: Record) -> None:
        collection_path, doc_id = split_document_path(path)
        self._collections.setdefault(collection_path, {})[doc_id] = copy.deepcopy(data)

    async def delete(self, path: str) -> None:
        collection_path, doc_id = split_document_path(path)
        documents = self._collections.get(collection_path)
        if documents is not None:
            documents.pop(doc_id, None)

    async def list_documents(self, collection_path: str) -> list[DocumentSnapshot]:
        collection_path = normalize_path(collection_path).strip("/")
        documents = self._collections.get(collection_path, {})
        return [
            DocumentSnapshot(
                path=join_path(collection_path, doc_id),
                exists=True,
                data=copy.deepcopy(documents[doc_id]),
            )
            for doc_id in sorted(documents)
        ]

"""Google Cloud Firestore backend on the async client."""

import logging

from google.cloud.firestore import AsyncClient

from docstore.models import DocumentSnapshot, Record
from docstore.paths import normalize_path

logger = logging.getLogger(__name__)


class FirestoreDocumentClient:
    """Document client backed by a Firestore ``AsyncClient``.

    Firestore enumerates a collection in document ID order.
    """

    def __init__(self, client: AsyncClient):
        self.client = client
        logger.info("Initialized FirestoreDocumentClient")

    async def get(self, path: str) -> DocumentSnapshot:
        snapshot = await self.client.document(path.strip("/")).get()
        if not snapshot.exists:
            return DocumentSnapshot(path=path, exists=False)
        return DocumentSnapshot(path=path, exists=True, data=snapshot.to_dict())

    async def set(self, path: str, data: Record) -> None:
        await self.client.document(path.strip("/")).set(data)

    async def delete(self, path: str) -> None:
        await self.client.document(path.strip("/")).delete()

    async def list_documents(self, collection_path: str) -> list[DocumentSnapshot]:
        collection_path = normalize_path(collection_path).strip("/")
        return [
            DocumentSnapshot(
                path=f"{collection_path}/{snapshot.id}",
                exists=True,
                data=snapshot.to_dict(),
            )
            async for snapshot in self.client.collection(collection_path).stream()
        ]

"""MongoDB backend on the motor async driver."""

import logging

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo import ASCENDING

from docstore.models import DocumentSnapshot, Record
from docstore.paths import join_path, normalize_path, split_document_path

logger = logging.getLogger(__name__)

KEY_FIELD = "_id"


class MongoDocumentClient:
    """Document client backed by a motor database.

    The collection path (e.g. ``users/abc/posts``) is used verbatim as the
    Mongo collection name and the document ID is stored as ``_id``. ``_id`` is
    stripped from every document read back.

    Documents keyed by an ``ObjectId`` (written outside this client) are
    addressed by the ID's hex string and keep their ``ObjectId`` key.
    """

    def __init__(self, database: AsyncIOMotorDatabase):
        self.database = database
        logger.info(f"Initialized MongoDocumentClient for database {database.name}")

    def _collection(self, collection_path: str) -> AsyncIOMotorCollection:
        return self.database[collection_path]

    @staticmethod
    def _strip_key(raw: dict) -> Record:
        return {k: v for k, v in raw.items() if k != KEY_FIELD}

    @staticmethod
    def _key_filter(doc_id: str) -> dict:
        """Match a string key, or an ObjectId key with the same hex value."""
        if ObjectId.is_valid(doc_id):
            return {KEY_FIELD: {"$in": [doc_id, ObjectId(doc_id)]}}
        return {KEY_FIELD: doc_id}

    async def get(self, path: str) -> DocumentSnapshot:
        collection_path, doc_id = split_document_path(path)
        raw = await self._collection(collection_path).find_one(self._key_filter(doc_id))
        if raw is None:
            return DocumentSnapshot(path=path, exists=False)
        return DocumentSnapshot(path=path, exists=True, data=self._strip_key(raw))

    async def set(self, path: str, data: Record) -> None:
        collection_path, doc_id = split_document_path(path)
        collection = self._collection(collection_path)
        if ObjectId.is_valid(doc_id):
            # replacement without _id keeps whichever key the stored document has
            result = await collection.replace_one(
                self._key_filter(doc_id), self._strip_key(data)
            )
            if result.matched_count:
                return
        document = {**self._strip_key(data), KEY_FIELD: doc_id}
        await collection.replace_one({KEY_FIELD: doc_id}, document, upsert=True)

    async def delete(self, path: str) -> None:
        collection_path, doc_id = split_document_path(path)
        await self._collection(collection_path).delete_one(self._key_filter(doc_id))

    async def list_documents(self, collection_path: str) -> list[DocumentSnapshot]:
        collection_path = normalize_path(collection_path).strip("/")
        cursor = self._collection(collection_path).find({}).sort(KEY_FIELD, ASCENDING)
        raw_documents = await cursor.to_list(length=None)
        return [
            DocumentSnapshot(
                path=join_path(collection_path, str(raw[KEY_FIELD])),
                exists=True,
                data=self._strip_key(raw),
            )
            for raw in raw_documents
        ]

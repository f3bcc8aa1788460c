"""Async CRUD facade over a path-addressed document backend."""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from docstore.backends.base import DocumentClient
from docstore.config import Settings, get_settings
from docstore.exceptions import (
    DocumentNotFoundError,
    InvalidArgumentError,
    NotConnectedError,
)
from docstore.ids import generate_id
from docstore.models import Record
from docstore.paths import join_path, normalize_path

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

RecordLike = Mapping[str, Any] | BaseModel


def _require(value: Any, name: str) -> None:
    """Raise InvalidArgumentError for a missing required argument."""
    if value is None:
        raise InvalidArgumentError(f"{name} is required", argument=name)
    if isinstance(value, str) and not value.strip("/"):
        raise InvalidArgumentError(f"{name} must not be empty", argument=name)


def _require_str(value: Any, name: str) -> None:
    """Raise InvalidArgumentError for a missing or non-string path or ID."""
    _require(value, name)
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"{name} must be a string, got {type(value).__name__}", argument=name
        )


def _to_record(data: RecordLike, name: str = "data") -> Record:
    """Convert caller data to a plain dict."""
    if isinstance(data, BaseModel):
        return data.model_dump()
    if isinstance(data, Mapping):
        return dict(data)
    raise InvalidArgumentError(
        f"{name} must be a mapping or a pydantic model, got {type(data).__name__}",
        argument=name,
    )


class DocumentStore:
    """CRUD operations against collections and documents of one backend.

    Every record written through insert/update carries an ``id`` equal to its
    storage key; any ``id`` supplied by the caller is overwritten.
    """

    def __init__(
        self,
        client: DocumentClient | None = None,
        settings: Settings | None = None,
    ):
        settings = settings or get_settings()
        self._client = client
        self.id_length = settings.id_length

    def connect(self, client: DocumentClient) -> None:
        """Bind the backend client used by every operation."""
        _require(client, "client")
        self._client = client
        logger.info(f"Connected document store to {type(client).__name__}")

    @property
    def connected(self) -> bool:
        return self._client is not None

    @property
    def client(self) -> DocumentClient:
        """Get the backend client, raising if connect() was never called."""
        if self._client is None:
            raise NotConnectedError(
                "Document store is not connected. Call connect(client) first."
            )
        return self._client

    def generate_id(self) -> str:
        """Generate a new random document ID."""
        return generate_id(self.id_length)

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    async def insert(self, collection_path: str, data: RecordLike) -> str:
        """Insert a record under a freshly generated ID and return the ID."""
        _require(data, "data")
        _require_str(collection_path, "collection_path")
        record = _to_record(data)
        client = self.client

        doc_id = self.generate_id()
        path = join_path(collection_path, doc_id)
        await client.set(path, {**record, "id": doc_id})
        logger.debug(f"Inserted {path}")
        return doc_id

    async def insert_with_id(self, collection_path: str, id: str, data: RecordLike) -> str:
        """Insert (or overwrite) a record under a caller-chosen ID.

        Like insert(), the stored ``id`` field is forced to ``id`` even if
        ``data`` carries its own. Use set() to write a document verbatim.
        """
        _require(data, "data")
        _require_str(collection_path, "collection_path")
        _require_str(id, "id")
        record = _to_record(data)
        client = self.client

        path = join_path(collection_path, id)
        await client.set(path, {**record, "id": id})
        logger.debug(f"Inserted {path}")
        return id

    async def insert_and_get(self, collection_path: str, data: RecordLike) -> Record:
        """Insert a record and return it as stored."""
        doc_id = await self.insert(collection_path, data)
        return await self.get(collection_path, doc_id)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def exists(self, collection_path: str, id: str | None = None) -> bool:
        """Check whether a document exists.

        With an ``id`` the joined path is checked, otherwise ``collection_path``
        is itself treated as a document path.
        """
        _require_str(collection_path, "collection_path")
        if id is not None and not isinstance(id, str):
            raise InvalidArgumentError(
                f"id must be a string, got {type(id).__name__}", argument="id"
            )
        path = join_path(collection_path, id) if id else normalize_path(collection_path)
        snapshot = await self.client.get(path)
        return snapshot.exists

    async def get(self, collection_path: str, id: str) -> Record:
        """Fetch one record, raising DocumentNotFoundError if it is absent."""
        _require_str(id, "id")
        _require_str(collection_path, "collection_path")
        client = self.client

        path = join_path(collection_path, id)
        snapshot = await client.get(path)
        if not snapshot.exists:
            logger.debug(f"Document not found: {path}")
            raise DocumentNotFoundError(id, path)
        return snapshot.to_record()

    async def get_model(self, collection_path: str, id: str, model: type[ModelT]) -> ModelT:
        """Fetch one record and validate it into a pydantic model."""
        record = await self.get(collection_path, id)
        return model.model_validate(record)

    async def get_all(self, collection_path: str) -> list[Record]:
        """Fetch every record in a collection, in backend enumeration order."""
        _require_str(collection_path, "collection_path")
        snapshots = await self.client.list_documents(collection_path)
        return [snapshot.to_record() for snapshot in snapshots]

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    async def update(self, collection_path: str, id: str, data: RecordLike) -> None:
        """Merge ``data`` into an existing record. The ``id`` field is kept."""
        _require_str(id, "id")
        _require_str(collection_path, "collection_path")
        _require(data, "data")
        await self._merge(collection_path, id, _to_record(data))

    async def update_fields(self, collection_path: str, id: str, fields: RecordLike) -> None:
        """Overwrite selected fields of an existing record. The ``id`` field is kept."""
        _require_str(id, "id")
        _require_str(collection_path, "collection_path")
        _require(fields, "fields")
        await self._merge(collection_path, id, _to_record(fields, "fields"))

    async def _merge(self, collection_path: str, id: str, changes: Record) -> None:
        # shallow: nested mappings in changes replace the stored value whole
        current = await self.get(collection_path, id)
        path = join_path(collection_path, id)
        await self.client.set(path, {**current, **changes, "id": id})
        logger.debug(f"Updated {path} ({len(changes)} fields)")

    async def set(self, path: str, data: RecordLike) -> None:
        """Write ``data`` verbatim at a full document path, replacing any existing document."""
        _require_str(path, "path")
        _require(data, "data")
        record = _to_record(data)
        document_path = normalize_path(path)
        await self.client.set(document_path, record)
        logger.debug(f"Set {document_path}")

    async def update_and_get(self, collection_path: str, id: str, data: RecordLike) -> Record:
        await self.update(collection_path, id, data)
        return await self.get(collection_path, id)

    async def update_fields_and_get(
        self, collection_path: str, id: str, fields: RecordLike
    ) -> Record:
        await self.update_fields(collection_path, id, fields)
        return await self.get(collection_path, id)

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    async def delete(self, collection_path: str, id: str) -> None:
        """Delete one record, raising DocumentNotFoundError if it is absent."""
        _require_str(id, "id")
        _require_str(collection_path, "collection_path")
        client = self.client

        path = join_path(collection_path, id)
        snapshot = await client.get(path)
        if not snapshot.exists:
            logger.debug(f"Document not found: {path}")
            raise DocumentNotFoundError(id, path)
        await client.delete(path)
        logger.debug(f"Deleted {path}")

    async def delete_all(self, collection_path: str) -> None:
        """Delete every record in a collection concurrently.

        The first failing delete is raised; documents already deleted stay deleted.
        """
        _require_str(collection_path, "collection_path")
        client = self.client

        snapshots = await client.list_documents(collection_path)
        await asyncio.gather(*(client.delete(snapshot.path) for snapshot in snapshots))
        logger.info(f"Deleted {len(snapshots)} documents from {collection_path}")

"""
Process-wide default document store.

For code that prefers a shared store over passing a DocumentStore around:

    import docstore
    docstore.connect(MongoDocumentClient(motor_client["app"]))
    user = await docstore.get_store().get("users", user_id)
"""

import logging

from docstore.backends.base import DocumentClient
from docstore.config import Settings
from docstore.store import DocumentStore

logger = logging.getLogger(__name__)

# Global default store, bound by connect()
_store: DocumentStore | None = None


def connect(client: DocumentClient, settings: Settings | None = None) -> DocumentStore:
    """
    Bind the process-wide default store to a backend client.

    Calling connect() again rebinds the default store to the new client.
    """
    global _store
    store = DocumentStore(settings=settings)
    store.connect(client)
    _store = store
    return store


def get_store() -> DocumentStore:
    """
    Get the process-wide default store.

    Before connect() this returns an unconnected store whose operations raise
    NotConnectedError.
    """
    global _store
    if _store is None:
        _store = DocumentStore()
    return _store


def reset_store() -> None:
    """
    Drop the process-wide default store.
    """
    global _store
    _store = None

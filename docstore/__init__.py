"""docstore: async CRUD facade over path-addressed document databases."""

__version__ = "0.1.0"
__author__ = "docstore Team"

from .connection import connect, get_store
from .exceptions import (
    ConfigurationError,
    DocStoreError,
    DocumentNotFoundError,
    InvalidArgumentError,
    NotConnectedError,
)
from .ids import ID_ALPHABET, generate_id
from .models import DocumentSnapshot, Record
from .store import DocumentStore

__all__ = [
    "__version__",
    "__author__",
    # Facade
    "DocumentStore",
    "connect",
    "get_store",
    # Models
    "DocumentSnapshot",
    "Record",
    # IDs
    "ID_ALPHABET",
    "generate_id",
    # Errors
    "DocStoreError",
    "InvalidArgumentError",
    "DocumentNotFoundError",
    "ConfigurationError",
    "NotConnectedError",
]

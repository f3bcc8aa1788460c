"""Collection and document path helpers."""

import posixpath

from .exceptions import InvalidArgumentError


def normalize_path(path: str) -> str:
    """Collapse duplicate and trailing slashes, resolve '.' and '..' segments."""
    normalized = posixpath.normpath(path)
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")
    return normalized


def join_path(collection_path: str, doc_id: str) -> str:
    """Join a collection path and a document ID into a document path."""
    return normalize_path(posixpath.join(collection_path, doc_id))


def split_document_path(path: str) -> tuple[str, str]:
    """Split a document path into (collection_path, doc_id).

    Leading slashes are ignored. Raises InvalidArgumentError if the path has
    fewer than two segments.
    """
    normalized = normalize_path(path).strip("/")
    collection_path, sep, doc_id = normalized.rpartition("/")
    if not sep or not collection_path or not doc_id or doc_id in {".", ".."}:
        raise InvalidArgumentError(
            f"Not a document path: {path!r}", argument="path", path=path
        )
    return collection_path, doc_id

"""Custom exceptions for the document store facade."""


class DocStoreError(Exception):
    """Base exception for document store errors."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class InvalidArgumentError(DocStoreError, ValueError):
    """A required argument was missing or malformed. Raised before any I/O."""

    def __init__(self, message: str, argument: str | None = None, path: str | None = None):
        super().__init__(message, path=path)
        self.argument = argument


class DocumentNotFoundError(DocStoreError, LookupError):
    """No document exists at the resolved path."""

    def __init__(self, doc_id: str, path: str):
        super().__init__(f"unknown id({doc_id}) for ref({path})", path=path)
        self.doc_id = doc_id


class ConfigurationError(DocStoreError):
    """Store is misconfigured."""

    pass


class NotConnectedError(ConfigurationError):
    """Operation issued before a backend client was connected."""

    pass

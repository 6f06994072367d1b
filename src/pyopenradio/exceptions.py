"""Custom exception hierarchy for pyopenradio."""

from __future__ import annotations


class OpenRadioError(Exception):
    """Base exception for all pyopenradio errors."""


class OpenRadioConfigError(OpenRadioError):
    """Invalid or missing configuration."""


class StorageError(OpenRadioError):
    """Failure in the persistent station storage."""

    def __init__(self, message: str, *, namespace: str = "") -> None:
        self.namespace = namespace
        super().__init__(message)


class BackendUnavailableError(StorageError):
    """Persisted state could not be read or written.

    Raised for I/O failures and for namespace files that can no longer
    be parsed.  Stores never retry; the error is surfaced to the caller
    and the membership cache is left untouched.
    """


class MalformedRecordError(StorageError):
    """A persisted entry cannot be decoded into a station record.

    Enumerating stores catch this, log the entry and carry on with the
    rest of the collection.
    """

    def __init__(self, message: str, *, namespace: str = "", key: str = "") -> None:
        self.key = key
        super().__init__(message, namespace=namespace)


class RegistryNotInitializedError(OpenRadioError):
    """Dependencies were requested before ``DependencyRegistry.init``."""

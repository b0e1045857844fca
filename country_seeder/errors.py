"""Seeder exception hierarchy.

Each pipeline stage wraps the library error it hits in one of these,
so the entry points only have to catch SeederError.
"""


class SeederError(Exception):
    """Base exception for all seeding failures."""


class NetworkError(SeederError):
    """Raised when the countries endpoint is unreachable or returns non-2xx."""


class ParseError(SeederError):
    """Raised when a response body or the snapshot is not the expected JSON."""


class FilesystemError(SeederError):
    """Raised when the snapshot cannot be written."""


class StoreError(SeederError):
    """Raised when MongoDB rejects a delete or insert, or a record fails the schema."""

"""
Exception types raised by the catalog backend.

Backend transport and query failures are raised by the Supabase client
itself (postgrest.exceptions.APIError and friends) and are not wrapped here.
"""


class CatalogError(Exception):
    """Base class for errors originating in this package."""


class ConfigurationError(CatalogError, ValueError):
    """Required configuration is missing or malformed."""


class RecordValidationError(CatalogError, ValueError):
    """A backend row does not match the expected record shape."""

    def __init__(self, record_type: str, message: str):
        self.record_type = record_type
        super().__init__(f"Invalid {record_type} record: {message}")


class DuplicateRecordError(RecordValidationError):
    """A collection holds two records with the same identifier."""

    def __init__(self, record_type: str, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(record_type, f"duplicate {field} {value!r}")

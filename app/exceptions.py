from typing import Any, Mapping, Optional


class StoreError(Exception):
    """Raised when a record store operation fails (connectivity, driver error, rejected write).

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, driver info)
        code: optional machine-readable error code
    """

    default_message = "Store operation failed"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class InvalidIdentifierError(StoreError):
    """Raised when a record identifier cannot be interpreted by the store (malformed ObjectId)."""

    default_message = "Invalid identifier"


class StoreValidationError(StoreError):
    """Raised when the store rejects a document that breaks the meal schema.

    ``details`` carries the field errors reported by pydantic.
    """

    default_message = "Document failed validation"

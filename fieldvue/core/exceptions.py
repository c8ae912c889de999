"""
Custom exception hierarchy for the FieldVue backend.

Infrastructure adapters (detection clients, image fetcher, blob store,
repositories) raise these; the room analysis service catches them per image
and records error markers instead of letting them escape the background task.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class FieldVueError(Exception):
    """Base exception for all FieldVue errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "An error occurred. Please try again."
        self.details = details or {}


# -----------------------------------------------------------------------------
# External services
# -----------------------------------------------------------------------------


class ExternalServiceError(FieldVueError):
    """Base exception for external service errors."""

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        retryable: bool = True,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.service = service
        self.retryable = retryable


class DetectionServiceError(ExternalServiceError):
    """Raised when the vision detection call fails (network, non-2xx, quota)."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", "Image analysis failed. Please try again.")
        super().__init__(message, service="detection", **kwargs)


class MalformedDetectionError(ExternalServiceError):
    """Raised when the detector answers but the payload is not usable JSON."""

    def __init__(self, message: str, raw_response: Optional[str] = None, **kwargs):
        super().__init__(
            message,
            service="detection",
            retryable=False,
            user_message="Image analysis returned an unreadable result.",
            **kwargs,
        )
        self.raw_response = raw_response


class ImageFetchError(ExternalServiceError):
    """Raised when an uploaded image cannot be fetched for analysis."""

    def __init__(self, message: str, retryable: bool = True, **kwargs):
        super().__init__(message, service="image_fetch", retryable=retryable, **kwargs)


# -----------------------------------------------------------------------------
# Storage and persistence
# -----------------------------------------------------------------------------


class StorageError(FieldVueError):
    """Raised when the blob store cannot save, read or delete an object."""
    pass


class DatabaseError(FieldVueError):
    """Raised when a repository operation fails."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation

"""Error taxonomy shared by the store service.

Each error carries the HTTP status it is rendered with by
`libs.common.error_handler`.
"""

from typing import Optional

from fastapi import status


class StoreError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(StoreError):
    """Missing, invalid or expired credential, or a mismatched identity."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class ValidationError(StoreError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class NotFound(StoreError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class StorageError(StoreError):
    """Persistence failure. The underlying driver message is only logged."""

    default_message = "Database error"


class NotificationError(StoreError):
    """Mail transport failure."""

    default_message = "Email send failed"

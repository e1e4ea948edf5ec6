"""
Domain errors.

Every error carries a message that can be shown to the user as-is and the
HTTP status the API layer answers with.
"""
from typing import Optional


class VztError(Exception):
    status_code = 400
    default_message = "Request failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingFields(VztError):
    default_message = "Please fill in all fields"


class InvalidRole(VztError):
    default_message = "Unknown role"


class DuplicateUser(VztError):
    status_code = 409
    default_message = "A user with this email already exists"


class MissingCredentials(VztError):
    default_message = "Please fill in email and password"


class InvalidCredentials(VztError):
    status_code = 401
    default_message = "Invalid login credentials"


class NotAuthenticated(VztError):
    status_code = 401
    default_message = "Not authenticated"


class PermissionDenied(VztError):
    status_code = 403
    default_message = "Forbidden"


class UserNotFound(VztError):
    status_code = 404
    default_message = "User not found"


class LocationUnavailable(VztError):
    status_code = 422
    default_message = "Unable to obtain GPS position"

    def __init__(self, reason: Optional[str] = None):
        self.reason = reason
        super().__init__(f"{self.default_message}: {reason}" if reason else None)


class InvalidInput(VztError):
    status_code = 422
    default_message = "Please fill in all fields"

    def __init__(self, message: Optional[str] = None, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class StorageFailure(VztError):
    status_code = 503
    default_message = "Storage is unavailable"

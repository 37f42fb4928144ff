# mentora/exceptions.py
"""Domain errors raised by the service layer.

Each error carries the HTTP status and a stable machine-readable code so the
routers can translate it without a lookup table.
"""


class MentoraError(Exception):
    """Base exception for business logic errors"""
    status_code = 400
    code = "error"

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class InvalidInputError(MentoraError):
    """Raised for missing or malformed fields"""
    status_code = 400
    code = "invalid_input"


class ForbiddenError(MentoraError):
    """Raised when the principal has no relationship to the entity"""
    status_code = 403
    code = "forbidden"


class InvalidRoleError(ForbiddenError):
    """Raised when the principal's role cannot perform the operation"""
    code = "invalid_role"


class NotFoundError(MentoraError):
    """Raised when a referenced user, request or session is absent"""
    status_code = 404
    code = "not_found"


class ConflictError(MentoraError):
    """Raised for duplicate pending requests, matches or bookings"""
    status_code = 409
    code = "conflict"


class InvalidStateError(MentoraError):
    """Raised when a transition is attempted from a non-eligible state"""
    status_code = 409
    code = "invalid_state"


class PersistenceError(MentoraError):
    """Raised when the storage layer fails unexpectedly"""
    status_code = 500
    code = "internal_error"

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)

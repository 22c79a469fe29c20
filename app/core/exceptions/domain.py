from app.core.exceptions.base import AppException


class AuthenticationError(AppException):
    """Raised when authentication fails (wrong password, invalid token, etc.)."""

    status_code = 401

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message)


class AuthorizationError(AppException):
    """Raised when a user has a role on a board but it lacks the required capability."""

    status_code = 403

    def __init__(self, message: str = "You do not have permission to perform this action"):
        super().__init__(message)


class ResourceNotFoundError(AppException):
    """Raised when a requested resource does not exist or is not visible to the user."""

    status_code = 404

    def __init__(self, resource: str = "Resource", identifier: str = ""):
        message = f"{resource} not found"
        if identifier:
            message = f"{resource} '{identifier}' not found"
        super().__init__(message)


class DuplicateResourceError(AppException):
    """Raised when attempting to create a resource that already exists."""

    status_code = 409

    def __init__(self, resource: str = "Resource", identifier: str = ""):
        message = f"{resource} already exists"
        if identifier:
            message = f"{resource} '{identifier}' already exists"
        super().__init__(message)


class ValidationError(AppException):
    """Raised when input validation fails."""

    status_code = 400

    def __init__(self, message: str = "Validation failed"):
        super().__init__(message)


class InvalidRoleError(ValidationError):
    """Raised when a board role outside owner/editor/commenter/viewer enters the system."""

    def __init__(self, role: str = ""):
        self.role = role
        super().__init__(f"Invalid board role '{role}'")


class SelfShareError(ValidationError):
    """Raised when sharing a board with a user who already owns it."""

    def __init__(self, message: str = "Cannot share a board with its owner"):
        super().__init__(message)


class PrecisionExhaustedError(AppException):
    """Raised when two neighbor positions leave no room for an item between them."""

    status_code = 409

    def __init__(self, before: float, after: float):
        self.before = before
        self.after = after
        super().__init__(f"No room between positions {before!r} and {after!r} - reindex required")


class PersistenceError(AppException):
    """Raised when the database fails during an ownership or sibling lookup."""

    status_code = 503

    def __init__(self, message: str = "Database operation failed"):
        super().__init__(message)

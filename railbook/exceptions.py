"""Error taxonomy shared by the booking, search and status services.

Services raise these; ``railbook.main`` turns each into a single JSON error
response with the matching HTTP status code.
"""


class RailbookError(Exception):
    """Base class for every failure the engine reports to a caller"""

    status_code = 500
    default_message = "Something went wrong, please try again"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(RailbookError):
    """Bad or missing input; the caller should re-prompt"""

    status_code = 400
    default_message = "Invalid request"


class AuthenticationRequired(RailbookError):
    """No authenticated user; the caller should redirect to sign-in"""

    status_code = 401
    default_message = "Please login to continue"


class NotFound(RailbookError):
    status_code = 404
    default_message = "Not found"


class UniquenessViolation(RailbookError):
    """Reservation code collision. Retried internally by the booking service."""

    status_code = 409
    default_message = "Could not allocate a unique reservation code"


class PersistenceError(RailbookError):
    status_code = 503
    default_message = "Booking could not be saved, please try again"


def describe_validation_errors(errors) -> str:
    """Collapse pydantic error entries into one readable message"""
    parts = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        message = error.get("msg", "Invalid value")
        parts.append(f"{'.'.join(loc)}: {message}" if loc else message)
    return "; ".join(parts) or ValidationError.default_message

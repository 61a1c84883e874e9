"""Error taxonomy for the link service.

Every error carries a client-safe message and the HTTP status it maps to.
"""


class ShortLinkError(Exception):
    """Base class for all service errors."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ShortLinkError):
    """Bad or missing input, correctable by the caller."""

    status_code = 400
    default_message = "Invalid request"


class AuthenticationRequiredError(ShortLinkError):
    """The operation needs an authenticated caller."""

    status_code = 401
    default_message = "Authentication required"


class AccessDeniedError(ShortLinkError):
    """The caller does not own the record."""

    status_code = 403
    default_message = "Access denied"


class NotFoundError(ShortLinkError):
    """No record for the given short code or id."""

    status_code = 404
    default_message = "Short URL not found"


class ExpiredError(ShortLinkError):
    """The record exists but its access window has closed."""

    status_code = 410
    default_message = "This short URL has expired"


class PersistenceError(ShortLinkError):
    """The store is unavailable or rejected the write."""

    status_code = 500
    default_message = "Storage error"


class ShortCodeConflictError(PersistenceError):
    """Insert hit the unique index on short_code.

    Raised by stores and consumed by the code allocator as a retry trigger.
    """

    default_message = "Short code already exists"

"""Service-level error taxonomy.

Services raise these; the HTTP layer maps them to status codes in
``fitassess.main``. ``reason`` is a short machine-checkable string.
"""


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    status_code = 500

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class NotFoundError(ServiceError):
    """Entity absent or not owned by the caller."""

    status_code = 404


class ValidationError(ServiceError):
    """Insufficient data or out-of-range input, detected before any mutation."""

    status_code = 400


class InternalError(ServiceError):
    """Persistence or infrastructure failure."""

    status_code = 500

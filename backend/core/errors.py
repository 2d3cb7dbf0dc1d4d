"""
Domain errors raised by the validation and storage layers.

None of these know about HTTP; core.exceptions maps them to responses.
"""

FETCH_FAILED = "fetch-failed"
CREATE_FAILED = "create-failed"
UPDATE_FAILED = "update-failed"
DELETE_FAILED = "delete-failed"
NOT_FOUND = "not-found"


class PortfolioError(Exception):
    """Base class for every error raised by the portfolio core."""


class ValidationFailed(PortfolioError):
    """One or more payload fields broke their constraints.

    `errors` is a list of {"field": <dotted path>, "message": <text>} dicts,
    one entry per violation.
    """

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("Validation failed")


class BadRequestError(PortfolioError):
    """Malformed request outside the body, e.g. a non-integer id."""

    def __init__(self, message):
        self.message = message
        super().__init__(message)


class StorageError(PortfolioError):
    kind = None

    def __init__(self, message, kind=None):
        if kind is not None:
            self.kind = kind
        self.message = message
        super().__init__(message)


class NotFoundError(StorageError):
    kind = NOT_FOUND


class StorageFault(StorageError):
    """The persistence engine failed. Carries one of the *-failed kinds."""

# budget_advisor/errors.py
from __future__ import annotations


class AdvisorError(ValueError):
    """Base class for every failure of the advice request."""


class AdvisorRequestError(AdvisorError):
    """Network failure, timeout, or a non-success HTTP status."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class AdvisorAuthError(AdvisorRequestError):
    """The endpoint rejected the API key (missing or invalid)."""


class AdvisorResponseError(AdvisorError):
    """The reply was not JSON or did not match the declared advice shape."""


# Shown to the user for any of the above; details only go to the log.
GENERIC_ERROR_MESSAGE = "Failed to fetch advice. Please check your API key and try again."

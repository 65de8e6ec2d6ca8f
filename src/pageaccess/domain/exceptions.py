"""Domain exceptions.

Every error that reaches an API client carries a stable ``code`` string and
maps to one HTTP status via the class ``status`` attribute.
"""

from typing import Any


class PageAccessError(Exception):
    """Base exception for pageaccess."""

    status: int = 500

    def __init__(self, code: str, details: Any = None) -> None:
        super().__init__(code)
        self.code = code
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        """Error body as returned to the client."""
        body: dict[str, Any] = {"error": self.code}
        if self.details is not None:
            body["details"] = self.details
        return body


class AuthenticationFailed(PageAccessError):
    """Caller did not present a usable bearer token."""

    status = 401


class PermissionDenied(PageAccessError):
    """Caller is authenticated but is not an admin."""

    status = 403

    def __init__(self, code: str = "forbidden", details: Any = None) -> None:
        super().__init__(code, details)


class RateLimited(PageAccessError):
    """Caller exhausted the request window."""

    status = 429

    def __init__(self, code: str = "rate_limited", details: Any = None) -> None:
        super().__init__(code, details)


class ValidationError(PageAccessError):
    """Validation failed for input data."""

    status = 400


class NotFound(PageAccessError):
    """Requested resource was not found."""

    status = 404


class StoreError(PageAccessError):
    """Backing store failed while serving the request."""

    status = 500


class RepositoryError(Exception):
    """Raised by persistence adapters when a store call fails.

    Not a client-facing error: use cases translate it into a ``StoreError``
    whose code names the lookup that failed.
    """

    pass

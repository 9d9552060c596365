"""
Custom error classes for the polishing client.
"""
from typing import Optional


class AppError(Exception):
    """Base client error."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[dict] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert error to dictionary for display or logging."""
        return {
            "error": True,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


# =============================================================================
# TRANSPORT ERRORS
# =============================================================================

class TransportError(AppError):
    """A single request/response exchange failed."""

    def __init__(
        self,
        message: str,
        code: str,
        method: str = "",
        url: str = "",
        details: Optional[dict] = None,
    ):
        self.method = method
        self.url = url
        details = {"method": method, "url": url, **(details or {})}
        super().__init__(message, code, details)


class AddressError(TransportError):
    """Request could not be turned into a valid address."""

    def __init__(self, message: str = "Invalid request address.", method: str = "", url: str = ""):
        super().__init__(message, "ADDRESS_ERROR", method, url)


class BadStatusError(TransportError):
    """Backend answered with a status outside 2xx."""

    def __init__(self, status_code: int, method: str = "", url: str = "", body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"Backend returned status {status_code}.",
            "BAD_STATUS",
            method,
            url,
            {"status_code": status_code},
        )


class DecodeError(TransportError):
    """Response body is not valid JSON or has the wrong shape."""

    def __init__(self, message: str = "Backend returned an invalid response.", method: str = "", url: str = ""):
        super().__init__(message, "DECODE_ERROR", method, url)


class NetworkError(TransportError):
    """Connection, DNS or timeout failure reported by httpx."""

    def __init__(self, message: str = "Couldn't reach the polishing service.", method: str = "", url: str = ""):
        super().__init__(message, "NETWORK_ERROR", method, url)


# =============================================================================
# OPERATION ERRORS
# =============================================================================

class OperationFailed(AppError):
    """A client operation failed. The underlying error is chained as __cause__."""

    def __init__(self, operation: str, message: str, code: str = "OPERATION_FAILED"):
        self.operation = operation
        super().__init__(message, code, {"operation": operation})


class PolishFailed(OperationFailed):
    """Polishing a draft failed."""

    def __init__(self, message: str = "Could not process your request. Please try again later."):
        super().__init__("polish", message, "POLISH_FAILED")


class RefineFailed(OperationFailed):
    """Refining the previous text failed."""

    def __init__(self, message: str = "Refine failed. Please try again."):
        super().__init__("refine", message, "REFINE_FAILED")


# =============================================================================
# CALLER PRECONDITIONS
# =============================================================================

class InvalidDraftError(AppError):
    """Draft has neither text nor an incoming mail."""

    def __init__(self, message: str = "Please enter your email (or paste the incoming email)."):
        super().__init__(message, "INVALID_DRAFT")


class SessionRequiredError(AppError):
    """Refine requested before any assistant turn exists."""

    def __init__(self):
        super().__init__("Generate a result first.", "SESSION_REQUIRED")

"""
PSN Exceptions

Responsibilities:
- Define the package exception hierarchy
- Carry the remote error text and context for in-band API failures

Transport failures are not part of this hierarchy: httpx errors raised while
talking to the network reach the caller unchanged.
"""


class PSNError(Exception):
    """
    Base exception for all psn errors.

    Attributes:
        message: Error message
        details: Optional dict with additional error context
    """

    def __init__(self, message: str, details: dict = None):
        """Initialize psn error."""
        super().__init__(message)
        self.message = message
        self.details = details or {}


class APIError(PSNError):
    """
    The remote API answered with an in-band error object.

    PSN reports failures as ``{"error": {"message": ...}}`` inside the body,
    whatever the HTTP status. ``details`` holds the raw error object under
    ``"error"`` and the HTTP status under ``"status_code"``.
    """
    pass


class AuthenticationError(PSNError):
    """
    Credentials are missing.

    Raised before a request is sent when:
    - The credentials provider has no authorization token
    - An endpoint needs the acting account's online id and none is known
    """
    pass


class ResponseValidationError(PSNError):
    """An error-free payload did not match the operation's result type."""
    pass


class UserNotReadyError(PSNError):
    """An operation was invoked on a User whose profile has not been fetched."""
    pass


class UnsupportedMessageTypeError(PSNError, NotImplementedError):
    """Only text messages can be sent; audio and image are not implemented."""
    pass
